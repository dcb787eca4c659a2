# kotowaza/catalog.py
"""
kotowaza/catalog.py

Read-only accessor over an immutable collection of proverb records.

A `Catalog` is built once from a sequence of records and then only
queried. It owns:

  * the records, as a tuple in dataset order
  * an `IdentityIndex` (id -> Record), built in the constructor

Query semantics
---------------
- Unknown ids, unmatched filters and empty queries produce empty results
  (None or ()); they never raise.
- Arguments that are empty, None or not a `str` count as "no query".
- Every sequence returned is a tuple, so callers cannot mutate catalog
  state through a result.
- Results keep dataset order.

Errors (duplicate ids, empty dataset, malformed records) are raised at
construction time only.

No locking is needed: nothing is written after `__init__` returns, so a
catalog can be shared between threads once constructed.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from .config import get_settings
from .errors import EmptyCatalogError
from .index import IdentityIndex
from .loader import PathLike, load_records, parse_records
from .logging_config import get_logger
from .normalization import fold_case, is_query, normalize_level
from .types import ProficiencyLevel, Record, Tag

logger = get_logger(__name__)

Records = Tuple[Record, ...]


class Catalog:
    """
    Lookup, filter and aggregate operations over a fixed set of records.

    Args:
        records: records in canonical order; consumed once.
        reference_base_url: prefix for `build_reference_url`; defaults to
            `Settings.REFERENCE_BASE_URL`.

    Raises:
        EmptyCatalogError: `records` is empty.
        DuplicateRecordError: two records share an id.
    """

    __slots__ = ("_records", "_index", "_reference_base_url")

    def __init__(
        self,
        records: Iterable[Record],
        *,
        reference_base_url: Optional[str] = None,
    ) -> None:
        self._records: Records = tuple(records)
        if not self._records:
            raise EmptyCatalogError()

        self._index = IdentityIndex(self._records)

        base = reference_base_url or get_settings().REFERENCE_BASE_URL
        self._reference_base_url = base.rstrip("/") + "/"

        logger.debug("catalog_built", records=len(self._records))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, path: Optional[PathLike] = None, **kwargs: Any) -> "Catalog":
        """Load a dataset file (bundled dataset by default) into a Catalog."""
        return cls(load_records(path), **kwargs)

    @classmethod
    def from_records(cls, items: Iterable[Mapping[str, Any]], **kwargs: Any) -> "Catalog":
        """Build a Catalog from raw JSON-shaped dicts."""
        return cls(parse_records(items), **kwargs)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _select(self, predicate: Callable[[Record], bool]) -> Records:
        return tuple(record for record in self._records if predicate(record))

    @staticmethod
    def _distinct_sorted(values: Iterable[str]) -> Tuple[str, ...]:
        return tuple(sorted(set(values)))

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_all(self) -> Records:
        """All records in dataset order."""
        return self._records

    def count(self) -> int:
        """Number of records; always equals `len(list_all())`."""
        return len(self._records)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_by_id(self, record_id: Any = None) -> Optional[Record]:
        """
        Record with exactly this id (case-sensitive), or None.
        """
        return self._index.get(record_id)

    def get_related(self, record_id: Any = None) -> Records:
        """
        Records referenced by `record_id`'s `related` list, in listed order.

        Dangling references are skipped; an unknown id yields ().
        """
        record = self._index.get(record_id)
        if record is None:
            return ()
        resolved: List[Record] = []
        for rid in record.related:
            hit = self._index.get(rid)
            if hit is not None:
                resolved.append(hit)
        return tuple(resolved)

    # ------------------------------------------------------------------
    # Search and filters
    # ------------------------------------------------------------------

    def search(self, query: Any = None) -> Records:
        """
        Substring search across the text fields of every record.

        Japanese text and reading are matched as-is; romaji, literal
        translation and both meanings are matched case-insensitively.
        """
        if not is_query(query):
            return ()
        folded = fold_case(query)

        def matches(record: Record) -> bool:
            return (
                query in record.original_text
                or query in record.phonetic_reading
                or folded in fold_case(record.romanized_form)
                or folded in fold_case(record.literal_translation)
                or folded in fold_case(record.meaning.primary)
                or folded in fold_case(record.meaning.secondary)
            )

        return self._select(matches)

    def filter_by_tag(self, tag: Any = None) -> Records:
        """Records carrying `tag` (case-insensitive) in their English tags."""
        return self._filter_tags(tag, lambda record: record.tags)

    def filter_by_tag_secondary(self, tag: Any = None) -> Records:
        """Records carrying `tag` (case-insensitive) in their Indonesian tags."""
        return self._filter_tags(tag, lambda record: record.tags_secondary)

    def _filter_tags(self, tag: Any, tags_of: Callable[[Record], Sequence[Tag]]) -> Records:
        if not is_query(tag):
            return ()
        wanted = fold_case(tag)
        return self._select(lambda record: any(fold_case(t) == wanted for t in tags_of(record)))

    def filter_by_level(self, level: Any = None) -> Records:
        """Records at proficiency level `level`; "n3" and "N3" are equivalent."""
        wanted = normalize_level(level)
        if not wanted:
            return ()
        return self._select(lambda record: record.proficiency_level == wanted)

    # ------------------------------------------------------------------
    # Random access
    # ------------------------------------------------------------------

    def random_entry(self, rng: Optional[random.Random] = None) -> Record:
        """
        One record chosen uniformly at random.

        Pass a seeded `random.Random` for reproducible draws.
        """
        return (rng or random).choice(self._records)

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def list_tags(self) -> Tuple[Tag, ...]:
        """Distinct English tags, sorted ascending."""
        return self._distinct_sorted(t for record in self._records for t in record.tags)

    def list_tags_secondary(self) -> Tuple[Tag, ...]:
        """Distinct Indonesian tags, sorted ascending."""
        return self._distinct_sorted(
            t for record in self._records for t in record.tags_secondary
        )

    def list_levels(self) -> Tuple[ProficiencyLevel, ...]:
        """Distinct proficiency levels present in the dataset, sorted ascending."""
        return self._distinct_sorted(
            record.proficiency_level
            for record in self._records
            if record.proficiency_level
        )

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def build_reference_url(self, record_id: str) -> str:
        """
        Public reference page for `record_id`.

        Pure formatting: the id is neither escaped nor checked for existence.
        """
        return f"{self._reference_base_url}{record_id}/"

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._index

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(records={len(self._records)})"


__all__ = ["Catalog", "Records"]
