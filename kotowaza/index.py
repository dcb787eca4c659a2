# kotowaza/index.py
"""
kotowaza/index.py

In-memory identity index over a sequence of `Record`s.

Design goals
------------
- No filesystem knowledge (loader handles I/O).
- Exact, case-sensitive id lookups in O(1).
- Built once; never updated or invalidated. It can always be rebuilt from
  the records it was given.
- Duplicate ids are a data defect and fail construction rather than
  letting an arbitrary duplicate win.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence

from .errors import DuplicateRecordError
from .types import Record, RecordId


@dataclass(frozen=True)
class IdentityIndex:
    """
    Mapping from record id to Record.

    The mapping is exposed read-only through `by_id`.
    """

    records: Sequence[Record]
    by_id: Mapping[RecordId, Record] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        index: Dict[RecordId, Record] = {}
        for record in self.records:
            if record.id in index:
                raise DuplicateRecordError(record.id)
            index[record.id] = record
        object.__setattr__(self, "by_id", MappingProxyType(index))

    def get(self, record_id: Any) -> Optional[Record]:
        """Exact lookup; non-string keys simply miss."""
        if not isinstance(record_id, str):
            return None
        return self.by_id.get(record_id)

    def __contains__(self, record_id: object) -> bool:
        return isinstance(record_id, str) and record_id in self.by_id

    def __len__(self) -> int:
        return len(self.by_id)

    def __iter__(self) -> Iterator[RecordId]:
        return iter(self.by_id)


__all__ = ["IdentityIndex"]
