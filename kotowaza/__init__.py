# kotowaza/__init__.py
"""
kotowaza
--------

Japanese proverbs (kotowaza) with Indonesian and English meanings,
example sentences, JLPT levels and tags, served from an embedded dataset.

Two ways to use it:

    from kotowaza import Catalog

    catalog = Catalog.from_file()           # explicit ownership
    catalog.get_by_id("nanakorobi-yaoki")

or the package-level functions, which share one lazily loaded catalog:

    import kotowaza

    kotowaza.search("monkey")
    kotowaza.filter_by_level("n3")
    kotowaza.build_reference_url("nanakorobi-yaoki")

Layout:
    - types.py: Record / Meaning value objects
    - loader.py: dataset file -> tuple of Records
    - index.py: id -> Record index
    - catalog.py: the query operations
    - cache.py: the shared default Catalog
    - config.py / logging_config.py: settings and structlog setup
"""

from __future__ import annotations

import random
from typing import Any, Optional, Tuple

from .cache import clear_catalog, get_catalog, set_catalog
from .catalog import Catalog
from .config import Settings, get_settings, set_settings
from .errors import (
    CatalogError,
    DatasetFormatError,
    DatasetNotFound,
    DuplicateRecordError,
    EmptyCatalogError,
    RecordFormatError,
)
from .loader import bundled_dataset_path, load_records
from .logging_config import configure_logging
from .types import PROFICIENCY_LEVELS, Meaning, Record

__version__ = "1.0.0"


# ---------------------------------------------------------------------------
# Package-level shortcuts over the shared catalog
# ---------------------------------------------------------------------------


def list_all() -> Tuple[Record, ...]:
    return get_catalog().list_all()


def get_by_id(record_id: Any = None) -> Optional[Record]:
    return get_catalog().get_by_id(record_id)


def get_related(record_id: Any = None) -> Tuple[Record, ...]:
    return get_catalog().get_related(record_id)


def search(query: Any = None) -> Tuple[Record, ...]:
    return get_catalog().search(query)


def filter_by_tag(tag: Any = None) -> Tuple[Record, ...]:
    return get_catalog().filter_by_tag(tag)


def filter_by_tag_secondary(tag: Any = None) -> Tuple[Record, ...]:
    return get_catalog().filter_by_tag_secondary(tag)


def filter_by_level(level: Any = None) -> Tuple[Record, ...]:
    return get_catalog().filter_by_level(level)


def random_entry(rng: Optional[random.Random] = None) -> Record:
    return get_catalog().random_entry(rng)


def count() -> int:
    return get_catalog().count()


def list_tags() -> Tuple[str, ...]:
    return get_catalog().list_tags()


def list_tags_secondary() -> Tuple[str, ...]:
    return get_catalog().list_tags_secondary()


def list_levels() -> Tuple[str, ...]:
    return get_catalog().list_levels()


def build_reference_url(record_id: str) -> str:
    return get_catalog().build_reference_url(record_id)


__all__ = [
    # Core
    "Catalog",
    "Record",
    "Meaning",
    "PROFICIENCY_LEVELS",
    # Shared catalog
    "get_catalog",
    "set_catalog",
    "clear_catalog",
    # Loading
    "load_records",
    "bundled_dataset_path",
    # Settings / logging
    "Settings",
    "get_settings",
    "set_settings",
    "configure_logging",
    # Errors
    "CatalogError",
    "DatasetNotFound",
    "DatasetFormatError",
    "RecordFormatError",
    "DuplicateRecordError",
    "EmptyCatalogError",
    # Queries
    "list_all",
    "get_by_id",
    "get_related",
    "search",
    "filter_by_tag",
    "filter_by_tag_secondary",
    "filter_by_level",
    "random_entry",
    "count",
    "list_tags",
    "list_tags_secondary",
    "list_levels",
    "build_reference_url",
]
