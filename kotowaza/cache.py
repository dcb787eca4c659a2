# kotowaza/cache.py
"""
kotowaza/cache.py
-----------------

Process-wide default Catalog.

Applications that want explicit ownership construct a `Catalog`
themselves and pass it around. For quick use the package-level functions
(`kotowaza.search(...)`, `kotowaza.get_by_id(...)`, ...) delegate to the
catalog managed here.

Goals
=====
- Load and index the dataset at most once per process.
- Construction happens-before any query: the first caller builds the
  catalog under a lock, later callers take the lock-free fast path.
- Small, testable API to inject, inspect or drop the shared instance.

This module does not persist anything to disk.
"""

from __future__ import annotations

import threading
from typing import Optional

from .catalog import Catalog
from .logging_config import get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Internal state
# ---------------------------------------------------------------------------

_CATALOG: Optional[Catalog] = None

_CATALOG_LOCK = threading.RLock()


# ---------------------------------------------------------------------------
# Core cache API
# ---------------------------------------------------------------------------


def get_catalog() -> Catalog:
    """
    Return the shared Catalog, building it from the configured dataset on
    first use.

    Raises:
        Any CatalogError from loading or construction; nothing is cached
        on failure.
    """
    global _CATALOG

    existing = _CATALOG
    if existing is not None:
        return existing

    with _CATALOG_LOCK:
        if _CATALOG is None:
            _CATALOG = Catalog.from_file()
            logger.info("catalog_default_ready", records=_CATALOG.count())
        return _CATALOG


def set_catalog(catalog: Catalog) -> None:
    """
    Install `catalog` as the shared instance.
    Useful for tests or dependency injection.
    """
    global _CATALOG
    if not isinstance(catalog, Catalog):
        raise TypeError("catalog must be a Catalog instance")
    with _CATALOG_LOCK:
        _CATALOG = catalog


def clear_catalog() -> None:
    """Drop the shared instance; the next `get_catalog()` reloads it."""
    global _CATALOG
    with _CATALOG_LOCK:
        _CATALOG = None


def is_loaded() -> bool:
    return _CATALOG is not None


__all__ = ["get_catalog", "set_catalog", "clear_catalog", "is_loaded"]
