# kotowaza/errors.py
"""
kotowaza/errors.py
------------------

Custom exception types for the catalog.

Every error here is raised while the dataset is being loaded or the
catalog is being constructed. Query operations never raise for an unknown
id, an unmatched filter or an empty query; those are empty results.

Callers can distinguish between:

    - a missing dataset file
    - a dataset document that is not a JSON array
    - an individual record with a missing or mistyped field
    - data-integrity problems (duplicate ids, empty dataset)

Typical usage:

    from kotowaza.errors import CatalogError, DatasetNotFound

    try:
        catalog = Catalog.from_file(path)
    except DatasetNotFound as e:
        log.error("dataset_missing", path=e.path)
    except CatalogError as e:
        log.error("dataset_invalid", error=str(e))
"""

from __future__ import annotations

from typing import Optional


class CatalogError(Exception):
    """
    Base class for all catalog errors.

    Catch this to handle any load/construction problem in one place; catch
    subclasses for finer-grained handling.
    """


class DatasetNotFound(CatalogError):
    """Raised when the dataset file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Dataset file '{path}' not found.")
        self.path = path


class DatasetFormatError(CatalogError):
    """
    Raised when the dataset document cannot be decoded or its root is not
    an array of records.
    """

    def __init__(self, path: str, detail: Optional[str] = None) -> None:
        msg = f"Invalid dataset document '{path}'."
        if detail:
            msg += f" Detail: {detail}"
        super().__init__(msg)
        self.path = path
        self.detail = detail


class RecordFormatError(CatalogError):
    """
    Raised when a single record lacks a required field or carries a value
    of the wrong type.

    `position` is the zero-based index of the record in the dataset.
    """

    def __init__(self, position: int, field: str, detail: Optional[str] = None) -> None:
        msg = f"Record #{position}: invalid field '{field}'."
        if detail:
            msg += f" Detail: {detail}"
        super().__init__(msg)
        self.position = position
        self.field = field
        self.detail = detail


class DuplicateRecordError(CatalogError):
    """Raised when two records share the same id."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Duplicate record id '{record_id}' in dataset.")
        self.record_id = record_id


class EmptyCatalogError(CatalogError):
    """Raised when a catalog would be built over zero records."""

    def __init__(self) -> None:
        super().__init__("Cannot build a catalog from an empty dataset.")


__all__ = [
    "CatalogError",
    "DatasetNotFound",
    "DatasetFormatError",
    "RecordFormatError",
    "DuplicateRecordError",
    "EmptyCatalogError",
]
