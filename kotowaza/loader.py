# kotowaza/loader.py
"""
kotowaza/loader.py
==================

Helpers to read the proverb dataset from disk into `Record` objects.

Goals
-----
- One entry point, `load_records(path)`, returning the records in file
  order as an immutable tuple.
- Hide the package-data location behind `bundled_dataset_path()` and the
  `KOTOWAZA_DATA_PATH` override behind `resolve_dataset_path()`.
- Convert raw JSON objects through `Record.from_dict`, so the catalog only
  ever sees well-typed values.

Error behaviour
---------------
A single bad record fails the whole load; no partial dataset is returned.

- Missing file                    -> DatasetNotFound
- Unreadable file                 -> DatasetFormatError
- Undecodable JSON / non-array    -> DatasetFormatError
- Missing or mistyped field       -> RecordFormatError
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional, Tuple, Union

from .config import get_settings
from .errors import DatasetFormatError, DatasetNotFound
from .logging_config import get_logger
from .types import Record

logger = get_logger(__name__)

PathLike = Union[str, Path]

DATASET_FILENAME = "kotowaza.json"


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def bundled_dataset_path() -> Path:
    """Path of the dataset shipped inside the package."""
    return Path(__file__).resolve().parent / "data" / DATASET_FILENAME


def resolve_dataset_path(path: Optional[PathLike] = None) -> Path:
    """
    Pick the dataset file to load.

    Resolution order:
      1) explicit `path` argument
      2) `KOTOWAZA_DATA_PATH` (Settings.DATA_PATH)
      3) bundled dataset
    """
    if path is not None:
        return Path(path).expanduser()
    configured = get_settings().DATA_PATH
    if configured:
        return Path(configured).expanduser()
    return bundled_dataset_path()


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise DatasetNotFound(str(path))
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise DatasetFormatError(str(path), f"JSON decode error: {e}") from e
    except UnicodeDecodeError as e:
        raise DatasetFormatError(str(path), f"not UTF-8: {e}") from e
    except OSError as e:
        raise DatasetFormatError(str(path), f"read error: {e}") from e


def parse_records(items: Iterable[Any]) -> Tuple[Record, ...]:
    """
    Convert raw JSON objects into Records, preserving order.

    Raises:
        RecordFormatError: for the first malformed object.
    """
    return tuple(Record.from_dict(raw, position) for position, raw in enumerate(items))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_records(path: Optional[PathLike] = None) -> Tuple[Record, ...]:
    """
    Load the dataset and return its records in file order.

    Args:
        path: dataset file; defaults to `resolve_dataset_path()`.

    Raises:
        DatasetNotFound, DatasetFormatError, RecordFormatError
    """
    dataset_path = resolve_dataset_path(path)
    data = _read_json(dataset_path)

    if not isinstance(data, list):
        raise DatasetFormatError(
            str(dataset_path),
            f"root must be a JSON array, got {type(data).__name__}",
        )

    records = parse_records(data)
    logger.debug("catalog_dataset_loaded", path=str(dataset_path), records=len(records))
    return records


__all__ = [
    "DATASET_FILENAME",
    "bundled_dataset_path",
    "resolve_dataset_path",
    "parse_records",
    "load_records",
]
