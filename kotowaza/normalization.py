# kotowaza/normalization.py
"""
kotowaza.normalization
======================

Comparison helpers shared by the catalog filters and search.

Design goals
------------
- One place that decides how user input is folded before comparison.
- Tolerant of bad input: anything that is not a non-empty string folds to
  the empty string, which callers treat as "no match".
- No changes to stored values; records keep their original casing.

Typical usage
-------------
>>> from kotowaza.normalization import fold_case, normalize_level
>>> fold_case("Motivation")
'motivation'
>>> normalize_level(" n3 ")
'N3'
"""

from __future__ import annotations

from typing import Any

__all__ = ["is_query", "fold_case", "normalize_level"]


def is_query(value: Any) -> bool:
    """Return True if `value` is a usable query/filter argument."""
    return isinstance(value, str) and value != ""


def fold_case(value: Any) -> str:
    """
    Case-insensitive comparison key.

    Plain `str.lower()`; "ß" stays "ß" rather than becoming "ss".
    """
    if not is_query(value):
        return ""
    return value.lower()


def normalize_level(value: Any) -> str:
    """
    Canonical proficiency level spelling ("n3" -> "N3").

    Surrounding whitespace is dropped; an input that is empty after
    stripping yields "".
    """
    if not is_query(value):
        return ""
    return value.strip().upper()
