# kotowaza/types.py
"""
kotowaza/types.py

Core type definitions for the catalog.

This module contains *no I/O*. It defines the Python-side structures that
the loader produces and the catalog serves, mapped from the published
JSON dataset:

    [
      {
        "id": "nanakorobi-yaoki",
        "japanese": "七転び八起き",
        "reading": "ななころびやおき",
        "romaji": "nanakorobi yaoki",
        "literal": "fall down seven times, get up eight",
        "meaning": {"id": "...", "en": "..."},
        "examples": ["..."],
        "tags": ["motivation", "perseverance"],
        "tags_id": ["motivasi", "ketekunan"],
        "jlpt": "N3",
        "related": ["ishi-no-ue-nimo-sannen"]
      },
      ...
    ]

Design goals
------------
- Immutable values: frozen dataclasses, tuples for every sequence and a
  read-only mapping for unknown keys, so records can be shared between
  callers and threads without copying.
- Explicit typing and safe defaults for optional keys.
- Strict on required fields: a record that cannot be represented raises
  `RecordFormatError` instead of producing a half-filled object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .errors import RecordFormatError


# ---------------------------------------------------------------------------
# Common type aliases
# ---------------------------------------------------------------------------

RecordId = str
Tag = str
ProficiencyLevel = str

PROFICIENCY_LEVELS: Tuple[ProficiencyLevel, ...] = ("N1", "N2", "N3", "N4", "N5")
"""JLPT levels, hardest first."""

# JSON key -> Record attribute for required non-empty strings.
_REQUIRED_TEXT_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("id", "id"),
    ("japanese", "original_text"),
    ("reading", "phonetic_reading"),
    ("romaji", "romanized_form"),
    ("literal", "literal_translation"),
)

_KNOWN_KEYS = frozenset(
    {
        "id",
        "japanese",
        "reading",
        "romaji",
        "literal",
        "meaning",
        "examples",
        "tags",
        "tags_id",
        "jlpt",
        "related",
    }
)


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def _require_text(raw: Mapping[str, Any], key: str, position: int, label: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        raise RecordFormatError(position, label, "must be a non-empty string")
    return value


def _string_tuple(
    raw: Mapping[str, Any],
    key: str,
    position: int,
    *,
    required: bool = False,
) -> Tuple[str, ...]:
    if key not in raw or raw[key] is None:
        if required:
            raise RecordFormatError(position, key, "missing list")
        return ()
    value = raw[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise RecordFormatError(position, key, "must be a list of strings")
    return tuple(value)


# ---------------------------------------------------------------------------
# Meaning
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Meaning:
    """
    Interpretive meaning of a proverb in the two target languages.

    `primary` is English (JSON `meaning.en`), `secondary` is Indonesian
    (JSON `meaning.id`).
    """

    primary: str
    secondary: str

    @classmethod
    def from_dict(cls, raw: Any, position: int = 0) -> "Meaning":
        if not isinstance(raw, Mapping):
            raise RecordFormatError(position, "meaning", "must be an object")
        return cls(
            primary=_require_text(raw, "en", position, "meaning.en"),
            secondary=_require_text(raw, "id", position, "meaning.id"),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.secondary, "en": self.primary}


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Record:
    """
    One proverb entry.

    Core invariants:
      - id, original_text, phonetic_reading, romanized_form and
        literal_translation are non-empty strings
      - every sequence field is a tuple (possibly empty)
      - proficiency_level is None for unclassified entries
    """

    id: RecordId
    """Stable URL slug, unique within a dataset."""

    original_text: str
    """Proverb in Japanese script."""

    phonetic_reading: str
    """Kana reading of `original_text`."""

    romanized_form: str
    """Romaji transliteration."""

    literal_translation: str
    """Word-for-word English rendering."""

    meaning: Meaning
    """Interpretive meaning in both languages."""

    examples: Tuple[str, ...] = ()
    tags: Tuple[Tag, ...] = ()
    tags_secondary: Tuple[Tag, ...] = ()
    proficiency_level: Optional[ProficiencyLevel] = None

    related: Tuple[RecordId, ...] = ()
    """Ids of related entries; they are not guaranteed to exist."""

    extra: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}),
        hash=False,
    )
    """Keys present in the source object that have no dedicated attribute."""

    @classmethod
    def from_dict(cls, raw: Any, position: int = 0) -> "Record":
        """
        Build a Record from one JSON object of the dataset.

        Raises:
            RecordFormatError: a required field is missing or mistyped.
        """
        if not isinstance(raw, Mapping):
            raise RecordFormatError(position, "<record>", "must be an object")

        texts = {
            attr: _require_text(raw, key, position, key)
            for key, attr in _REQUIRED_TEXT_FIELDS
        }

        level = raw.get("jlpt")
        if level is not None and not isinstance(level, str):
            raise RecordFormatError(position, "jlpt", "must be a string or null")

        extra = {k: v for k, v in raw.items() if k not in _KNOWN_KEYS}

        return cls(
            meaning=Meaning.from_dict(raw.get("meaning"), position),
            examples=_string_tuple(raw, "examples", position),
            tags=_string_tuple(raw, "tags", position, required=True),
            tags_secondary=_string_tuple(raw, "tags_id", position),
            proficiency_level=level or None,
            related=_string_tuple(raw, "related", position),
            extra=MappingProxyType(extra),
            **texts,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the record back to the dataset's JSON shape.

        Unknown keys captured in `extra` are emitted unchanged.
        """
        out: Dict[str, Any] = {
            "id": self.id,
            "japanese": self.original_text,
            "reading": self.phonetic_reading,
            "romaji": self.romanized_form,
            "literal": self.literal_translation,
            "meaning": self.meaning.to_dict(),
            "examples": list(self.examples),
            "tags": list(self.tags),
            "tags_id": list(self.tags_secondary),
            "jlpt": self.proficiency_level,
            "related": list(self.related),
        }
        out.update(self.extra)
        return out


__all__ = [
    "RecordId",
    "Tag",
    "ProficiencyLevel",
    "PROFICIENCY_LEVELS",
    "Meaning",
    "Record",
]
