# tests/conftest.py
import json

import pytest

from kotowaza import cache
from kotowaza.catalog import Catalog
from kotowaza.config import set_settings


def _entry(entry_id, **overrides):
    entry = {
        "id": entry_id,
        "japanese": "猿も木から落ちる",
        "reading": "さるもきからおちる",
        "romaji": "saru mo ki kara ochiru",
        "literal": "Even monkeys fall from trees",
        "meaning": {
            "id": "Sepandai-pandai tupai melompat, sekali waktu jatuh juga.",
            "en": "Even experts make mistakes.",
        },
        "examples": [],
        "tags": [],
        "tags_id": [],
        "jlpt": None,
        "related": [],
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def make_entry():
    """Factory for raw JSON-shaped records with sensible defaults."""
    return _entry


@pytest.fixture
def raw_records():
    """A small dataset covering every optional-field shape."""
    return [
        _entry(
            "nanakorobi-yaoki",
            japanese="七転び八起き",
            reading="ななころびやおき",
            romaji="Nanakorobi Yaoki",
            literal="Fall down seven times, get up eight",
            meaning={
                "id": "Berapa kali pun gagal, teruslah bangkit.",
                "en": "No matter how many times you fail, keep getting back up.",
            },
            examples=["人生は七転び八起きだ。"],
            tags=["motivation", "Perseverance"],
            tags_id=["motivasi"],
            jlpt="N3",
            related=["saru-mo-ki-kara-ochiru", "does-not-exist"],
        ),
        _entry(
            "saru-mo-ki-kara-ochiru",
            meaning={
                "id": "Orang ahli pun bisa salah.",
                "en": "Even a monkey falls from a tree sometimes.",
            },
            tags=["animals", "mistakes"],
            tags_id=["hewan", "kesalahan"],
            jlpt="N3",
            related=["nanakorobi-yaoki"],
        ),
        _entry(
            "neko-ni-koban",
            japanese="猫に小判",
            reading="ねこにこばん",
            romaji="neko ni koban",
            literal="Gold coins to a cat",
            meaning={
                "id": "Barang berharga bagi yang tidak mengerti nilainya.",
                "en": "Wasting something valuable on someone who cannot appreciate it.",
            },
            tags=["animals", "value"],
            tags_id=["hewan", "nilai"],
            jlpt="N2",
        ),
        _entry(
            "ichigo-ichie",
            japanese="一期一会",
            reading="いちごいちえ",
            romaji="ichigo ichie",
            literal="One time, one meeting",
            meaning={
                "id": "Hargai setiap pertemuan.",
                "en": "Treasure every encounter.",
            },
            tags=["life", "Motivation"],
        ),
    ]


@pytest.fixture
def catalog(raw_records):
    """Catalog over the fixture dataset with a fixed reference URL."""
    return Catalog.from_records(raw_records, reference_base_url="https://example.org/ref/")


@pytest.fixture
def dataset_file(tmp_path, raw_records):
    """Writes the fixture dataset to disk and returns its path."""
    path = tmp_path / "kotowaza.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(raw_records, f, ensure_ascii=False)
    return path


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch):
    """
    Every test starts with default settings and no shared catalog,
    regardless of the developer's environment.
    """
    for var in (
        "KOTOWAZA_DATA_PATH",
        "KOTOWAZA_REFERENCE_BASE_URL",
        "KOTOWAZA_LOG_LEVEL",
        "KOTOWAZA_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    set_settings(None)
    cache.clear_catalog()
    yield
    set_settings(None)
    cache.clear_catalog()
