# tests/test_cache.py
"""
Shared default catalog and the package-level shortcuts built on it.
"""

import threading

import pytest

import kotowaza
from kotowaza import cache
from kotowaza.catalog import Catalog
from kotowaza.config import Settings, set_settings
from kotowaza.errors import DatasetNotFound


def test_get_catalog_builds_once():
    assert not cache.is_loaded()
    first = cache.get_catalog()
    assert cache.is_loaded()
    assert cache.get_catalog() is first


def test_get_catalog_uses_configured_dataset(dataset_file):
    set_settings(Settings(DATA_PATH=str(dataset_file)))
    assert cache.get_catalog().count() == 4


def test_failed_load_is_not_cached(tmp_path, dataset_file):
    set_settings(Settings(DATA_PATH=str(tmp_path / "missing.json")))
    with pytest.raises(DatasetNotFound):
        cache.get_catalog()
    assert not cache.is_loaded()

    set_settings(Settings(DATA_PATH=str(dataset_file)))
    assert cache.get_catalog().count() == 4


def test_concurrent_first_use_builds_single_instance():
    results = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        results.append(cache.get_catalog())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_set_and_clear_catalog(catalog):
    cache.set_catalog(catalog)
    assert cache.get_catalog() is catalog
    cache.clear_catalog()
    assert not cache.is_loaded()


def test_set_catalog_rejects_other_types():
    with pytest.raises(TypeError):
        cache.set_catalog(object())


class TestPackageShortcuts:
    @pytest.fixture(autouse=True)
    def installed(self, catalog):
        cache.set_catalog(catalog)
        return catalog

    def test_delegates_to_shared_catalog(self, catalog):
        assert kotowaza.list_all() is catalog.list_all()
        assert kotowaza.count() == catalog.count()
        assert kotowaza.get_by_id("neko-ni-koban") is catalog.get_by_id("neko-ni-koban")
        assert kotowaza.get_related("nanakorobi-yaoki") == catalog.get_related("nanakorobi-yaoki")
        assert kotowaza.search("monkey") == catalog.search("monkey")
        assert kotowaza.filter_by_tag("animals") == catalog.filter_by_tag("animals")
        assert kotowaza.filter_by_tag_secondary("hewan") == catalog.filter_by_tag_secondary("hewan")
        assert kotowaza.filter_by_level("n3") == catalog.filter_by_level("N3")
        assert kotowaza.list_tags() == catalog.list_tags()
        assert kotowaza.list_tags_secondary() == catalog.list_tags_secondary()
        assert kotowaza.list_levels() == catalog.list_levels()
        assert kotowaza.build_reference_url("x") == catalog.build_reference_url("x")

    def test_random_entry(self, catalog):
        assert kotowaza.random_entry() in catalog.list_all()


def test_catalog_is_exported():
    assert kotowaza.Catalog is Catalog


@pytest.mark.parametrize(
    "name, empty",
    [
        ("search", ()),
        ("filter_by_tag", ()),
        ("filter_by_tag_secondary", ()),
        ("filter_by_level", ()),
        ("get_related", ()),
        ("get_by_id", None),
    ],
)
def test_shortcuts_without_argument(catalog, name, empty):
    cache.set_catalog(catalog)
    assert getattr(kotowaza, name)() == empty
