from conftest import entry

from userapps.catalog import (
    dedupe_catalog,
    matches_locale,
    merge_and_heal,
    merge_catalog,
    prioritize_locale,
)
from userapps.models import CatalogEntry


# Active-locale entries win over the Default duplicate; other locales keep their place
def test_merge_prefers_active_locale_duplicate():
    catalog = [entry("A", "en", title="Mail"), entry("A", "Default", title="Mail (all)"), entry("B", "fr")]

    result = merge_catalog(catalog, "en", [])

    assert [(i.id, i.name) for i in result.catalog] == [("A", "Mail"), ("B", "B")]
    assert result.pinned == []
    assert result.repair_needed is False


def test_merge_keeps_localized_fields_of_winner():
    catalog = [
        entry("A", "Default", title="Mail", url="https://default"),
        entry("A", "de-DE", title="Post", url="https://de"),
    ]

    result = merge_catalog(catalog, "de-DE", [])

    assert len(result.catalog) == 1
    assert result.catalog[0].name == "Post"
    assert result.catalog[0].url == "https://de"


def test_prioritize_is_stable_partition():
    catalog = [entry("1", "Default"), entry("2", "en"), entry("3", "Default"), entry("4", "en")]

    assert [e.id for e in prioritize_locale(catalog, "en")] == ["2", "4", "1", "3"]


def test_prioritize_ignores_locale_case():
    catalog = [entry("1", "Default"), entry("2", "EN-us")]

    assert [e.id for e in prioritize_locale(catalog, "en-US")] == ["2", "1"]


def test_dedupe_keeps_first_occurrence():
    catalog = [entry("x", "en"), entry("y"), entry("x", "Default")]

    deduped = dedupe_catalog(catalog)

    assert [(e.id, e.locale) for e in deduped] == [("x", "en"), ("y", "Default")]


# Stale ids are dropped and a repair with the filtered list is handed off
def test_stale_saved_id_triggers_repair():
    catalog = [entry("1"), entry("3"), entry("4")]
    repairs = []

    result = merge_and_heal(catalog, "en-US", ["1", "2", "3"], repair=repairs.append)

    assert result.pinned_ids == ["1", "3"]
    assert result.dropped_ids == ["2"]
    assert [i.id for i in result.catalog] == ["4"]
    assert repairs == [["1", "3"]]


def test_no_repair_when_everything_resolves():
    catalog = [entry("1"), entry("2")]
    repairs = []

    result = merge_and_heal(catalog, "en-US", ["2", "1"], repair=repairs.append)

    assert result.pinned_ids == ["2", "1"]
    assert result.catalog == []
    assert repairs == []


def test_duplicate_saved_ids_collapse_and_repair():
    catalog = [entry("1"), entry("2")]
    repairs = []

    result = merge_and_heal(catalog, "en-US", ["1", "1", "2"], repair=repairs.append)

    assert result.pinned_ids == ["1", "2"]
    assert repairs == [["1", "2"]]


def test_repair_failure_does_not_reach_caller():
    def broken(_ids):
        raise RuntimeError("boom")

    result = merge_and_heal([entry("1")], "en-US", ["1", "gone"], repair=broken)

    assert result.pinned_ids == ["1"]


# Pinned and catalog lists are disjoint and together cover the deduplicated catalog
def test_pinned_and_catalog_are_disjoint_and_complete():
    catalog = [entry(str(i), "en" if i % 2 else "Default") for i in range(10)]
    catalog += [entry(str(i), "Default") for i in range(0, 10, 3)]
    saved = ["7", "3", "12", "0"]

    result = merge_catalog(catalog, "en", saved)

    pinned_ids = [i.id for i in result.pinned]
    catalog_ids = [i.id for i in result.catalog]
    assert not set(pinned_ids) & set(catalog_ids)
    assert sorted(pinned_ids + catalog_ids, key=int) == [str(i) for i in range(10)]
    assert len(set(catalog_ids)) == len(catalog_ids)


def test_matches_locale():
    assert matches_locale(CatalogEntry(id="a", title="a", locale="Default"), "en-US")
    assert matches_locale(CatalogEntry(id="a", title="a", locale="en-us"), "en-US")
    assert not matches_locale(CatalogEntry(id="a", title="a", locale="fr-FR"), "en-US")
    # no active locale: only Default entries qualify
    assert not matches_locale(CatalogEntry(id="a", title="a", locale="en-US"), "")
    assert matches_locale(CatalogEntry(id="a", title="a", locale="Default"), "")
