import json

import pytest

from userapps.errors import StoreError
from userapps.models import UserAppRecord, join_ids, split_ids
from userapps.store import JsonCatalogSource, JsonUserAppStore


def test_split_and_join_ids():
    assert split_ids("1;2;3") == ["1", "2", "3"]
    assert split_ids("") == []
    assert split_ids(None) == []
    assert split_ids("1;;2;") == ["1", "2"]
    assert join_ids(["1", "3"]) == "1;3"


def test_record_parse_and_serialize():
    record = UserAppRecord.parse("bob", "x;y")

    assert record.ordered_ids == ("x", "y")
    assert record.serialize() == "x;y"


def test_missing_user_file_reads_empty(tmp_path):
    store = JsonUserAppStore(tmp_path / "user_apps.json")

    assert store.read_ids("alice") == []


def test_write_creates_then_updates(tmp_path):
    path = tmp_path / "nested" / "user_apps.json"
    store = JsonUserAppStore(path)

    store.write_ids("alice", ["1", "2"])
    store.write_ids("bob", ["9"])
    store.write_ids("alice", ["2"])

    assert store.read_ids("alice") == ["2"]
    assert store.read_ids("bob") == ["9"]
    assert json.loads(path.read_text(encoding="utf-8"))["users"] == {"alice": "2", "bob": "9"}


def test_corrupt_user_file_raises_store_error(tmp_path):
    path = tmp_path / "user_apps.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StoreError):
        JsonUserAppStore(path).read_ids("alice")


def test_catalog_source_filters_locale_and_blank_ids(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"value": [
        {"pb_AppId": "a", "Title": "A", "pb_MUILanguage": "Default"},
        {"pb_AppId": "b", "Title": "B", "pb_MUILanguage": "en-US"},
        {"pb_AppId": "c", "Title": "C", "pb_MUILanguage": "fr-FR"},
        {"pb_AppId": "", "Title": "blank"},
        {"pb_AppId": "d", "Title": "D", "pb_SortOrder": "4", "pb_Description": "desc"},
    ]}), encoding="utf-8")

    entries = JsonCatalogSource(path).fetch_catalog("en-US")

    assert [e.id for e in entries] == ["a", "b", "d"]
    assert entries[2].sort_order == 4
    assert entries[2].description == "desc"
    assert entries[2].locale == "Default"


def test_catalog_source_accepts_plain_list(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"pb_AppId": "a", "Title": "A"}]), encoding="utf-8")

    assert [e.id for e in JsonCatalogSource(path).fetch_catalog("")] == ["a"]


def test_missing_catalog_is_empty(tmp_path):
    assert JsonCatalogSource(tmp_path / "nope.json").fetch_catalog("en-US") == []
