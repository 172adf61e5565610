"""Tests for the SQLite-backed document store."""

import pytest

from event_management_api.app.core.db import (
    DocumentStore,
    InvalidIdentifier,
    StoreConnectionError,
    StoreError,
    is_valid_object_id,
    new_object_id,
)


# --- identities ---

def test_new_object_id_format():
    value = new_object_id()
    assert len(value) == 24
    assert value == value.lower()
    assert is_valid_object_id(value)


def test_new_object_ids_are_unique():
    assert len({new_object_id() for _ in range(1000)}) == 1000


@pytest.mark.parametrize(
    "value, expected",
    [
        ("65a1f0c2e4b0a1b2c3d4e5f6", True),
        ("65A1F0C2E4B0A1B2C3D4E5F6", True),
        ("not-a-valid-id", False),
        ("65a1f0c2e4b0a1b2c3d4e5f", False),
        ("65a1f0c2e4b0a1b2c3d4e5fz", False),
        ("65a1f0c2e4b0a1b2c3d4e5f6\n", False),
        (" 65a1f0c2e4b0a1b2c3d4e5f6", False),
        ("", False),
        (12345, False),
        (None, False),
    ],
)
def test_is_valid_object_id(value, expected):
    assert is_valid_object_id(value) is expected


# --- CRUD ---

def test_insert_returns_document_with_id(store):
    doc = store.insert("events", {"name": "Conf", "tags": ["a", "b"]})
    assert is_valid_object_id(doc["id"])
    assert doc["name"] == "Conf"
    assert doc["tags"] == ["a", "b"]


def test_insert_ignores_client_id(store):
    doc = store.insert("events", {"id": "mine", "name": "Conf"})
    assert doc["id"] != "mine"
    assert store.find_by_id("events", doc["id"]) == doc


def test_find_keeps_insertion_order(store):
    names = ["first", "second", "third"]
    for name in names:
        store.insert("organizers", {"name": name})
    assert [doc["name"] for doc in store.find("organizers")] == names


def test_find_by_id_is_case_insensitive(store):
    doc = store.insert("events", {"name": "Conf"})
    assert store.find_by_id("events", doc["id"].upper()) == doc


def test_find_by_id_missing_returns_none(store):
    assert store.find_by_id("events", new_object_id()) is None


def test_find_by_id_malformed_raises(store):
    with pytest.raises(InvalidIdentifier):
        store.find_by_id("events", "not-a-valid-id")


def test_update_merges_fields(store):
    doc = store.insert("events", {"name": "Conf", "venue": "Hall A"})
    updated = store.update_by_id("events", doc["id"], {"venue": "Hall B", "extra": 1})
    assert updated == {"id": doc["id"], "name": "Conf", "venue": "Hall B", "extra": 1}


def test_update_can_null_a_field(store):
    doc = store.insert("events", {"name": "Conf"})
    assert store.update_by_id("events", doc["id"], {"name": None})["name"] is None


def test_update_missing_returns_none(store):
    assert store.update_by_id("events", new_object_id(), {"name": "x"}) is None


def test_update_malformed_raises(store):
    with pytest.raises(InvalidIdentifier):
        store.update_by_id("events", "bad", {"name": "x"})


def test_delete_returns_removed_document(store):
    doc = store.insert("attendees", {"name": "Ada"})
    assert store.delete_by_id("attendees", doc["id"]) == doc
    assert store.delete_by_id("attendees", doc["id"]) is None
    assert store.find("attendees") == []


def test_delete_malformed_raises(store):
    with pytest.raises(InvalidIdentifier):
        store.delete_by_id("attendees", "bad")


def test_find_by_ids_skips_unknown_and_malformed(store):
    a = store.insert("events", {"name": "A"})
    b = store.insert("events", {"name": "B"})
    found = store.find_by_ids("events", [a["id"], b["id"].upper(), "bad", new_object_id()])
    assert set(found) == {a["id"], b["id"]}


def test_find_by_ids_empty(store):
    assert store.find_by_ids("events", []) == {}


def test_count(store):
    assert store.count("events") == 0
    store.insert("events", {})
    store.insert("events", {})
    store.insert("attendees", {})
    assert store.count("events") == 2
    assert store.count("attendees") == 1


def test_unknown_collection_rejected(store):
    with pytest.raises(StoreError):
        store.find("users")


# --- connection & migrations ---

def test_migrate_is_idempotent(store):
    assert store.migrate() == 1
    assert store.migrate() == 1


def test_documents_persist_across_connections(tmp_path):
    url = str(tmp_path / "store.db")
    first = DocumentStore.connect(url)
    doc = first.insert("events", {"name": "Conf"})
    first.close()

    second = DocumentStore.connect(f"sqlite:///{url}")
    try:
        assert second.find("events") == [doc]
    finally:
        second.close()


def test_connect_failure_raises(tmp_path):
    with pytest.raises(StoreConnectionError):
        DocumentStore.connect(str(tmp_path / "missing" / "store.db"))
