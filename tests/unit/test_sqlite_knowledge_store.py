"""Unit tests for the SQLite document store."""

import pytest

from second_brain.lib.errors import InvalidInputError
from second_brain.storage.sqlite_store import SQLiteKnowledgeStore


def test_create_fills_id_and_timestamps(store):
    item = store.create({"title": "  Padded  ", "content": "Body.", "user_id": "alice"})

    assert item.id
    assert item.title == "Padded"
    assert item.type == "note"
    assert item.created_at == item.updated_at
    assert store.find_by_id(item.id) == item


def test_create_ignores_caller_supplied_id(store):
    item = store.create({"id": "chosen", "title": "T", "content": "C", "user_id": "alice"})

    assert item.id != "chosen"


@pytest.mark.parametrize(
    "doc",
    [
        {"content": "No title.", "user_id": "alice"},
        {"title": "   ", "content": "Blank title.", "user_id": "alice"},
        {"title": "T", "content": "  \n\t ", "user_id": "alice"},
        {"title": "T", "content": "C", "user_id": "alice", "type": "video"},
        {"title": "T", "content": "C"},
    ],
)
def test_invalid_documents_rejected(store, doc):
    with pytest.raises(InvalidInputError):
        store.create(doc)
    assert store.find() == []


def test_find_returns_insertion_order_and_filters(store, make_item):
    first = make_item(title="First", is_public=True)
    make_item(title="Second")
    third = make_item(title="Third", is_public=True)

    assert [i.title for i in store.find()] == ["First", "Second", "Third"]
    assert store.find(lambda i: i.is_public) == [first, third]


def test_tags_round_trip(store, make_item):
    item = make_item(tags=["ai", " rag ", ""])

    assert store.find_by_id(item.id).tags == ["ai", "rag", ""]


def test_update_refreshes_updated_at_only(store, make_item):
    item = make_item(title="Before")

    updated = store.find_by_id_and_update(
        item.id, {"title": "After", "id": "hijack", "created_at": None}
    )

    assert updated.id == item.id
    assert updated.title == "After"
    assert updated.created_at == item.created_at
    assert updated.updated_at >= item.updated_at
    assert store.find_by_id(item.id).title == "After"


def test_update_with_invalid_values_rejected(store, make_item):
    item = make_item(title="Keep")

    with pytest.raises(InvalidInputError):
        store.find_by_id_and_update(item.id, {"title": ""})
    with pytest.raises(InvalidInputError):
        store.find_by_id_and_update(item.id, {"content": "   "})
    assert store.find_by_id(item.id).title == "Keep"


def test_update_and_delete_missing_item_return_none(store):
    assert store.find_by_id_and_update("missing", {"title": "x"}) is None
    assert store.find_by_id_and_delete("missing") is None


def test_delete_returns_removed_item(store, make_item):
    item = make_item()

    assert store.find_by_id_and_delete(item.id) == item
    assert store.find_by_id(item.id) is None


def test_data_survives_reopening(tmp_path):
    path = str(tmp_path / "nested" / "brain.db")
    created = SQLiteKnowledgeStore(path).create({"title": "T", "content": "C", "user_id": "u"})

    assert SQLiteKnowledgeStore(path).find_by_id(created.id) == created
