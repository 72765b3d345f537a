"""
Tests for the JSON document store.
"""

import json
import re

import pytest

from announcement_board.app.core.storage import (
    WELCOME_CONTENT,
    WELCOME_TITLE,
    AnnouncementStore,
    StorageError,
    utc_timestamp,
)
from announcement_board.app.schemas.announcement import Announcement


def _announcement(id, **overrides):
    values = dict(id=id, title=f"Title {id}", content="", date="2026-01-01T00:00:00.000Z", active=True)
    values.update(overrides)
    return Announcement(**values)


def test_initialize_creates_directory_and_seed(data_file):
    store = AnnouncementStore(data_file)
    store.initialize()

    assert data_file.exists()
    items = store.load()
    assert len(items) == 1
    seed = items[0]
    assert seed.id == 1
    assert seed.title == WELCOME_TITLE
    assert seed.content == WELCOME_CONTENT
    assert seed.active is True
    assert seed.updated_at is None


def test_initialize_keeps_existing_document(store):
    store.save([_announcement(7)])
    store.initialize()
    assert [item.id for item in store.load()] == [7]


def test_load_missing_file(tmp_path):
    with pytest.raises(StorageError):
        AnnouncementStore(tmp_path / "missing.json").load()


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"id": 1}',
        '[{"id": "one", "title": "x", "content": "", "date": "d", "active": true}]',
        '[{"id": 1}]',
    ],
)
def test_load_rejects_malformed_documents(store, content):
    store.path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        store.load()


def test_save_preserves_order_and_field_names(store):
    items = [
        _announcement(3),
        _announcement(1, active=False, updated_at="2026-02-01T00:00:00.000Z"),
    ]
    store.save(items)

    raw = json.loads(store.path.read_text(encoding="utf-8"))
    assert [item["id"] for item in raw] == [3, 1]
    assert "updatedAt" not in raw[0]
    assert raw[1]["updatedAt"] == "2026-02-01T00:00:00.000Z"
    assert store.load() == items


def test_save_into_missing_directory_fails(tmp_path):
    store = AnnouncementStore(tmp_path / "nope" / "announcements.json")
    with pytest.raises(StorageError):
        store.save([])


def test_save_leaves_no_temporary_files(store):
    store.save([_announcement(1)])
    assert [p.name for p in store.path.parent.iterdir()] == [store.path.name]


def test_transaction_saves_changes(store):
    with store.transaction() as items:
        items.append(_announcement(1))
    assert [item.id for item in store.load()] == [1]


def test_transaction_discards_changes_on_error(store):
    with pytest.raises(RuntimeError):
        with store.transaction() as items:
            items.append(_announcement(1))
            raise RuntimeError("boom")
    assert store.load() == []


def test_utc_timestamp_format():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())
