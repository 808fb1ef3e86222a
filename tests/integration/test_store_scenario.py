"""Integration test for the put/get/list/delete lifecycle."""

from __future__ import annotations

import io

import pytest

from core.errors import NodeNotFoundError
from lockbox import LocalFileStore, NodeMode, decode_listing


def test_notes_lifecycle(tmp_path) -> None:
    """A file should be readable, listed in its parent, then gone after delete."""
    store = LocalFileStore(tmp_path / "store")
    store.put("abc", "notes/todo.txt", io.BytesIO(b"buy milk"), NodeMode.file(0o644))

    with store.get("abc", "notes/todo.txt") as file_handle:
        content = file_handle.read_all()
        file_is_dir = file_handle.is_dir
    with store.get("abc", "notes") as dir_handle:
        listing_is_dir = dir_handle.is_dir
        entries = decode_listing(dir_handle.read_all())
    store.delete("abc", "notes")

    assert content == b"buy milk" and not file_is_dir and listing_is_dir
    assert [(entry.name, entry.is_dir, entry.size, entry.mode) for entry in entries] == [
        ("todo.txt", False, 8, 0o644)
    ]
    with pytest.raises(NodeNotFoundError):
        store.get("abc", "notes/todo.txt")
