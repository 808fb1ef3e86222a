"""Unit tests for node deletion."""

from __future__ import annotations

from pathlib import Path

from store.node_deleter import delete_node


def test_delete_node_removes_file(tmp_path: Path) -> None:
    """Deleting a file should remove it and report removal."""
    location = tmp_path / "file.bin"
    location.write_bytes(b"x")

    removed = delete_node(location)

    assert removed and not location.exists()


def test_delete_node_removes_subtree(tmp_path: Path) -> None:
    """Deleting a directory should remove every descendant."""
    location = tmp_path / "dir"
    (location / "nested" / "deeper").mkdir(parents=True)
    (location / "nested" / "deeper" / "leaf.txt").write_bytes(b"leaf")
    (location / "top.txt").write_bytes(b"top")

    delete_node(location)

    assert not location.exists()


def test_delete_node_tolerates_absence(tmp_path: Path) -> None:
    """Deleting a missing node should succeed and report nothing removed."""
    removed = delete_node(tmp_path / "missing")

    assert removed is False


def test_delete_node_removes_symlink_not_target(tmp_path: Path) -> None:
    """Deleting a symlink should leave the linked directory in place."""
    target = tmp_path / "target"
    target.mkdir()
    (target / "keep.txt").write_bytes(b"keep")
    link = tmp_path / "link"
    link.symlink_to(target, target_is_directory=True)

    delete_node(link)

    assert (target / "keep.txt").exists() and not link.exists()


def test_delete_node_below_a_file_reports_nothing_removed(tmp_path: Path) -> None:
    """A path through a regular file should be treated as absent."""
    (tmp_path / "a").write_bytes(b"x")

    removed = delete_node(tmp_path / "a" / "b")

    assert removed is False and (tmp_path / "a").read_bytes() == b"x"
