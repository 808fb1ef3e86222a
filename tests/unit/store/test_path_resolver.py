"""Unit tests for identity and path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import InvalidIdentityError, PathEscapeError
from store.path_resolver import resolve_node_path


def test_resolve_joins_identity_and_path(tmp_path: Path) -> None:
    """Resolver should place nodes under root/identity/path."""
    location = resolve_node_path(tmp_path, "abc", "notes/todo.txt")

    assert location == tmp_path / "abc" / "notes" / "todo.txt"


def test_resolve_empty_path_returns_namespace_root(tmp_path: Path) -> None:
    """Empty path should address the namespace root."""
    location = resolve_node_path(tmp_path, "abc", "")

    assert location == tmp_path / "abc"


def test_resolve_ignores_leading_and_repeated_separators(tmp_path: Path) -> None:
    """Leading and doubled separators should not change the target."""
    location = resolve_node_path(tmp_path, "abc", "/notes//todo.txt")

    assert location == tmp_path / "abc" / "notes" / "todo.txt"


def test_resolve_allows_parent_segments_inside_namespace(tmp_path: Path) -> None:
    """Parent segments that stay inside the namespace should normalize."""
    location = resolve_node_path(tmp_path, "abc", "notes/../todo.txt")

    assert location == tmp_path / "abc" / "todo.txt"


@pytest.mark.parametrize("path", ["..", "../other/secret", "a/../../other", "a/b/../../../x"])
def test_resolve_rejects_namespace_escape(tmp_path: Path, path: str) -> None:
    """Paths climbing above the namespace should be rejected."""
    with pytest.raises(PathEscapeError):
        resolve_node_path(tmp_path, "abc", path)


def test_resolve_rejects_sibling_prefix_escape(tmp_path: Path) -> None:
    """A sibling namespace sharing a name prefix should not be reachable."""
    with pytest.raises(PathEscapeError):
        resolve_node_path(tmp_path, "abc", "../abcd/file")


@pytest.mark.parametrize("identity", ["", ".", "..", "a/b", "a\x00b"])
def test_resolve_rejects_invalid_identity(tmp_path: Path, identity: str) -> None:
    """Identities must be a single real path segment."""
    with pytest.raises(InvalidIdentityError):
        resolve_node_path(tmp_path, identity, "file")
