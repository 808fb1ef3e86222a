"""Identity and path resolution.

This module maps ``(identity, relative path)`` pairs onto absolute
locations under the store root and keeps every result inside the
identity's own namespace.
"""

from __future__ import annotations

import os
from pathlib import Path

from core.constants import PATH_SEPARATOR, RESERVED_SEGMENTS
from core.errors import InvalidIdentityError, LockboxPathError, PathEscapeError


def namespace_dir(root: Path, identity: str) -> Path:
    """Return the namespace directory for an identity.

    Args:
        root: Store root directory.
        identity: Opaque identity segment.

    Returns:
        Absolute namespace directory path.

    Raises:
        InvalidIdentityError: If identity is not a single path segment.
    """
    _validate_identity(identity)
    return root / identity


def resolve_node_path(root: Path, identity: str, path: str) -> Path:
    """Resolve an identity-relative node path to an absolute location.

    Leading separators are ignored and the joined path is normalized
    lexically, so ``"/notes/todo.txt"`` and ``"notes//todo.txt"`` address
    the same node. An empty path addresses the namespace root.

    Args:
        root: Store root directory.
        identity: Opaque identity segment.
        path: Relative node path using ``/`` separators.

    Returns:
        Absolute node location inside the namespace.

    Raises:
        InvalidIdentityError: If identity is not a single path segment.
        PathEscapeError: If path normalizes to a location outside the namespace.
    """
    namespace = namespace_dir(root, identity)
    if "\x00" in path:
        raise LockboxPathError(
            f"Path for identity '{identity}' must not contain NUL characters."
        )
    segments = [segment for segment in path.split(PATH_SEPARATOR) if segment]
    joined = os.path.normpath(os.path.join(namespace, *segments))
    if joined != str(namespace) and not joined.startswith(str(namespace) + os.sep):
        raise PathEscapeError(
            f"Path '{path}' resolves outside the namespace of identity '{identity}'. "
            "Remove '..' segments that climb above the namespace root."
        )
    return Path(joined)


def _validate_identity(identity: str) -> None:
    """Reject identities that would not map onto exactly one directory."""
    if not identity:
        raise InvalidIdentityError("Identity must be a non-empty string.")
    if PATH_SEPARATOR in identity or os.sep in identity or identity in RESERVED_SEGMENTS:
        raise InvalidIdentityError(
            f"Invalid identity '{identity}': expected a single path segment "
            "without separators or '.'/'..'."
        )
    if "\x00" in identity:
        raise InvalidIdentityError("Identity must not contain NUL characters.")
