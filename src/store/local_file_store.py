"""Per-identity local file store.

This module owns the store root and exposes get, put, and delete over
``(identity, path)`` pairs. Each call resolves a path and dispatches to
exactly one of the reader, writer, or deleter; nothing is cached or
locked between calls.
"""

from __future__ import annotations

from pathlib import Path

from core.config import LockboxConfig
from core.constants import ROOT_DIR_MODE
from core.logging_config import get_logger
from core.types import NodeMode
from store.node_deleter import delete_node
from store.node_handle import NodeHandle
from store.node_reader import read_node
from store.node_writer import ContentSource, ensure_directory, write_node
from store.path_resolver import resolve_node_path

_LOGGER = get_logger(__name__)


class LocalFileStore:
    """Filesystem-backed node store.

    Nodes live at ``<root>/<identity>/<path>``. The root is created with
    owner-only permissions and is never mutated after construction, so a
    single instance may be shared across threads without locking.
    """

    def __init__(self, root: Path) -> None:
        """Initialize the store, creating the root directory if absent.

        Args:
            root: Store root directory.

        Raises:
            NodePermissionError: If the OS denies creating the root.
            StoreIOError: If the root cannot be created.
        """
        self._root = Path(root).expanduser().resolve()
        ensure_directory(self._root, ROOT_DIR_MODE)
        _LOGGER.info("store_initialized", root=str(self._root))

    @classmethod
    def from_config(cls, config: LockboxConfig) -> "LocalFileStore":
        """Build a store rooted at the configured data root."""
        return cls(config.data_root)

    @property
    def root(self) -> Path:
        """Absolute store root directory."""
        return self._root

    def get(self, identity: str, path: str = "") -> NodeHandle:
        """Open a node for reading.

        Directories yield a handle over an encoded listing of their
        immediate children; ``handle.is_dir`` is True for those.

        Args:
            identity: Namespace identity.
            path: Relative node path; empty for the namespace root.

        Returns:
            Readable node handle. Callers must close it.

        Raises:
            NodeNotFoundError: If the node does not exist.
            NodePermissionError: If the OS denies access.
            StoreIOError: If stat, open, or enumeration fails.
            ListingEncodingError: If a directory listing cannot be encoded.
            LockboxPathError: If identity or path is invalid.
        """
        location = resolve_node_path(self._root, identity, path)
        return read_node(location)

    def put(
        self,
        identity: str,
        path: str,
        source: ContentSource,
        mode: NodeMode | None = None,
    ) -> None:
        """Write a file or create a directory.

        Args:
            identity: Namespace identity.
            path: Relative node path.
            source: Binary stream or bytes-like content; ignored for directories.
            mode: Permission bits and directory flag; defaults to a file with OS
                default permissions.

        Raises:
            NodePermissionError: If the OS denies any write step.
            StoreIOError: If directory creation, file creation, copy, or chmod fails.
            LockboxPathError: If identity or path is invalid.
        """
        target_mode = mode or NodeMode()
        location = resolve_node_path(self._root, identity, path)
        written = write_node(location, source, target_mode)
        _LOGGER.info(
            "node_written",
            identity=identity,
            path=path,
            is_dir=target_mode.is_dir,
            permissions=oct(target_mode.permissions),
            size=written,
        )

    def delete(self, identity: str, path: str = "") -> None:
        """Delete a node and its subtree; missing nodes are not an error.

        Args:
            identity: Namespace identity.
            path: Relative node path; empty removes the whole namespace.

        Raises:
            NodePermissionError: If the OS denies removal.
            StoreIOError: If removal fails for reasons other than absence.
            LockboxPathError: If identity or path is invalid.
        """
        location = resolve_node_path(self._root, identity, path)
        removed = delete_node(location)
        _LOGGER.info("node_deleted", identity=identity, path=path, removed=removed)
