"""Shared typed models.

This module defines immutable data models used by the store components,
the SDK, and the CLI to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import stat

from core.constants import PERMISSION_BITS_MASK


@dataclass(frozen=True)
class NodeMode:
    """Target description for a put operation.

    Attributes:
        permissions: Permission bits to apply; zero keeps the OS default.
        is_dir: Whether the target node is a directory.
    """

    permissions: int = 0
    is_dir: bool = False

    @classmethod
    def file(cls, permissions: int = 0) -> "NodeMode":
        """Return a regular-file mode."""
        return cls(permissions=permissions & PERMISSION_BITS_MASK, is_dir=False)

    @classmethod
    def directory(cls, permissions: int = 0) -> "NodeMode":
        """Return a directory mode."""
        return cls(permissions=permissions & PERMISSION_BITS_MASK, is_dir=True)

    @classmethod
    def from_st_mode(cls, st_mode: int) -> "NodeMode":
        """Build a mode from an ``os.stat_result.st_mode`` value."""
        return cls(
            permissions=stat.S_IMODE(st_mode) & PERMISSION_BITS_MASK,
            is_dir=stat.S_ISDIR(st_mode),
        )


@dataclass(frozen=True)
class ListingEntry:
    """One immediate child inside a directory listing.

    Attributes:
        name: Child file or directory name.
        is_dir: Whether the child is a directory.
        size: Size in bytes as reported by stat.
        mod_time: UTC modification time.
        mode: Permission bits of the child.
    """

    name: str
    is_dir: bool
    size: int
    mod_time: datetime
    mode: int
