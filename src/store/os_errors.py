"""Translation of OS failures into store errors."""

from __future__ import annotations

from pathlib import Path

from core.errors import LockboxError, NodePermissionError, StoreIOError


def translate_os_error(error: OSError, action: str, location: Path) -> LockboxError:
    """Map an OSError onto the store error taxonomy.

    Args:
        error: Original operating system error.
        action: Short verb phrase describing the failed step, e.g. "open file".
        location: Filesystem location the step targeted.

    Returns:
        Domain error instance; callers raise it ``from error``.
    """
    reason = error.strerror or str(error)
    if isinstance(error, PermissionError):
        return NodePermissionError(
            f"Permission denied to {action} at {location}: {reason}. "
            "Check ownership and permission bits of the store directory."
        )
    return StoreIOError(f"Failed to {action} at {location}: {reason}.")
