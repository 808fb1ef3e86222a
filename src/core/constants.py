"""Core constants used across Lockbox modules.

This module centralizes on-disk layout and permission defaults.
Keeping values here avoids magic literals in store logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".lockbox")
ROOT_DIR_MODE = 0o700
DEFAULT_DIR_MODE = 0o777
PERMISSION_BITS_MASK = 0o777
PATH_SEPARATOR = "/"
RESERVED_SEGMENTS = (".", "..")
COPY_CHUNK_SIZE = 64 * 1024
