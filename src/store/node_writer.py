"""Node writes.

This module creates directories and writes file content in place.
Writes truncate and copy directly into the target file, so a failure
mid-copy can leave a partially written file behind.
"""

from __future__ import annotations

import io
import os
from pathlib import Path
import shutil
from typing import BinaryIO

from core.constants import COPY_CHUNK_SIZE, DEFAULT_DIR_MODE, ROOT_DIR_MODE
from core.errors import StoreIOError
from core.types import NodeMode
from store.os_errors import translate_os_error

ContentSource = BinaryIO | bytes | bytearray | memoryview


def ensure_directory(location: Path, permissions: int) -> None:
    """Create a directory and every missing ancestor with the given bits.

    Existing directories are left untouched. Each newly created level
    receives ``permissions`` (subject to the process umask); zero means
    the OS default.

    Args:
        location: Absolute directory location.
        permissions: Permission bits for newly created directories.

    Raises:
        NodePermissionError: If the OS denies directory creation.
        StoreIOError: If creation fails or a non-directory is in the way.
    """
    bits = permissions or DEFAULT_DIR_MODE
    missing: list[Path] = []
    current = location
    try:
        while not current.exists():
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent
    except OSError as error:
        raise translate_os_error(error, "stat directory", current) from error
    for directory in reversed(missing):
        try:
            directory.mkdir(mode=bits)
        except FileExistsError:
            continue
        except OSError as error:
            raise translate_os_error(error, "create directory", directory) from error
    if not location.is_dir():
        raise StoreIOError(
            f"Failed to create directory at {location}: a non-directory node is in the way. "
            "Delete the existing file before writing a directory there."
        )


def write_node(location: Path, source: ContentSource, mode: NodeMode) -> int:
    """Write a node at a resolved location.

    Args:
        location: Absolute node location.
        source: Readable binary stream or bytes-like value; ignored for directories.
        mode: Target permission bits and directory flag.

    Returns:
        Number of bytes written; zero for directories.

    Raises:
        NodePermissionError: If the OS denies any step.
        StoreIOError: If directory creation, file creation, copy, or chmod fails.
    """
    if mode.is_dir:
        ensure_directory(location, mode.permissions)
        return 0
    ensure_directory(location.parent, parent_directory_bits(mode.permissions))
    if isinstance(source, (bytes, bytearray, memoryview)):
        stream: BinaryIO = io.BytesIO(source)
    else:
        stream = source
    return _write_file(location, stream, mode.permissions)


def parent_directory_bits(file_permissions: int) -> int:
    """Derive permission bits for parents created on behalf of a file write.

    Every read bit in the file mode gains the matching search bit, and the
    owner always keeps full access so the file itself can be created.

    Args:
        file_permissions: Requested file permission bits.

    Returns:
        Directory permission bits; zero when the file mode is zero.
    """
    if not file_permissions:
        return 0
    return file_permissions | ((file_permissions & 0o444) >> 2) | ROOT_DIR_MODE


def _write_file(location: Path, source: BinaryIO, permissions: int) -> int:
    """Truncate and fill the target file, then apply permission bits."""
    try:
        destination = open(location, "wb")
    except OSError as error:
        raise translate_os_error(error, "create file", location) from error
    with destination:
        try:
            shutil.copyfileobj(source, destination, COPY_CHUNK_SIZE)
            destination.flush()
        except OSError as error:
            raise translate_os_error(error, "copy content", location) from error
        except ValueError as error:
            raise StoreIOError(
                f"Failed to copy content to {location}: source is not readable ({error}). "
                "Pass an open binary stream or a bytes-like value."
            ) from error
        written = destination.tell()
        if permissions:
            try:
                os.fchmod(destination.fileno(), permissions)
            except OSError as error:
                raise translate_os_error(error, "chmod file", location) from error
    return written
