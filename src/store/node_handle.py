"""Readable node handles.

This module gives file content and synthetic directory listings one
read interface. Callers tell them apart through ``stat()`` or ``is_dir``
and read bytes the same way from either.
"""

from __future__ import annotations

import io
import os
import stat
from pathlib import Path
from types import TracebackType
from typing import BinaryIO

from store.os_errors import translate_os_error


class NodeHandle:
    """Base readable handle returned by store reads."""

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything remaining when negative."""
        raise NotImplementedError

    def stat(self) -> os.stat_result:
        """Return metadata of the node behind this handle."""
        raise NotImplementedError

    def close(self) -> None:
        """Release the handle. Safe to call more than once."""
        raise NotImplementedError

    @property
    def is_dir(self) -> bool:
        """Whether the handle carries a directory listing."""
        return stat.S_ISDIR(self.stat().st_mode)

    def read_all(self) -> bytes:
        """Read the remaining content to completion."""
        return self.read(-1)

    def __enter__(self) -> "NodeHandle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


class FileNodeHandle(NodeHandle):
    """Streaming handle over a regular file on disk."""

    def __init__(self, location: Path, stream: BinaryIO) -> None:
        self._location = location
        self._stream = stream

    def read(self, size: int = -1) -> bytes:
        try:
            return self._stream.read(size)
        except OSError as error:
            raise translate_os_error(error, "read file", self._location) from error

    def stat(self) -> os.stat_result:
        try:
            return os.fstat(self._stream.fileno())
        except OSError as error:
            raise translate_os_error(error, "stat file", self._location) from error

    def close(self) -> None:
        self._stream.close()


class ListingNodeHandle(NodeHandle):
    """In-memory handle over an encoded directory listing.

    The content is the listing document; ``stat()`` reports the listed
    directory's own metadata.
    """

    def __init__(self, listing: bytes, dir_stat: os.stat_result) -> None:
        self._buffer = io.BytesIO(listing)
        self._dir_stat = dir_stat

    def read(self, size: int = -1) -> bytes:
        return self._buffer.read(size)

    def stat(self) -> os.stat_result:
        return self._dir_stat

    def close(self) -> None:
        self._buffer.close()
