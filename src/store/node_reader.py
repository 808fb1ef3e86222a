"""Node reads and listing synthesis.

This module opens regular files as streaming handles and turns
directories into an encoded listing of their immediate children.
"""

from __future__ import annotations

from datetime import datetime, timezone
import os
from pathlib import Path
import stat

from core.errors import NodeNotFoundError
from core.types import ListingEntry
from store.listing_codec import encode_listing
from store.node_handle import FileNodeHandle, ListingNodeHandle, NodeHandle
from store.os_errors import translate_os_error


def read_node(location: Path) -> NodeHandle:
    """Open a resolved node for reading.

    Args:
        location: Absolute node location.

    Returns:
        Listing handle for directories, streaming handle for files.

    Raises:
        NodeNotFoundError: If nothing exists at the location.
        NodePermissionError: If the OS denies access.
        StoreIOError: If stat, open, or enumeration fails.
        ListingEncodingError: If the listing cannot be serialized.
    """
    try:
        node_stat = os.stat(location)
    except (FileNotFoundError, NotADirectoryError) as error:
        raise NodeNotFoundError(f"Node not found at {location}.") from error
    except OSError as error:
        raise translate_os_error(error, "stat node", location) from error
    if stat.S_ISDIR(node_stat.st_mode):
        entries = list_directory(location)
        return ListingNodeHandle(encode_listing(entries), node_stat)
    try:
        stream = open(location, "rb")
    except (FileNotFoundError, NotADirectoryError) as error:
        raise NodeNotFoundError(f"Node not found at {location}.") from error
    except OSError as error:
        raise translate_os_error(error, "open file", location) from error
    return FileNodeHandle(location, stream)


def list_directory(location: Path) -> list[ListingEntry]:
    """Collect immediate children of a directory, sorted by name.

    Args:
        location: Absolute directory location.

    Returns:
        One entry per child; descendants below the first level are not visited.

    Raises:
        NodeNotFoundError: If the directory vanished before enumeration.
        NodePermissionError: If the OS denies enumeration.
        StoreIOError: If enumeration or a child stat fails.
    """
    entries: list[ListingEntry] = []
    try:
        with os.scandir(location) as iterator:
            for dir_entry in iterator:
                entry = _entry_from_dir_entry(dir_entry)
                if entry is not None:
                    entries.append(entry)
    except (FileNotFoundError, NotADirectoryError) as error:
        raise NodeNotFoundError(f"Node not found at {location}.") from error
    except OSError as error:
        raise translate_os_error(error, "enumerate directory", location) from error
    return sorted(entries, key=lambda entry: entry.name)


def _entry_from_dir_entry(dir_entry: os.DirEntry[str]) -> ListingEntry | None:
    """Build a listing entry from a scandir result without following symlinks.

    Children removed between enumeration and stat are skipped.
    """
    try:
        child_stat = dir_entry.stat(follow_symlinks=False)
    except FileNotFoundError:
        return None
    return ListingEntry(
        name=dir_entry.name,
        is_dir=dir_entry.is_dir(follow_symlinks=False),
        size=child_stat.st_size,
        mod_time=datetime.fromtimestamp(child_stat.st_mtime, tz=timezone.utc),
        mode=stat.S_IMODE(child_stat.st_mode),
    )
