"""Node deletion."""

from __future__ import annotations

import os
from pathlib import Path
import shutil
import stat

from store.os_errors import translate_os_error


def delete_node(location: Path) -> bool:
    """Remove a node and, for directories, its whole subtree.

    Absence is treated as already deleted, including entries that vanish
    while the subtree is being removed.

    Args:
        location: Absolute node location.

    Returns:
        True when something was removed, False when nothing existed.

    Raises:
        NodePermissionError: If the OS denies removal.
        StoreIOError: If removal fails for reasons other than absence.
    """
    try:
        node_stat = os.lstat(location)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as error:
        raise translate_os_error(error, "stat node", location) from error
    try:
        if stat.S_ISDIR(node_stat.st_mode):
            shutil.rmtree(location, onexc=_ignore_missing)
        else:
            os.unlink(location)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as error:
        raise translate_os_error(error, "delete node", location) from error
    return True


def _ignore_missing(_function: object, _path: str, error: BaseException) -> None:
    """rmtree error hook that tolerates concurrently removed entries."""
    if isinstance(error, FileNotFoundError):
        return
    raise error
