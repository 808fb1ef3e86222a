"""Runtime configuration model for Lockbox.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATA_ROOT, PERMISSION_BITS_MASK
from core.errors import LockboxConfigError


@dataclass(frozen=True)
class LockboxConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory holding every identity namespace.
        default_mode: Permission bits applied to CLI writes without --mode.
            Zero leaves the operating system default in place.
    """

    data_root: Path
    default_mode: int

    @classmethod
    def from_env(cls) -> "LockboxConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            LockboxConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("LOCKBOX_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        default_mode_value = os.getenv("LOCKBOX_DEFAULT_MODE", "0")
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            default_mode=parse_mode(default_mode_value, source="LOCKBOX_DEFAULT_MODE"),
        )


def parse_mode(raw_value: str, source: str) -> int:
    """Parse an octal permission string such as ``644`` or ``0o755``.

    Args:
        raw_value: Raw octal string.
        source: Name of the setting or flag, used in error messages.

    Returns:
        Parsed permission bits.

    Raises:
        LockboxConfigError: If value is not octal or exceeds permission bits.
    """
    text = raw_value.strip().lower().removeprefix("0o")
    try:
        mode = int(text, 8)
    except ValueError as error:
        raise LockboxConfigError(
            f"Invalid {source} value: expected octal permission bits, got '{raw_value}'. "
            f"Set {source} to a value like 644 or 0o600."
        ) from error
    if mode < 0 or mode > PERMISSION_BITS_MASK:
        raise LockboxConfigError(
            f"Invalid {source} value: '{raw_value}' is outside 0..777. "
            f"Set {source} to plain rwx permission bits."
        )
    return mode
