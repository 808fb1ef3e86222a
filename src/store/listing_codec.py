"""Directory listing encoding.

This module isolates the JSON wire format of synthetic directory
listings. A listing is a JSON array of objects with ``name``, ``is_dir``,
``size``, ``modtime`` (RFC 3339, UTC) and ``mode`` fields, followed by a
newline.
"""

from __future__ import annotations

from datetime import datetime, timezone
import json
from typing import Any

from core.errors import ListingEncodingError
from core.types import ListingEntry


def encode_listing(entries: list[ListingEntry]) -> bytes:
    """Serialize listing entries into a single JSON document.

    Args:
        entries: Ordered immediate children of a directory.

    Returns:
        UTF-8 encoded listing document.

    Raises:
        ListingEncodingError: If an entry cannot be serialized.
    """
    try:
        payload = [_entry_to_dict(entry) for entry in entries]
        return (json.dumps(payload) + "\n").encode("utf-8")
    except (TypeError, ValueError) as error:
        raise ListingEncodingError(f"Failed to encode directory listing: {error}.") from error


def decode_listing(data: bytes) -> list[ListingEntry]:
    """Parse a listing document back into typed entries.

    Args:
        data: Listing bytes as read from a directory handle.

    Returns:
        Listing entries in document order.

    Raises:
        ListingEncodingError: If the document is not a valid listing.
    """
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as error:
        raise ListingEncodingError(
            f"Failed to parse directory listing: {error}. "
            "Ensure the bytes were read from a directory handle."
        ) from error
    if not isinstance(payload, list):
        raise ListingEncodingError(
            "Failed to parse directory listing: expected JSON array at top level."
        )
    return [_entry_from_dict(item, index) for index, item in enumerate(payload)]


def _entry_to_dict(entry: ListingEntry) -> dict[str, Any]:
    return {
        "name": entry.name,
        "is_dir": entry.is_dir,
        "size": entry.size,
        "modtime": _format_timestamp(entry.mod_time),
        "mode": entry.mode,
    }


def _entry_from_dict(item: Any, index: int) -> ListingEntry:
    """Deserialize one listing element."""
    try:
        return ListingEntry(
            name=str(item["name"]),
            is_dir=bool(item["is_dir"]),
            size=int(item["size"]),
            mod_time=_parse_timestamp(str(item["modtime"])),
            mode=int(item["mode"]),
        )
    except (KeyError, TypeError, ValueError) as error:
        raise ListingEncodingError(
            f"Invalid directory listing entry at index {index}: {error}."
        ) from error


def _format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _parse_timestamp(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
