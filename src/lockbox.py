"""Public SDK surface for Lockbox.

This module provides a stable import path for store users.
It re-exports the store, typed models, and error hierarchy.
"""

from __future__ import annotations

from core.config import LockboxConfig
from core.errors import (
    InvalidIdentityError,
    ListingEncodingError,
    LockboxError,
    LockboxPathError,
    NodeNotFoundError,
    NodePermissionError,
    PathEscapeError,
    StoreIOError,
)
from core.types import ListingEntry, NodeMode
from store.listing_codec import decode_listing, encode_listing
from store.local_file_store import LocalFileStore
from store.node_handle import FileNodeHandle, ListingNodeHandle, NodeHandle

__all__ = [
    "FileNodeHandle",
    "InvalidIdentityError",
    "ListingEncodingError",
    "ListingEntry",
    "ListingNodeHandle",
    "LocalFileStore",
    "LockboxConfig",
    "LockboxError",
    "LockboxPathError",
    "NodeHandle",
    "NodeMode",
    "NodeNotFoundError",
    "NodePermissionError",
    "PathEscapeError",
    "StoreIOError",
    "decode_listing",
    "encode_listing",
]
