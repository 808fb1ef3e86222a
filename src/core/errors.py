"""Lockbox exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each store component raises a specific error type for debuggability.
"""

from __future__ import annotations


class LockboxError(Exception):
    """Base exception for all Lockbox failures."""


class LockboxConfigError(LockboxError):
    """Raised for invalid runtime configuration."""


class NodeNotFoundError(LockboxError):
    """Raised when a requested node does not exist."""


class NodePermissionError(LockboxError):
    """Raised when the operating system rejects access to a node."""


class StoreIOError(LockboxError):
    """Raised for filesystem failures while reading, writing, or deleting nodes."""


class ListingEncodingError(LockboxError):
    """Raised when a directory listing cannot be encoded or decoded."""


class LockboxPathError(LockboxError):
    """Raised when an identity and path cannot be mapped into a namespace."""


class InvalidIdentityError(LockboxPathError):
    """Raised for identities that are not a single path segment."""


class PathEscapeError(LockboxPathError):
    """Raised when a relative path resolves outside its namespace."""
