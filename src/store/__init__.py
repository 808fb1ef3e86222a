"""Local node storage layer.

This package maps identities and relative paths onto a directory tree.
It reads, writes, lists, and deletes nodes for the SDK and CLI.
"""
