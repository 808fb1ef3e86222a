"""Node command wiring for Lockbox CLI."""

from __future__ import annotations

import argparse
import sys
from typing import Any, BinaryIO

from core.config import LockboxConfig, parse_mode
from core.constants import COPY_CHUNK_SIZE
from core.errors import LockboxError
from core.types import ListingEntry, NodeMode
from store.listing_codec import decode_listing
from store.local_file_store import LocalFileStore


def add_get_command(subparsers: Any) -> None:
    """Register get subcommand."""
    parser = subparsers.add_parser("get", help="Write node content or listing to stdout")
    parser.add_argument("identity", help="Namespace identity")
    parser.add_argument("path", nargs="?", default="", help="Relative node path")


def add_put_command(subparsers: Any) -> None:
    """Register put subcommand."""
    parser = subparsers.add_parser("put", help="Write a file or create a directory")
    parser.add_argument("identity", help="Namespace identity")
    parser.add_argument("path", help="Relative node path")
    parser.add_argument("--source", help="Local file to upload; stdin when omitted")
    parser.add_argument("--mode", help="Octal permission bits, e.g. 644")
    parser.add_argument("--dir", action="store_true", help="Create a directory instead of a file")


def add_ls_command(subparsers: Any) -> None:
    """Register ls subcommand."""
    parser = subparsers.add_parser("ls", help="List immediate children of a directory")
    parser.add_argument("identity", help="Namespace identity")
    parser.add_argument("path", nargs="?", default="", help="Relative directory path")


def add_rm_command(subparsers: Any) -> None:
    """Register rm subcommand."""
    parser = subparsers.add_parser("rm", help="Delete a node and its subtree")
    parser.add_argument("identity", help="Namespace identity")
    parser.add_argument("path", nargs="?", default="", help="Relative node path")


def run_get_command(store: LocalFileStore, args: argparse.Namespace) -> int:
    """Stream node bytes to stdout."""
    output = sys.stdout.buffer
    with store.get(args.identity, args.path) as handle:
        while True:
            chunk = handle.read(COPY_CHUNK_SIZE)
            if not chunk:
                break
            output.write(chunk)
    output.flush()
    return 0


def run_put_command(
    store: LocalFileStore,
    config: LockboxConfig,
    args: argparse.Namespace,
) -> int:
    """Write stdin or a local file into the store."""
    permissions = parse_mode(args.mode, source="--mode") if args.mode else config.default_mode
    if args.dir:
        store.put(args.identity, args.path, b"", NodeMode.directory(permissions))
        return 0
    if args.source:
        try:
            source: BinaryIO = open(args.source, "rb")
        except OSError as error:
            raise LockboxError(f"Cannot open source file {args.source}: {error}.") from error
        with source:
            store.put(args.identity, args.path, source, NodeMode.file(permissions))
        return 0
    store.put(args.identity, args.path, sys.stdin.buffer, NodeMode.file(permissions))
    return 0


def run_ls_command(store: LocalFileStore, args: argparse.Namespace) -> int:
    """Print one tab-separated line per directory child."""
    with store.get(args.identity, args.path) as handle:
        if not handle.is_dir:
            print(f"error=not a directory: {args.path}", file=sys.stderr)
            return 1
        entries = decode_listing(handle.read_all())
    for entry in entries:
        print(_format_entry(entry))
    return 0


def run_rm_command(store: LocalFileStore, args: argparse.Namespace) -> int:
    """Delete a node; missing nodes succeed."""
    store.delete(args.identity, args.path)
    return 0


def _format_entry(entry: ListingEntry) -> str:
    kind = "d" if entry.is_dir else "-"
    return (
        f"{kind}{entry.mode:03o}\t"
        f"{entry.size}\t"
        f"{entry.mod_time.isoformat()}\t"
        f"{entry.name}"
    )
