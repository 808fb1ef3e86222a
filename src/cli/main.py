"""Lockbox CLI entry points.
This module exposes node commands over a local file store.
It maps argparse commands onto store calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Sequence

from cli.node_commands import (
    add_get_command,
    add_ls_command,
    add_put_command,
    add_rm_command,
    run_get_command,
    run_ls_command,
    run_put_command,
    run_rm_command,
)
from core.config import LockboxConfig
from core.errors import LockboxError
from store.local_file_store import LocalFileStore


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="lockbox", description="Lockbox local store CLI")
    parser.add_argument("--data-root", help="Override LOCKBOX_DATA_ROOT for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_get_command(subparsers)
    add_put_command(subparsers)
    add_ls_command(subparsers)
    add_rm_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Lockbox CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.data_root)
        store = LocalFileStore.from_config(config)
        if args.command == "get":
            return run_get_command(store, args)
        if args.command == "put":
            return run_put_command(store, config, args)
        if args.command == "ls":
            return run_ls_command(store, args)
        if args.command == "rm":
            return run_rm_command(store, args)
    except LockboxError as error:
        print(f"error={error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(data_root: str | None) -> LockboxConfig:
    """Build config with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Validated runtime config.
    """
    config = LockboxConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return config
