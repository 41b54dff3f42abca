"""Resolve command wiring for modmatrix CLI.

This module registers the resolve subcommand and prints the resolved
property bundle as key=value rows.
"""

from __future__ import annotations

import argparse
from typing import Any

from core.constants import JVM_VERSION_PARAMETER
from store.client import ModMatrixClient


def add_version_argument(parser: argparse.ArgumentParser) -> None:
    """Register the invocation-time target version override."""
    parser.add_argument(
        "--minecraft-version",
        help="Target runtime version, overrides MODMATRIX_MINECRAFT_VERSION and the store",
    )


def add_resolve_command(subparsers: Any) -> None:
    """Register resolve subcommand."""
    parser = subparsers.add_parser(
        "resolve",
        help="Resolve platforms and pinned versions, then sync the property store",
    )
    add_version_argument(parser)
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the resolved values without writing the property store",
    )


def run_resolve_command(client: ModMatrixClient, args: argparse.Namespace) -> int:
    """Print resolved values as key=value rows."""
    resolution = client.resolve(args.minecraft_version, dry_run=args.dry_run)
    resolved = resolution.resolved
    rows = resolved.property_updates()
    if not rows.get(JVM_VERSION_PARAMETER):
        rows[JVM_VERSION_PARAMETER] = resolved.jvm_version
    for key, value in rows.items():
        print(f"{key}={value}")
    print(f"legacy={str(resolved.legacy).lower()}")
    if resolution.sync is not None:
        print(f"property_store_written={str(resolution.sync.written).lower()}")
    return 0
