"""CLI commands for post-packaging assembly.

This module wires gather, expand-manifests, and clean subcommands.
All three resolve without writing the property store.
"""

from __future__ import annotations

import argparse
from typing import Any

from cli.resolve_command import add_version_argument
from store.client import ModMatrixClient


def add_gather_command(subparsers: Any) -> None:
    """Register gather subcommand."""
    parser = subparsers.add_parser(
        "gather",
        help="Copy packaged platform artifacts into the output directory",
    )
    add_version_argument(parser)


def add_expand_manifests_command(subparsers: Any) -> None:
    """Register expand-manifests subcommand."""
    parser = subparsers.add_parser(
        "expand-manifests",
        help="Fill loader manifest templates with resolved values",
    )
    add_version_argument(parser)


def add_clean_command(subparsers: Any) -> None:
    """Register clean subcommand."""
    parser = subparsers.add_parser(
        "clean",
        help="Remove module build directories, keeping gathered artifacts",
    )
    add_version_argument(parser)


def run_gather_command(client: ModMatrixClient, args: argparse.Namespace) -> int:
    """Print each copied artifact path."""
    resolution = client.resolve(args.minecraft_version, dry_run=True)
    for path in client.gather(resolution):
        print(path)
    return 0


def run_expand_manifests_command(client: ModMatrixClient, args: argparse.Namespace) -> int:
    """Print each written manifest path."""
    resolution = client.resolve(args.minecraft_version, dry_run=True)
    for path in client.expand_manifests(resolution):
        print(path)
    return 0


def run_clean_command(client: ModMatrixClient, args: argparse.Namespace) -> int:
    """Print each removed build directory."""
    resolution = client.resolve(args.minecraft_version, dry_run=True)
    for path in client.clean(resolution):
        print(path)
    return 0
