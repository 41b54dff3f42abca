"""modmatrix CLI entry points.

This module exposes resolution, planning, and assembly commands.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from cli.gather_command import (
    add_clean_command,
    add_expand_manifests_command,
    add_gather_command,
    run_clean_command,
    run_expand_manifests_command,
    run_gather_command,
)
from cli.plan_command import add_plan_command, run_plan_command
from cli.resolve_command import add_resolve_command, run_resolve_command
from core.config import ModMatrixConfig
from core.errors import ModMatrixError
from core.logging_config import get_logger
from store.client import ModMatrixClient

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="modmatrix",
        description="Multi-loader version matrix resolution and artifact assembly",
    )
    parser.add_argument(
        "--project-root",
        help="Override MODMATRIX_PROJECT_ROOT for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_resolve_command(subparsers)
    add_plan_command(subparsers)
    add_gather_command(subparsers)
    add_expand_manifests_command(subparsers)
    add_clean_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the modmatrix CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code, 1 when resolution or assembly fails.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = _build_client(args.project_root)
        return _dispatch(parser, client, args)
    except ModMatrixError as error:
        _LOGGER.error("command_failed", command=args.command, error=str(error))
        print(f"modmatrix: {error}", file=sys.stderr)
        return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    client: ModMatrixClient,
    args: argparse.Namespace,
) -> int:
    if args.command == "resolve":
        return run_resolve_command(client, args)
    if args.command == "plan":
        return run_plan_command(client, args)
    if args.command == "gather":
        return run_gather_command(client, args)
    if args.command == "expand-manifests":
        return run_expand_manifests_command(client, args)
    if args.command == "clean":
        return run_clean_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(project_root: str | None) -> ModMatrixClient:
    """Build SDK client with optional project-root override.

    Args:
        project_root: Optional override path.

    Returns:
        Configured SDK client.
    """
    config = ModMatrixConfig.from_env()
    if project_root:
        config = replace(config, project_root=Path(project_root).expanduser().resolve())
    return ModMatrixClient(config)
