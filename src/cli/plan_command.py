"""CLI command for build module planning."""

from __future__ import annotations

import argparse
from typing import Any

from cli.resolve_command import add_version_argument
from plan.inclusion_planner import render_gradle_includes
from store.client import ModMatrixClient


def add_plan_command(subparsers: Any) -> None:
    """Register plan subcommand."""
    parser = subparsers.add_parser(
        "plan",
        help="List build modules to activate for the target version",
    )
    add_version_argument(parser)
    parser.add_argument(
        "--format",
        choices=("ids", "gradle"),
        default="ids",
        help="Print module ids, or a settings-script include block",
    )


def run_plan_command(client: ModMatrixClient, args: argparse.Namespace) -> int:
    """Print the module plan without touching the property store."""
    resolution = client.resolve(args.minecraft_version, dry_run=True)
    if args.format == "gradle":
        lines = render_gradle_includes(resolution.module_plan)
    else:
        lines = [
            f"{module.module_id}\t{module.project_dir}"
            for module in resolution.module_plan.modules
        ]
    for line in lines:
        print(line)
    return 0
