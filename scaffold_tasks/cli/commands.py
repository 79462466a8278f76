#!/usr/bin/env python3
"""Scaffold CLI - Main Entry Point.

Usage:
    scaffold <command> [options]

Commands:
    setup-docker    Setup the experimental Dockerfile
    help            Show this help message
"""

from __future__ import annotations

import sys

import click

from scaffold_tasks.cli.setup_docker import setup_docker_cmd
from scaffold_tasks.errors import ProjectConfigNotFoundError
from scaffold_tasks.helpers.project_paths import get_paths

# Minimum number of CLI args (program name + command)
_MIN_ARGS = 2
_CANCELLED_EXIT_CODE = 130

CLICK_COMMANDS: dict[str, click.Command] = {
    "setup-docker": setup_docker_cmd,
}


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)

    try:
        paths = get_paths()
    except ProjectConfigNotFoundError:
        print("📍 Project: not found (run from inside a project directory)")
    else:
        print(f"📍 Project: {paths.base}")
        print(f"   Config:  {paths.config.name}")

    print("\n🧪 Experimental setup commands:")
    for name, cmd in CLICK_COMMANDS.items():
        print(f"  {name:20} - {cmd.help}")


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level scaffold command group."""
    if ctx.invoked_subcommand is not None:
        return 0

    print_help()
    return 0


def _register_commands() -> None:
    """Register all top-level commands in the click app."""
    for name, cmd_obj in CLICK_COMMANDS.items():
        _click_cli.add_command(cmd_obj, name=name)

    @click.command(name="help", help="Show help message")
    def _help_cmd() -> int:
        print_help()
        return 0

    _click_cli.add_command(_help_cmd)


_register_commands()


def main() -> int:
    """Main CLI entry point."""
    if len(sys.argv) < _MIN_ARGS or sys.argv[1] in ["help", "--help", "-h"]:
        print_help()
        return 0

    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="scaffold",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return _CANCELLED_EXIT_CODE
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
