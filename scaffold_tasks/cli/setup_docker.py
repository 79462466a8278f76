"""``scaffold setup-docker`` command.

Adds the experimental Dockerfile and Docker Compose files to the project and
enables them in the project config.

Usage:
    scaffold setup-docker            # keep files that already exist
    scaffold setup-docker --force    # overwrite Dockerfile and compose files
    scaffold setup-docker --verbose  # print every step as it starts/finishes
"""

from __future__ import annotations

import contextlib
import sys
from pathlib import Path

import click

from scaffold_tasks.cli.telemetry import record_error
from scaffold_tasks.core.actions import Confirm, click_confirm
from scaffold_tasks.core.pipeline import Aborted
from scaffold_tasks.errors import ScaffoldError
from scaffold_tasks.helpers.helpers_logging import print_error
from scaffold_tasks.helpers.project_paths import get_paths
from scaffold_tasks.scaffolding.docker import (
    COMMAND,
    DESCRIPTION,
    DockerSetup,
    DockerSetupOptions,
)


def _report_failure(workspace_root: Path | None, argv: list[str], message: str) -> None:
    """Send the failure to telemetry and show it to the operator."""
    if workspace_root is not None:
        with contextlib.suppress(Exception):
            record_error(workspace_root, argv, message)
    print_error(message)


def handler(
    *,
    force: bool,
    verbose: bool,
    confirm: Confirm = click_confirm,
    argv: list[str] | None = None,
) -> int:
    """Run the setup-docker pipeline and return a process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        paths = get_paths()
    except ScaffoldError as exc:
        _report_failure(None, argv, str(exc))
        return exc.exit_code

    options = DockerSetupOptions(
        base_dir=paths.base,
        config_path=paths.config,
        force=force,
        verbose=verbose,
    )

    outcome = DockerSetup(options, confirm=confirm).run()
    if isinstance(outcome, Aborted):
        _report_failure(paths.base, argv, outcome.message)
        return outcome.exit_code
    return 0


@click.command(name=COMMAND, help=DESCRIPTION)
@click.option("--force", "-f", is_flag=True, default=False,
              help="Overwrite existing Dockerfile and compose files")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Print detailed progress for every step")
def setup_docker_cmd(force: bool, verbose: bool) -> int:
    """Setup the experimental Dockerfile."""
    return handler(force=force, verbose=verbose)
