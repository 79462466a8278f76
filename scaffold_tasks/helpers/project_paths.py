"""Locate the project root and its configuration file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from scaffold_tasks.errors import ProjectConfigNotFoundError

PROJECT_CONFIG_FILENAME = "redwood.toml"
CWD_ENV_VAR = "SCAFFOLD_CWD"


@dataclass(frozen=True)
class ProjectPaths:
    base: Path
    config: Path


def _start_dir() -> Path:
    override = os.environ.get(CWD_ENV_VAR)
    if override:
        return Path(override).resolve()
    return Path.cwd()


def get_config_path(start: Path | None = None) -> Path:
    """Find the project config file.

    Searches upwards from ``start`` (default: ``$SCAFFOLD_CWD`` or the
    current working directory) so commands work from any subdirectory of
    the project.

    Raises:
        ProjectConfigNotFoundError: If no parent directory holds the file.
    """
    current = start if start is not None else _start_dir()
    for parent in [current, *current.parents]:
        candidate = parent / PROJECT_CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    raise ProjectConfigNotFoundError(
        f"Could not find a '{PROJECT_CONFIG_FILENAME}' file in {current} or any parent directory."
    )


def get_paths(start: Path | None = None) -> ProjectPaths:
    """Return the project base directory and config file path."""
    config = get_config_path(start)
    return ProjectPaths(base=config.parent, config=config)
