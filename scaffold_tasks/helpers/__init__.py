"""Helper utilities for scaffold commands."""

from scaffold_tasks.helpers.project_paths import (
    ProjectPaths,
    get_config_path,
    get_paths,
)

__all__ = [
    "ProjectPaths",
    "get_config_path",
    "get_paths",
]
