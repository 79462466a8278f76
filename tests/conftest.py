"""Shared fixtures for the scaffold-tasks test suite.

Provides a composable ``make_project_dir`` factory for an isolated project
(a directory holding ``redwood.toml``) and yes/no confirm stubs.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import Mock

import pytest

from scaffold_tasks.helpers.project_paths import CWD_ENV_VAR, PROJECT_CONFIG_FILENAME

# Default config content used by the factory.
DEFAULT_CONFIG = (
    "# This file contains the configuration settings for your app.\n"
    "[web]\n"
    "  title = \"Redwood App\"\n"
    "  port = 8910\n"
    "[api]\n"
    "  port = 8911\n"
)

MakeProjectDir = Callable[..., Path]


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable ANSI colors and telemetry so tests see plain text."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("SCAFFOLD_DISABLE_TELEMETRY", "1")


@pytest.fixture()
def make_project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> MakeProjectDir:
    """Return a factory creating a project directory and pointing the CLI at it.

    Usage::

        project = make_project_dir(config="[web]\\n")
        project = make_project_dir(config=None)  # no redwood.toml
    """

    def _make(*, config: str | None = DEFAULT_CONFIG, name: str = "app") -> Path:
        project = tmp_path / name
        project.mkdir(parents=True, exist_ok=True)
        if config is not None:
            (project / PROJECT_CONFIG_FILENAME).write_text(config, encoding="utf-8")
        monkeypatch.setenv(CWD_ENV_VAR, str(project))
        return project

    return _make


@pytest.fixture()
def project_dir(make_project_dir: MakeProjectDir) -> Path:
    """Default project: redwood.toml with a few sections, nothing else."""
    return make_project_dir()


@pytest.fixture()
def accept() -> Mock:
    """Confirm stub that answers yes."""
    return Mock(return_value=True)


@pytest.fixture()
def refuse() -> Mock:
    """Confirm stub that answers no."""
    return Mock(return_value=False)
