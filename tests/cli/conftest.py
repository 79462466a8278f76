"""Shared fixtures for end-to-end CLI tests.

Tests drive the real ``scaffold`` click group through :class:`click.testing.CliRunner`,
answering prompts through ``input`` exactly as a user would type them.
The project directory comes from ``make_project_dir`` in the parent conftest,
so every test works on its own isolated copy.
"""

from collections.abc import Callable

import pytest
from click.testing import CliRunner, Result

from scaffold_tasks.cli import commands

RunScaffold = Callable[..., Result]


@pytest.fixture()
def run_scaffold() -> RunScaffold:
    """Return a callable that invokes ``scaffold <args>`` in-process.

    Usage::

        result = run_scaffold("setup-docker", "--force", input="y\\n")
        assert result.return_value == 0

    ``standalone_mode`` is off so the command's exit code is available
    as ``result.return_value``.
    """
    runner = CliRunner()

    def _run(*args: str, input: str | None = None) -> Result:
        return runner.invoke(
            commands._click_cli,
            list(args),
            input=input,
            standalone_mode=False,
            catch_exceptions=False,
        )

    return _run
