"""Exception types raised by scaffold pipelines."""

from __future__ import annotations

DEFAULT_EXIT_CODE = 1


class ScaffoldError(Exception):
    """Base error for scaffold commands.

    ``exit_code`` is used as the process exit status when the error aborts
    a pipeline.
    """

    exit_code: int = DEFAULT_EXIT_CODE

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class UserAbortError(ScaffoldError):
    """Operator declined or cancelled a confirmation prompt."""

    def __init__(self, message: str = "User aborted") -> None:
        super().__init__(message)


class StepContractError(ScaffoldError):
    """A step reported an outcome it is not allowed to report."""


class ProjectConfigNotFoundError(ScaffoldError, FileNotFoundError):
    """No project configuration file was found."""
