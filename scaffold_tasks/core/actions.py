"""Step actions: prompt, write files, patch config, notify."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import click

from scaffold_tasks.core.config_patcher import ConfigPatchOutcome, patch_config
from scaffold_tasks.core.file_writer import WriteOutcome, write_file
from scaffold_tasks.core.pipeline import Failed, Skipped, StepResult, Succeeded
from scaffold_tasks.errors import UserAbortError

Confirm = Callable[[str], bool]
EpiloguePrinter = Callable[[str, str, int], None]


def click_confirm(message: str) -> bool:
    """Ask a yes/no question on the terminal, defaulting to no."""
    return click.confirm(message, default=False)


def _display_path(path: Path, root: Path | None) -> str:
    if root is None:
        return str(path)
    try:
        return f"./{path.relative_to(root)}"
    except ValueError:
        return str(path)


@dataclass(frozen=True)
class PromptAction:
    """Block on an operator confirmation; refusal aborts the pipeline."""

    message: str
    confirm: Confirm = click_confirm
    interactive: bool = field(default=True, init=False)

    def run(self) -> StepResult:
        try:
            confirmed = self.confirm(self.message)
        except (click.Abort, EOFError):
            confirmed = False
        if not confirmed:
            return Failed(UserAbortError())
        return Succeeded()


@dataclass(frozen=True)
class FileWrite:
    path: Path
    content: str | bytes
    overwrite: bool = False


@dataclass(frozen=True)
class WriteFilesAction:
    """Materialize one or more files.

    Skips only when every target already exists and none may be overwritten.
    """

    writes: tuple[FileWrite, ...]
    display_root: Path | None = None

    def run(self) -> StepResult:
        existing: list[str] = []
        for item in self.writes:
            outcome = write_file(item.path, item.content, overwrite=item.overwrite)
            if outcome is WriteOutcome.ALREADY_EXISTS:
                existing.append(_display_path(item.path, self.display_root))

        if self.writes and len(existing) == len(self.writes):
            names = ", ".join(f"`{name}`" for name in existing)
            verb = "already exists" if len(existing) == 1 else "already exist"
            return Skipped(f"{names} {verb}. Use --force to overwrite.")
        return Succeeded()


@dataclass(frozen=True)
class PatchConfigAction:
    """Append a block to a config file unless its marker is already there."""

    path: Path
    marker: str
    block: str

    def run(self) -> StepResult:
        outcome = patch_config(self.path, self.marker, self.block)
        if outcome is ConfigPatchOutcome.ALREADY_PRESENT:
            return Skipped(
                f"The {self.marker} config block already exists in your "
                f"'{self.path.name}' file."
            )
        return Succeeded()


@dataclass(frozen=True)
class NotifyAction:
    """Print an informational epilogue; touches no files."""

    command: str
    description: str
    topic_id: int
    printer: EpiloguePrinter

    def run(self) -> StepResult:
        self.printer(self.command, self.description, self.topic_id)
        return Succeeded()
