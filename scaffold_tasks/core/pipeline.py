"""Sequential task pipeline.

A pipeline is an ordered list of ``TaskStep`` objects. Each step wraps an
action whose ``run()`` returns a ``StepResult``:

    Succeeded          the step did its work
    Skipped(reason)    the work was already done; the pipeline continues
    Failed(cause)      the pipeline stops; no later step runs

``PipelineRunner.run`` never raises for step failures. It returns
``Completed`` or ``Aborted`` and keeps a per-step status log that callers can
inspect no matter how verbose the rendering was.

Example:
    runner = PipelineRunner(verbose=True)
    outcome = runner.run(steps)
    if isinstance(outcome, Aborted):
        print_error(outcome.message)
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from scaffold_tasks.errors import DEFAULT_EXIT_CODE, StepContractError

if TYPE_CHECKING:
    from scaffold_tasks.core.renderers import Renderer


# ---------------------------------------------------------------------------
# Step results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Succeeded:
    """The step performed its effect."""


@dataclass(frozen=True)
class Skipped:
    """The step had nothing to do."""

    reason: str


@dataclass(frozen=True)
class Failed:
    """The step could not complete; the pipeline must stop."""

    cause: BaseException


StepResult = Succeeded | Skipped | Failed


class Action(Protocol):
    """Anything a step can execute."""

    def run(self) -> StepResult:
        ...


@dataclass(frozen=True)
class TaskStep:
    """One unit of work in a pipeline.

    A step with no title is silent: its status is recorded but default
    rendering does not print it.
    """

    action: Action
    title: str | None = None
    skippable: bool = True

    @property
    def interactive(self) -> bool:
        return bool(getattr(self.action, "interactive", False))


# ---------------------------------------------------------------------------
# Status log
# ---------------------------------------------------------------------------


class StepState(Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"
    FAILED = "failed"


class PipelineState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass
class StepStatus:
    """Mutable status record for one step, owned by the runner."""

    index: int
    title: str | None
    interactive: bool = False
    state: StepState = StepState.PENDING
    reason: str = ""
    duration_s: float = 0.0


# ---------------------------------------------------------------------------
# Pipeline outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Completed:
    """Every step succeeded or skipped."""

    statuses: tuple[StepStatus, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Aborted:
    """A step failed; later steps never ran."""

    cause: BaseException
    step_title: str | None = None
    statuses: tuple[StepStatus, ...] = field(default_factory=tuple)

    @property
    def message(self) -> str:
        return str(self.cause) or type(self.cause).__name__

    @property
    def exit_code(self) -> int:
        code = getattr(self.cause, "exit_code", None)
        if isinstance(code, int) and code != 0:
            return code
        return DEFAULT_EXIT_CODE


PipelineOutcome = Completed | Aborted


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def _execute(step: TaskStep) -> StepResult:
    """Run a step's action, turning raised errors into Failed."""
    try:
        result = step.action.run()
    except Exception as exc:
        return Failed(exc)

    if isinstance(result, Skipped) and not step.skippable:
        return Failed(StepContractError(f"Step '{step.title}' cannot be skipped: {result.reason}"))
    return result


class PipelineRunner:
    """Run task steps one after another and record what happened."""

    def __init__(self, *, verbose: bool = False, renderer: Renderer | None = None) -> None:
        if renderer is None:
            from scaffold_tasks.core.renderers import make_renderer

            renderer = make_renderer(verbose=verbose)
        self.renderer = renderer
        self.state = PipelineState.IDLE
        self.statuses: list[StepStatus] = []

    def run(self, steps: Sequence[TaskStep]) -> PipelineOutcome:
        """Execute steps in declaration order.

        Returns:
            Completed if no step failed, otherwise Aborted carrying the first
            failure's cause.

        Raises:
            RuntimeError: If this runner has already run a pipeline.
        """
        if self.state is not PipelineState.IDLE:
            raise RuntimeError(f"Pipeline runner already used (state: {self.state.value})")

        self.state = PipelineState.RUNNING
        self.statuses = [
            StepStatus(index=i, title=step.title, interactive=step.interactive)
            for i, step in enumerate(steps)
        ]

        for step, status in zip(steps, self.statuses):
            status.state = StepState.RUNNING
            self.renderer.step_started(status)

            start = time.monotonic()
            result = _execute(step)
            status.duration_s = time.monotonic() - start

            if isinstance(result, Failed):
                status.state = StepState.FAILED
                status.reason = str(result.cause)
                self.renderer.step_finished(status)
                return self._finish(Aborted(
                    cause=result.cause,
                    step_title=step.title,
                    statuses=tuple(self.statuses),
                ))

            if isinstance(result, Skipped):
                status.state = StepState.SKIPPED
                status.reason = result.reason
            else:
                status.state = StepState.SUCCEEDED
            self.renderer.step_finished(status)

        return self._finish(Completed(statuses=tuple(self.statuses)))

    def _finish(self, outcome: PipelineOutcome) -> PipelineOutcome:
        if isinstance(outcome, Aborted):
            self.state = PipelineState.ABORTED
        else:
            self.state = PipelineState.COMPLETED
        self.renderer.pipeline_finished(outcome)
        return outcome
