"""Terminal renderers for pipeline progress."""

from __future__ import annotations

from typing import Protocol

from scaffold_tasks.core.pipeline import (
    Aborted,
    PipelineOutcome,
    StepState,
    StepStatus,
)
from scaffold_tasks.helpers.helpers_logging import (
    Colors,
    colorize,
    print_info,
    print_skip,
    print_success,
)


class Renderer(Protocol):
    def step_started(self, status: StepStatus) -> None:
        ...

    def step_finished(self, status: StepStatus) -> None:
        ...

    def pipeline_finished(self, outcome: PipelineOutcome) -> None:
        ...


def _failure_line(title: str) -> str:
    return colorize(f"✖ {title}", Colors.RED)


class DefaultRenderer:
    """One line per titled step once it has finished."""

    def step_started(self, status: StepStatus) -> None:
        pass

    def step_finished(self, status: StepStatus) -> None:
        if status.title is None:
            return
        if status.state is StepState.SUCCEEDED:
            print_success(status.title)
        elif status.state is StepState.SKIPPED:
            print_skip(f"{status.title} [SKIPPED: {status.reason}]")
        elif status.state is StepState.FAILED:
            print(_failure_line(status.title))

    def pipeline_finished(self, outcome: PipelineOutcome) -> None:
        pass


class VerboseRenderer:
    """Start and finish lines for every step, including silent ones."""

    def _label(self, status: StepStatus) -> str:
        return status.title or f"(step {status.index + 1})"

    def step_started(self, status: StepStatus) -> None:
        suffix = " (waiting for input)" if status.interactive else ""
        print_info(f"[STARTED] {self._label(status)}{suffix}")

    def step_finished(self, status: StepStatus) -> None:
        label = self._label(status)
        timing = f"({status.duration_s:.2f}s)"
        if status.state is StepState.SUCCEEDED:
            print_success(f"[COMPLETED] {label} {timing}")
        elif status.state is StepState.SKIPPED:
            print_skip(f"[SKIPPED] {label}: {status.reason} {timing}")
        elif status.state is StepState.FAILED:
            print(_failure_line(f"[FAILED] {label}: {status.reason} {timing}"))

    def pipeline_finished(self, outcome: PipelineOutcome) -> None:
        counts: dict[str, int] = {}
        for status in outcome.statuses:
            counts[status.state.value] = counts.get(status.state.value, 0) + 1
        summary = ", ".join(f"{state}: {count}" for state, count in sorted(counts.items()))
        result = "aborted" if isinstance(outcome, Aborted) else "completed"
        print_info(f"Pipeline {result} ({summary})")


def make_renderer(*, verbose: bool) -> Renderer:
    """Pick the renderer for the requested display density."""
    if verbose:
        return VerboseRenderer()
    return DefaultRenderer()
