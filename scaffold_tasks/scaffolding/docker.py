"""Scaffold the experimental Docker setup into a project.

Pipeline, in order:

1. Confirm with the operator (refusal aborts everything).
2. Write ``Dockerfile``, ``docker-compose.dev.yml`` and
   ``docker-compose.prod.yml`` from the ``docker`` template group. Existing
   files are kept unless ``force`` is set.
3. Append ``[experimental.dockerfile]`` to the project config unless the
   section is already there. ``force`` does not change this.
4. Print the experimental-feature epilogue.

Every step can be re-run safely.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from scaffold_tasks.core.actions import (
    Confirm,
    EpiloguePrinter,
    FileWrite,
    NotifyAction,
    PatchConfigAction,
    PromptAction,
    WriteFilesAction,
    click_confirm,
)
from scaffold_tasks.core.pipeline import (
    Aborted,
    PipelineOutcome,
    PipelineRunner,
    StepResult,
    TaskStep,
)
from scaffold_tasks.helpers.epilogue import print_task_epilogue
from scaffold_tasks.templates.loader import load_manifest, read_template

COMMAND = "setup-docker"
DESCRIPTION = "Setup the experimental Dockerfile"
EXPERIMENTAL_TOPIC_ID = 4380

TEMPLATE_GROUP = "docker"
CONFIRMATION_MESSAGE = "The Dockerfile is experimental. Continue?"
DOCKERFILE_CONFIG_MARKER = "[experimental.dockerfile]"
DOCKERFILE_CONFIG_BLOCK = "\n[experimental.dockerfile]\n\tenabled = true\n"

TemplateReader = Callable[[str, str], bytes]


@dataclass(frozen=True)
class WriteTemplateAction:
    """Read a template from the docker group and write it into the project."""

    name: str
    path: Path
    overwrite: bool
    reader: TemplateReader
    display_root: Path | None = None

    def run(self) -> StepResult:
        content = self.reader(TEMPLATE_GROUP, self.name)
        write = FileWrite(path=self.path, content=content, overwrite=self.overwrite)
        return WriteFilesAction(writes=(write,), display_root=self.display_root).run()


@dataclass(frozen=True)
class DockerSetupOptions:
    """Inputs for one setup-docker run."""

    base_dir: Path
    config_path: Path
    force: bool = False
    verbose: bool = False


class DockerSetup:
    """Build and run the setup-docker pipeline."""

    def __init__(
        self,
        options: DockerSetupOptions,
        *,
        confirm: Confirm = click_confirm,
        print_epilogue: EpiloguePrinter = print_task_epilogue,
        template_reader: TemplateReader = read_template,
    ) -> None:
        self.options = options
        self._confirm = confirm
        self._print_epilogue = print_epilogue
        self._read_template = template_reader

    def _write_step(self, name: str, destination: str, title: str) -> TaskStep:
        action = WriteTemplateAction(
            name=name,
            path=self.options.base_dir / destination,
            overwrite=self.options.force,
            reader=self._read_template,
            display_root=self.options.base_dir,
        )
        return TaskStep(action=action, title=title)

    def build_steps(self) -> list[TaskStep]:
        """Return the pipeline steps in execution order.

        Only the manifest is read here; template payloads are read when
        their write step runs.
        """
        steps = [
            TaskStep(
                action=PromptAction(CONFIRMATION_MESSAGE, confirm=self._confirm),
                title="Confirmation",
                skippable=False,
            ),
        ]

        for spec in load_manifest(TEMPLATE_GROUP):
            steps.append(self._write_step(spec.name, spec.destination, spec.title))

        steps.append(
            TaskStep(
                action=PatchConfigAction(
                    path=self.options.config_path,
                    marker=DOCKERFILE_CONFIG_MARKER,
                    block=DOCKERFILE_CONFIG_BLOCK,
                ),
                title=f"Adding config to {self.options.config_path.name}...",
            )
        )
        steps.append(
            TaskStep(
                action=NotifyAction(
                    command=COMMAND,
                    description=DESCRIPTION,
                    topic_id=EXPERIMENTAL_TOPIC_ID,
                    printer=self._print_epilogue,
                ),
                skippable=False,
            )
        )
        return steps

    def run(self, runner: PipelineRunner | None = None) -> PipelineOutcome:
        """Run the pipeline and return its outcome.

        A template manifest that cannot be loaded aborts before any step runs.
        """
        try:
            steps = self.build_steps()
        except (OSError, ValueError) as exc:
            return Aborted(cause=exc)

        if runner is None:
            runner = PipelineRunner(verbose=self.options.verbose)
        return runner.run(steps)
