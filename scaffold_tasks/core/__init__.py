"""Pipeline engine: runner, step actions, file writer and config patcher."""

from scaffold_tasks.core.actions import (
    FileWrite,
    NotifyAction,
    PatchConfigAction,
    PromptAction,
    WriteFilesAction,
)
from scaffold_tasks.core.config_patcher import ConfigPatchOutcome, patch_config
from scaffold_tasks.core.file_writer import WriteOutcome, write_file
from scaffold_tasks.core.pipeline import (
    Aborted,
    Completed,
    Failed,
    PipelineOutcome,
    PipelineRunner,
    PipelineState,
    Skipped,
    StepState,
    StepStatus,
    Succeeded,
    TaskStep,
)

__all__ = [
    "Aborted",
    "Completed",
    "ConfigPatchOutcome",
    "Failed",
    "FileWrite",
    "NotifyAction",
    "PatchConfigAction",
    "PipelineOutcome",
    "PipelineRunner",
    "PipelineState",
    "PromptAction",
    "Skipped",
    "StepState",
    "StepStatus",
    "Succeeded",
    "TaskStep",
    "WriteFilesAction",
    "WriteOutcome",
    "patch_config",
    "write_file",
]
