"""
scaffold-tasks

Run confirm-guarded, idempotent scaffolding pipelines that add
template-derived files to a project and enable them in its config.
"""

__version__ = "0.1.0"

from scaffold_tasks.core.pipeline import PipelineRunner, TaskStep
from scaffold_tasks.scaffolding.docker import DockerSetup, DockerSetupOptions

__all__ = [
    "DockerSetup",
    "DockerSetupOptions",
    "PipelineRunner",
    "TaskStep",
]
