"""Project scaffolding pipelines.

Public API:
    DockerSetup: Build and run the setup-docker pipeline
    DockerSetupOptions: Inputs for one setup-docker run
"""

from .docker import (
    COMMAND,
    DESCRIPTION,
    EXPERIMENTAL_TOPIC_ID,
    DockerSetup,
    DockerSetupOptions,
)

__all__ = [
    "COMMAND",
    "DESCRIPTION",
    "EXPERIMENTAL_TOPIC_ID",
    "DockerSetup",
    "DockerSetupOptions",
]
