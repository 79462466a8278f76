"""Template payloads shipped with scaffold commands."""

from scaffold_tasks.templates.loader import (
    TemplateSpec,
    load_manifest,
    read_template,
)

__all__ = ["TemplateSpec", "load_manifest", "read_template"]
