"""Append a configuration block to a project config file exactly once."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from scaffold_tasks.core.file_writer import write_file


class ConfigPatchOutcome(Enum):
    """Result of patching a config file."""

    APPENDED = "appended"
    ALREADY_PRESENT = "already_present"


def patch_config(path: Path, marker: str, block: str) -> ConfigPatchOutcome:
    """Append block to the config file at path unless marker is already in it.

    The file is treated as plain text: existing bytes, comments and
    formatting are kept verbatim and block is added at end-of-file. This is
    only correct for formats where a top-level block may be appended, such
    as TOML sections.

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    path = Path(path)
    original = path.read_bytes()

    if marker.encode("utf-8") in original:
        return ConfigPatchOutcome.ALREADY_PRESENT

    write_file(path, original + block.encode("utf-8"), overwrite=True)
    return ConfigPatchOutcome.APPENDED
