"""Load template manifests and payloads from package data.

Each template group is a directory next to this module holding the template
files and a ``manifest.yaml`` describing where they are written::

    templates:
      - name: Dockerfile
        destination: Dockerfile
        title: Adding the experimental Dockerfile...
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import cast

import yaml

MANIFEST_FILENAME = "manifest.yaml"


@dataclass(frozen=True)
class TemplateSpec:
    name: str
    destination: str
    title: str


def templates_root() -> Path:
    """Return the directory holding all template groups."""
    return Path(__file__).resolve().parent


def _group_dir(group: str) -> Path:
    group_dir = templates_root() / group
    if not group_dir.is_dir():
        raise FileNotFoundError(f"Template group not found: {group}")
    return group_dir


def _parse_entry(raw: object, manifest_path: Path) -> TemplateSpec:
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid template entry in {manifest_path}: {raw!r}")
    entry = cast(dict[str, object], raw)

    values: dict[str, str] = {}
    for key in ("name", "destination", "title"):
        value = entry.get(key)
        if not isinstance(value, str) or not value:
            raise ValueError(f"Template entry in {manifest_path} is missing '{key}': {entry!r}")
        values[key] = value

    destination = PurePosixPath(values["destination"])
    if destination.is_absolute() or ".." in destination.parts:
        raise ValueError(
            f"Template destination must stay inside the project: {values['destination']}"
        )

    return TemplateSpec(**values)


def load_manifest(group: str) -> list[TemplateSpec]:
    """Read the manifest of a template group.

    Raises:
        FileNotFoundError: If the group or its manifest does not exist.
        ValueError: If the manifest is malformed.
    """
    manifest_path = _group_dir(group) / MANIFEST_FILENAME
    try:
        raw_data: object = yaml.safe_load(manifest_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {manifest_path}: {exc}") from exc

    if not isinstance(raw_data, dict):
        raise ValueError(f"Template manifest must be a mapping: {manifest_path}")

    entries = cast(dict[str, object], raw_data).get("templates")
    if not isinstance(entries, list):
        raise ValueError(f"Template manifest has no 'templates' list: {manifest_path}")

    return [_parse_entry(raw, manifest_path) for raw in cast(list[object], entries)]


def read_template(group: str, name: str) -> bytes:
    """Return the raw bytes of a template file."""
    return (_group_dir(group) / name).read_bytes()
