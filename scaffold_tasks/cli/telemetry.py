"""Local error telemetry for scaffold commands.

Failed invocations are appended to ``<project>/.scaffold/_stats/errors.txt``
as tab-separated ``timestamp, invocation, message`` lines. The invocation is
normalized so that flag order and flag values do not matter::

    scaffold setup-docker | flags: --force, --verbose

Set ``SCAFFOLD_DISABLE_TELEMETRY=1`` to turn recording off.
"""

from __future__ import annotations

import os
import re
from datetime import datetime, timezone
from pathlib import Path

_STATS_DIR_PARTS = (".scaffold", "_stats")
_ERRORS_FILE_NAME = "errors.txt"
_PROG = "scaffold"
_DISABLE_ENV_VAR = "SCAFFOLD_DISABLE_TELEMETRY"
_FALSY = {"", "0", "false", "no", "off"}

_VALID_COMMAND_TOKEN_RE = re.compile(r"^[a-z0-9][a-z0-9_-]*$", re.IGNORECASE)


def telemetry_disabled() -> bool:
    """Return True when the disable env var is set to a truthy value."""
    return os.environ.get(_DISABLE_ENV_VAR, "").strip().lower() not in _FALSY


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _stats_dir(workspace_root: Path) -> Path:
    return workspace_root / _STATS_DIR_PARTS[0] / _STATS_DIR_PARTS[1]


def errors_file(workspace_root: Path) -> Path:
    """Return the error log path for a project."""
    return _stats_dir(workspace_root) / _ERRORS_FILE_NAME


def _flag_name(token: str) -> str:
    """Return canonical flag name (drop any assigned value)."""
    if "=" in token:
        return token.split("=", 1)[0]
    return token


def normalize_invocation(argv_tokens: list[str]) -> str:
    """Normalize command + flags so option order and values do not matter.

    Flag values and positional arguments are dropped; they may hold paths
    or other user data.
    """
    parsed_tokens = [token for token in argv_tokens if token not in {"", "\\"}]

    command_path = [_PROG]
    cursor = 0
    while cursor < len(parsed_tokens):
        token = parsed_tokens[cursor]
        if token.startswith("-") or _VALID_COMMAND_TOKEN_RE.match(token) is None:
            break
        command_path.append(token)
        cursor += 1

    flags = {
        _flag_name(token)
        for token in parsed_tokens[cursor:]
        if token.startswith("-") and token != "-"
    }

    normalized = " ".join(command_path)
    if flags:
        normalized += " | flags: " + ", ".join(sorted(flags))
    return normalized


def _one_line(message: str) -> str:
    return " ".join(message.split())


def record_error(workspace_root: Path, argv_tokens: list[str], message: str) -> Path | None:
    """Append one failed invocation to the project's error log.

    Returns:
        Path of the error log, or None when telemetry is disabled.
    """
    if telemetry_disabled():
        return None

    file_path = errors_file(workspace_root)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    line = "\t".join([_utc_now_iso(), normalize_invocation(argv_tokens), _one_line(message)])
    with open(file_path, "a", encoding="utf-8") as f:
        f.write(line + "\n")
    return file_path

