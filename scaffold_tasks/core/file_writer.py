"""Write scaffold files without clobbering existing work."""

from __future__ import annotations

import contextlib
import os
import tempfile
from enum import Enum
from pathlib import Path


class WriteOutcome(Enum):
    """Result of a single file write."""

    WRITTEN = "written"
    ALREADY_EXISTS = "already_exists"


def _as_bytes(content: str | bytes) -> bytes:
    if isinstance(content, bytes):
        return content
    return content.encode("utf-8")


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _target_mode(path: Path) -> int:
    """Keep the mode of an existing file, else use the default for new files."""
    if path.is_file():
        return path.stat().st_mode & 0o7777
    return 0o666 & ~_current_umask()


def _replace_atomically(path: Path, payload: bytes) -> None:
    """Write payload to a sibling temp file, then rename it over path.

    Readers see either the old content or the new content, never a
    partially written file.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as tmp_file:
            tmp_file.write(payload)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise


def write_file(path: Path, content: str | bytes, *, overwrite: bool = False) -> WriteOutcome:
    """Write content to path.

    Args:
        path: Destination file
        content: File payload; str is encoded as UTF-8
        overwrite: Replace the file if it already exists

    Returns:
        WriteOutcome.ALREADY_EXISTS when a regular file exists and overwrite
        is False (nothing is touched), WriteOutcome.WRITTEN otherwise.

    Raises:
        OSError: If the parent directory or the file cannot be written, or
            if a directory sits at path.
    """
    path = Path(path)
    if path.is_file() and not overwrite:
        return WriteOutcome.ALREADY_EXISTS

    path.parent.mkdir(parents=True, exist_ok=True)
    _replace_atomically(path, _as_bytes(content))
    return WriteOutcome.WRITTEN
