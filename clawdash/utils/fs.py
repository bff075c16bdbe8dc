"""Best-effort filesystem probes.

Every probe swallows I/O errors: a file that is missing and a file that is
unreadable look the same to callers (``Absent``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    path: Path
    content: str


@dataclass(frozen=True)
class Absent:
    path: Path


FileRead = Found | Absent


def read_file_safe(path: Path | str) -> FileRead:
    path = Path(path)
    try:
        return Found(path, path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("read %s failed: %s", path, exc)
        return Absent(path)


def text_or_empty(result: FileRead) -> str:
    return result.content if isinstance(result, Found) else ""


def list_entries_safe(directory: Path | str) -> list[str]:
    try:
        return sorted(entry.name for entry in Path(directory).iterdir())
    except OSError:
        return []


def list_directories_safe(directory: Path | str) -> list[str]:
    directory = Path(directory)
    return [name for name in list_entries_safe(directory) if (directory / name).is_dir()]


def find_entry(directory: Path | str, name: str) -> Path | None:
    """Case-insensitive lookup of a direct child; an exact-case match wins."""
    directory = Path(directory)
    exact = directory / name
    if exact.exists():
        return exact
    wanted = name.lower()
    for entry in list_entries_safe(directory):
        if entry.lower() == wanted:
            return directory / entry
    return None


def read_entry(directory: Path | str, name: str) -> FileRead:
    """``read_file_safe`` on a case-insensitively resolved child of ``directory``."""
    found = find_entry(directory, name)
    if found is None:
        return Absent(Path(directory) / name)
    return read_file_safe(found)
