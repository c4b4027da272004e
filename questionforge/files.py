"""Filesystem helpers shared by the question tools."""

from __future__ import annotations

from pathlib import Path


def walk_dir(directory: str | Path) -> list[Path]:
    """Return the non-directory entries of *directory*, sorted by path."""
    return sorted(entry for entry in Path(directory).iterdir() if not entry.is_dir())


def read_file(path: str | Path) -> str:
    """Read a UTF-8 text file exactly as stored, line endings included."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_file(path: str | Path, content: str) -> None:
    """Write *content* to *path* as UTF-8 without translating line endings."""
    Path(path).write_text(content, encoding="utf-8", newline="")


def replace_target(target: str, line: str) -> str:
    """Remove every occurrence of *target* from *line*."""
    return line.replace(target, "")