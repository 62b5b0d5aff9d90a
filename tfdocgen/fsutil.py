"""Filesystem helpers shared by the pipeline stages."""

from __future__ import annotations

import shutil
from pathlib import Path

from .errors import FileIOError


def file_exists(path: Path | str) -> bool:
    """Return True when ``path`` is non-empty and names an existing file."""
    if not path:
        return False
    return Path(path).is_file()


def write_file(path: Path, content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileIOError(f"unable to write file {str(path)!r}: {exc}") from exc


def copy_tree(source: Path, destination: Path) -> None:
    """Copy a file or directory tree to ``destination``, merging directories."""
    try:
        if source.is_dir():
            shutil.copytree(source, destination, dirs_exist_ok=True)
        else:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, destination)
    except OSError as exc:
        raise FileIOError(f"unable to copy {str(source)!r} to {str(destination)!r}: {exc}") from exc


def reset_dir(path: Path) -> None:
    """Remove ``path`` recursively and recreate it empty."""
    try:
        if path.exists():
            shutil.rmtree(path)
        path.mkdir(parents=True)
    except OSError as exc:
        raise FileIOError(f"unable to reset directory {str(path)!r}: {exc}") from exc


__all__ = ["copy_tree", "file_exists", "reset_dir", "write_file"]
