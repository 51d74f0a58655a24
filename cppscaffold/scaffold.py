# cppscaffold/scaffold.py
"""
Filesystem materialization for generated projects.

Both helpers are idempotent with respect to directories and overwrite files
unconditionally. They are a best-effort, non-transactional writer: the first
``OSError`` is re-raised as :class:`FileWriteError` and whatever was already
written stays on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Mapping

from cppscaffold.errors import FileWriteError
from cppscaffold.log_manager import get_logger

__all__ = ["create_directories", "write_files"]

logger = get_logger("cppscaffold.scaffold")


def create_directories(root: Path, structure: Iterable[str]) -> List[Path]:
    """Create ``root`` and each subdirectory of ``structure``.

    Parameters
    ----------
    root
        Project root directory.
    structure
        Iterable of relative directory paths to create.

    Returns
    -------
    list of Path
        The directories, in creation order.

    Raises
    ------
    FileWriteError
        If creating any directory fails (e.g. a file is in the way).
    """
    created: List[Path] = []
    for sub in structure:
        path = Path(root) / sub
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileWriteError(f"Error creating directory {path}: {exc}", path=path) from exc
        created.append(path)
    return created


def write_files(root: Path, files: Mapping[str, str]) -> List[Path]:
    """Write ``files`` (relative path -> text) under ``root``.

    Existing files are overwritten. Missing parent directories are created.

    Raises
    ------
    FileWriteError
        On the first I/O failure.
    """
    written: List[Path] = []
    for rel_path, content in files.items():
        path = Path(root) / rel_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(content)
        except OSError as exc:
            raise FileWriteError(f"Error writing file {path}: {exc}", path=path) from exc
        logger.debug("Wrote %s", path)
        written.append(path)
    return written
