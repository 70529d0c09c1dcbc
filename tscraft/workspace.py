"""Workspace guard.

Creates the project directory and makes it the current working directory.
An existing path with the same name is never touched.
"""

from __future__ import annotations

import os
from pathlib import Path

from tscraft.errors import FilesystemWriteError, TargetExistsError


def ensure_workspace(
    name: str,
    base_dir: str | Path | None = None,
    *,
    enter: bool = True,
) -> Path:
    """Create the workspace directory for ``name``.

    Args:
        name: Project name; expected to be a single path segment.
        base_dir: Directory the workspace is created in. Defaults to the
            current working directory.
        enter: Whether to ``chdir`` into the new workspace.

    Returns:
        Absolute path to the new workspace.

    Raises:
        TargetExistsError: if a file or directory named ``name`` already exists.
        FilesystemWriteError: if the directory cannot be created.
    """
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    target = base / name
    if target.exists() or target.is_symlink():
        raise TargetExistsError(target)

    try:
        target.mkdir()
    except FileExistsError as exc:
        raise TargetExistsError(target) from exc
    except OSError as exc:
        raise FilesystemWriteError(target, exc.strerror or str(exc)) from exc

    workspace = target.resolve()
    if enter:
        os.chdir(workspace)
    return workspace
