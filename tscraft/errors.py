"""Exceptions raised while resolving input and scaffolding a project.

Every error is terminal for the run. The CLI catches :class:`ScaffoldError`,
reports it and exits with a non-zero status.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all tscraft failures."""


class Cancelled(ScaffoldError):
    """Raised when the user declines to supply a required input."""

    def __init__(self, message: str = "Cancelled.") -> None:
        super().__init__(message)


class TargetExistsError(ScaffoldError):
    """Raised when the workspace directory is already taken."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(
            f'Folder "{self.path.name}" already exists. '
            "Delete it or choose another name."
        )


class CommandFailedError(ScaffoldError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, command: list[str], returncode: int) -> None:
        self.command = list(command)
        self.returncode = returncode
        super().__init__(
            f"Command failed with exit code {returncode}: {' '.join(self.command)}"
        )


class FilesystemWriteError(ScaffoldError):
    """Raised when a file or directory cannot be written."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not write {self.path}{detail}")
