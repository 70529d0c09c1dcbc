"""Shared utility functions for tscraft.

Provides async command execution, JSON and text file writing, and Rich-based
console reporting. Filesystem failures are re-raised as
:class:`~tscraft.errors.FilesystemWriteError` so callers only deal with the
tscraft error hierarchy.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from tscraft.errors import FilesystemWriteError

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    capture: bool = False,
) -> tuple[int, str, str]:
    """Run a command asynchronously and wait for it to finish.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.
        capture: Whether to capture stdout/stderr. When ``False`` the child
            inherits the parent's streams so the user sees live progress.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple. The strings are empty when
        *capture* is ``False``. A command that cannot be started (missing or
        not executable) yields return code ``-1``.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            cwd=str(cwd) if cwd else None,
        )
    except FileNotFoundError:
        return (-1, "", f"Command not found: {cmd[0]}")
    except OSError as exc:
        return (-1, "", f"Could not start {cmd[0]}: {exc.strerror or exc}")

    stdout_bytes, stderr_bytes = await process.communicate()
    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# File writing
# ---------------------------------------------------------------------------


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* the way npm tooling writes its own JSON files."""
    return json.dumps(data, indent=2, ensure_ascii=False)


async def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories.

    The write runs in a worker thread. Any ``OSError`` is re-raised as
    :class:`FilesystemWriteError`.
    """
    file_path = Path(path)
    try:
        await asyncio.to_thread(_write_file, file_path, content)
    except OSError as exc:
        raise FilesystemWriteError(file_path, exc.strerror or str(exc)) from exc
    return file_path


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Save *data* as pretty-printed JSON (two-space indent)."""
    return await write_text(path, dump_json(data))


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, subtitle: str = "") -> None:
    """Print the welcome banner shown when tscraft starts."""
    body = f"[bold cyan]{title}[/bold cyan]"
    if subtitle:
        body += f"\n[dim]{subtitle}[/dim]"
    console.print(Panel(body, expand=False, border_style="cyan"))


def print_step(message: str) -> None:
    """Print a step heading before a generation step runs."""
    console.print()
    console.print(f"[bold bright_blue]>[/bold bright_blue] [bold]{escape(message)}[/bold]")


def print_next_steps(steps: list[str], title: str = "Next steps") -> None:
    """Print the commands the user should run after scaffolding."""
    body = "\n".join(f"  {escape(step)}" for step in steps)
    console.print(Panel(body, title=title, title_align="left", expand=False, border_style="green"))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
