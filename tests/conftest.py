"""Shared pytest fixtures for the tscraft test suite.

Provides reusable fixtures for:
- A temporary working directory the CLI can create workspaces in
- A pnpm ``PackageManager`` whose commands are recorded instead of executed
- A silent Rich console for prompt tests
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from rich.console import Console

from tscraft.scaffolder.package_manager import PackageManager


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """An empty, already-created workspace directory."""
    root = tmp_path / "demo-app"
    root.mkdir()
    return root


@pytest.fixture
def in_tmp_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from ``tmp_path``; the original cwd is restored afterwards."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# External commands
# ---------------------------------------------------------------------------

@pytest.fixture
def package_manager() -> PackageManager:
    """A pnpm PackageManager whose ``run`` records commands without executing them."""
    pm = PackageManager("pnpm")
    pm.run = AsyncMock(return_value=None)
    return pm


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

@pytest.fixture
def quiet_console() -> Console:
    """A Rich console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), force_terminal=False)
