"""Package-manager command construction and execution.

Every command inherits the parent's streams so the user sees live progress.
A non-zero exit status aborts the run with
:class:`~tscraft.errors.CommandFailedError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from tscraft.errors import CommandFailedError
from tscraft.utils import run_command


# name -> (add, add-dev flag, run prefix, exec prefix)
_MANAGERS: dict[str, tuple[list[str], str, str, str]] = {
    "pnpm": (["pnpm", "add"], "-D", "pnpm", "pnpm"),
    "npm": (["npm", "install"], "--save-dev", "npm run", "npx"),
    "yarn": (["yarn", "add"], "--dev", "yarn", "yarn"),
}


class PackageManager:
    """Builds and runs commands for one package manager (pnpm, npm or yarn)."""

    def __init__(self, name: str = "pnpm") -> None:
        if name not in _MANAGERS:
            raise ValueError(
                f"Unsupported package manager: {name!r} "
                f"(expected one of {', '.join(sorted(_MANAGERS))})"
            )
        self.name = name

    # -- Command construction ----------------------------------------------

    def add_command(self, packages: Iterable[str], *, dev: bool = False) -> list[str]:
        """Return the command that adds *packages* to the manifest."""
        base, dev_flag, _, _ = _MANAGERS[self.name]
        cmd = list(base)
        if dev:
            cmd.append(dev_flag)
        cmd.extend(packages)
        return cmd

    def create_vite_command(self, starter: str) -> list[str]:
        """Return the ``create vite`` command scaffolding into the current directory."""
        if self.name == "pnpm":
            return ["pnpm", "create", "vite@latest", ".", "--template", starter, "--yes"]
        if self.name == "npm":
            return ["npm", "create", "vite@latest", ".", "--", "--template", starter, "--yes"]
        return ["yarn", "create", "vite", ".", "--template", starter]

    @property
    def run_prefix(self) -> str:
        """Prefix for running a manifest script, e.g. ``npm run``."""
        return _MANAGERS[self.name][2]

    @property
    def exec_prefix(self) -> str:
        """Prefix for executing a locally installed binary, e.g. ``npx``."""
        return _MANAGERS[self.name][3]

    def next_steps(self, project_name: str, *, with_tests: bool = True) -> list[str]:
        """Commands the user should run once scaffolding is done.

        ``with_tests`` is off for starters that ship no ``test`` script.
        """
        steps = [
            f"cd {project_name}",
            f"{self.name} install",
            f"{self.run_prefix} dev",
        ]
        if with_tests:
            steps.append(f"{self.run_prefix} test")
        return steps

    # -- Execution ---------------------------------------------------------

    async def run(self, cmd: list[str], cwd: str | Path) -> None:
        """Run *cmd* in *cwd*, raising on a non-zero exit status."""
        returncode, _, _ = await run_command(cmd, cwd=cwd, capture=False)
        if returncode != 0:
            raise CommandFailedError(cmd, returncode)

    async def add(
        self, packages: Iterable[str], cwd: str | Path, *, dev: bool = False
    ) -> None:
        """Install *packages* in the project at *cwd*."""
        await self.run(self.add_command(packages, dev=dev), cwd)

    async def create_vite(self, starter: str, cwd: str | Path) -> None:
        """Run the external Vite generator in *cwd*."""
        await self.run(self.create_vite_command(starter), cwd)
