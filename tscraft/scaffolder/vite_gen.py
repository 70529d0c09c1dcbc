"""React + Vite + TypeScript project generation.

File creation is delegated to the external ``create vite`` generator; its
output is trusted as-is.
"""

from __future__ import annotations

from pathlib import Path

from tscraft.utils import print_step

from .package_manager import PackageManager


class ViteReactGenerator:
    """Runs ``create vite`` with a fixed starter kind inside the workspace."""

    def __init__(self, package_manager: PackageManager, starter: str = "react-ts") -> None:
        self.package_manager = package_manager
        self.starter = starter

    async def generate(self, root: Path) -> None:
        print_step(f"Scaffolding Vite ({self.starter}) starter...")
        await self.package_manager.create_vite(self.starter, root)
