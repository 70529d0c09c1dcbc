"""Node + TypeScript project generation (the default template).

Generates:
- ``package.json`` with build/start/dev/lint/format/test scripts
- ``src/index.ts`` exporting a ``sum`` function
- ``tests/example.test.ts`` (Vitest)
- ``README.md`` with a script table and project-structure diagram
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from tscraft.utils import print_step

from .manifest import PackageManifest
from .package_manager import PackageManager
from .templates import TemplateRenderer


NODE_SCRIPTS: dict[str, str] = {
    "build": "tsc",
    "start": "node dist/index.js",
    "dev": 'nodemon --watch src --ext ts --exec "node --loader ts-node/esm src/index.ts"',
    "lint": "eslint . --ext .ts,.tsx",
    "format": "prettier --write .",
    "test": "vitest run",
    "test:watch": "vitest",
}

NODE_DEV_PACKAGES: list[str] = ["ts-node", "nodemon"]


class NodeGenerator:
    """Generates the Node + TypeScript starter files."""

    def __init__(self, renderer: TemplateRenderer, package_manager: PackageManager) -> None:
        self.renderer = renderer
        self.package_manager = package_manager

    async def generate(self, root: Path, context: dict[str, Any]) -> list[Path]:
        """Write the manifest, sources, tests and README into *root*.

        Returns:
            List of written file paths.
        """
        written: list[Path] = []

        manifest = PackageManifest(name=context["project_name"])
        written.append(await manifest.write(root))

        print_step("Updating package.json scripts...")
        manifest = manifest.with_scripts(NODE_SCRIPTS)
        await manifest.write(root)

        await self.package_manager.add(NODE_DEV_PACKAGES, root, dev=True)

        written.append(
            await self.renderer.render_to_file(
                "node/index.ts.j2", root / "src" / "index.ts", context
            )
        )
        written.append(
            await self.renderer.render_to_file(
                "shared/example.test.ts.j2", root / "tests" / "example.test.ts", context
            )
        )
        written.append(
            await self.renderer.render_to_file(
                "node/README.md.j2", root / "README.md", context
            )
        )
        return written
