"""TypeScript NPX prompt project generation.

Produces a package that can be published and run with ``npx``: the manifest
declares a ``bin`` entry pointing at the compiled ``dist/index.js``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .manifest import PackageManifest
from .package_manager import PackageManager
from .templates import TemplateRenderer


NPX_SCRIPTS: dict[str, str] = {
    "build": "tsc",
    "postbuild": "chmod +x dist/index.js",
    "dev": "tsc --watch",
    "start": "node dist/index.js",
    "lint": "eslint . --ext .ts,.tsx",
    "format": "prettier --write .",
}

NPX_DEV_PACKAGES: list[str] = ["tsx", "@types/prompts"]
NPX_RUNTIME_PACKAGES: list[str] = ["prompts"]


class NpxPromptGenerator:
    """Generates an executable TypeScript CLI package."""

    def __init__(self, renderer: TemplateRenderer, package_manager: PackageManager) -> None:
        self.renderer = renderer
        self.package_manager = package_manager

    def build_manifest(self, project_name: str) -> PackageManifest:
        return PackageManifest(
            name=project_name,
            bin={project_name: "./dist/index.js"},
            scripts=dict(NPX_SCRIPTS),
        )

    async def generate(self, root: Path, context: dict[str, Any]) -> list[Path]:
        written: list[Path] = []

        manifest = self.build_manifest(context["project_name"])
        written.append(await manifest.write(root))

        await self.package_manager.add(NPX_DEV_PACKAGES, root, dev=True)
        await self.package_manager.add(NPX_RUNTIME_PACKAGES, root)

        written.append(
            await self.renderer.render_to_file(
                "npx_prompt/index.ts.j2", root / "src" / "index.ts", context
            )
        )
        written.append(
            await self.renderer.render_to_file(
                "shared/example.test.ts.j2", root / "tests" / "example.test.ts", context
            )
        )
        written.append(
            await self.renderer.render_to_file(
                "npx_prompt/README.md.j2", root / "README.md", context
            )
        )
        return written
