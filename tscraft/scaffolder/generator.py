"""Main scaffolding orchestrator.

Maps a template to its fixed pipeline of steps and runs them in order inside
the workspace. Every step must finish before the next one starts; the first
failure aborts the run and leaves already written files in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from tscraft.config import ScaffoldConfig, Template

from .configurators import SharedConfigurators
from .node_gen import NodeGenerator
from .npx_gen import NpxPromptGenerator
from .package_manager import PackageManager
from .templates import TemplateRenderer
from .vite_gen import ViteReactGenerator


class ProjectGenerator:
    """Template dispatcher.

    Pipelines:
    - ``vite-react``: VSCode settings, ``.gitignore``, then ``create vite``
    - ``npx-prompt``: executable-package files, then all shared configurators
    - ``node`` (and any unrecognised identifier): Node + TypeScript files,
      then all shared configurators
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        package_manager: PackageManager | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.package_manager = package_manager or PackageManager(self.config.package_manager)
        self.renderer = TemplateRenderer()
        self.configurators = SharedConfigurators(self.package_manager)
        self.node_gen = NodeGenerator(self.renderer, self.package_manager)
        self.npx_gen = NpxPromptGenerator(self.renderer, self.package_manager)
        self.vite_gen = ViteReactGenerator(self.package_manager, self.config.vite_template)

    # -- Public API --------------------------------------------------------

    async def dispatch(
        self, template: Template | str, name: str, root: str | Path | None = None
    ) -> Path:
        """Run the pipeline for *template* in *root*.

        Args:
            template: A :class:`Template` or a raw identifier. Unknown
                identifiers run the ``node`` pipeline.
            name: The project name.
            root: The workspace directory. Defaults to the current directory.

        Returns:
            Path to the workspace.
        """
        workspace = Path(root) if root is not None else Path.cwd()
        context = self._build_context(name)
        resolved = Template.from_identifier(template)

        if resolved is Template.VITE_REACT:
            await self.configurators.write_vscode_settings(workspace)
            await self.configurators.write_gitignore(workspace)
            await self.vite_gen.generate(workspace)
        elif resolved is Template.NPX_PROMPT:
            await self.npx_gen.generate(workspace, context)
            await self.configurators.configure_all(workspace)
        else:
            await self.node_gen.generate(workspace, context)
            await self.configurators.configure_all(workspace)

        return workspace

    # -- Context building --------------------------------------------------

    def _build_context(self, name: str) -> dict[str, Any]:
        """Build the Jinja2 template context for *name*."""
        return {
            "project_name": name,
            "package_manager": self.package_manager.name,
            "pm_run": self.package_manager.run_prefix,
            "pm_exec": self.package_manager.exec_prefix,
        }
