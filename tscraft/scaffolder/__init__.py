"""tscraft scaffolder -- materialises TypeScript project workspaces.

Quick usage::

    from tscraft.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    await generator.dispatch("node", "my-project", root="/tmp/my-project")
"""

from tscraft.scaffolder.generator import ProjectGenerator
from tscraft.scaffolder.manifest import PackageManifest
from tscraft.scaffolder.package_manager import PackageManager
from tscraft.scaffolder.templates import TemplateRenderer

__all__ = [
    "PackageManager",
    "PackageManifest",
    "ProjectGenerator",
    "TemplateRenderer",
]
