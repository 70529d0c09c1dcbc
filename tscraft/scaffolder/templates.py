"""Jinja2 rendering of the text boilerplate written into new projects.

Templates live beside this module in ``templates/<template-kind>/`` and
are rendered with the project context built by the dispatcher
(``project_name``, ``package_manager``, ``pm_run``, ``pm_exec``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from tscraft.utils import write_text

TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Loads ``.j2`` files from a template directory and renders them.

    Output is plain text (TypeScript, Markdown), so autoescaping is off.
    An unknown variable raises :class:`jinja2.UndefinedError`.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render the template at *template_path* (relative, e.g. ``node/index.ts.j2``)."""
        return self.env.get_template(template_path).render(context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render *template_path* into *output_path*, creating parent directories."""
        return await write_text(output_path, self.render(template_path, context))
