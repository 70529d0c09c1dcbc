"""Interactive input resolution.

Turns an optional command-line project name plus the user's answers into a
validated :class:`~tscraft.config.ProjectRequest`. Aborting a prompt
(Ctrl-C or end of input) is a cancellation, not an error.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Prompt

from tscraft.config import ProjectRequest, Template
from tscraft.errors import Cancelled
from tscraft.utils import console as default_console

# Picker order; the first entry is the default.
TEMPLATE_CHOICES: list[Template] = [
    Template.NODE,
    Template.VITE_REACT,
    Template.NPX_PROMPT,
]


class InputResolver:
    """Resolve the project name and template for a scaffolding run."""

    def __init__(
        self,
        default_name: str = "my-ts-project",
        console: Console | None = None,
    ) -> None:
        self.default_name = default_name
        self.console = console or default_console

    def resolve(self, cli_name: str | None = None) -> ProjectRequest:
        """Return the project request, prompting only for what is missing.

        Raises:
            Cancelled: if the user aborts a prompt or leaves a value empty.
        """
        try:
            if cli_name:
                name = cli_name
            else:
                name = self.ask_name()
            template = self.ask_template()
        except (KeyboardInterrupt, EOFError) as exc:
            raise Cancelled() from exc

        if not name or template is None:
            raise Cancelled()
        return ProjectRequest(name=name, template=template)

    def ask_name(self) -> str:
        """Prompt for a free-text project name."""
        answer = Prompt.ask(
            "Project name",
            default=self.default_name,
            console=self.console,
        )
        return (answer or "").strip()

    def ask_template(self) -> Template | None:
        """Prompt for a template from the numbered list."""
        self.console.print("[bold]Choose a template:[/bold]")
        for index, template in enumerate(TEMPLATE_CHOICES, start=1):
            self.console.print(f"  [cyan]{index}[/cyan]) {template.label}")

        choices = [str(i) for i in range(1, len(TEMPLATE_CHOICES) + 1)]
        answer = Prompt.ask(
            "Template",
            choices=choices,
            default=choices[0],
            console=self.console,
        )
        if not answer:
            return None
        return TEMPLATE_CHOICES[int(answer) - 1]
