"""tscraft configuration.

Typed settings and request models for the scaffolder. All models use
Pydantic v2 so they are validated at construction time and can be built
from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class Template(str, Enum):
    """The closed set of project archetypes tscraft can scaffold."""

    NODE = "node"
    VITE_REACT = "vite-react"
    NPX_PROMPT = "npx-prompt"

    @property
    def label(self) -> str:
        """Human readable title shown in the template picker."""
        return TEMPLATE_LABELS[self]

    @classmethod
    def from_identifier(cls, identifier: str | Template) -> Template:
        """Resolve ``identifier`` to a template.

        Unknown identifiers fall back to :attr:`NODE` instead of failing.
        """
        if isinstance(identifier, cls):
            return identifier
        try:
            return cls(str(identifier).strip())
        except ValueError:
            return cls.NODE


TEMPLATE_LABELS: dict[Template, str] = {
    Template.NODE: "Node + TypeScript",
    Template.VITE_REACT: "React + Vite + TypeScript",
    Template.NPX_PROMPT: "TypeScript NPX Prompt",
}


class ProjectRequest(BaseModel):
    """A validated ``(name, template)`` pair ready for dispatch."""

    name: str = Field(..., min_length=1, description="Project directory and package name")
    template: Template = Field(default=Template.NODE)

    @field_validator("template", mode="before")
    @classmethod
    def _fallback_template(cls, value: Any) -> Template:
        return Template.from_identifier(value)


class ScaffoldConfig(BaseModel):
    """Runtime settings for a scaffolding run.

    Instances are created once by the CLI entry point and then passed to the
    generators.
    """

    package_manager: Literal["pnpm", "npm", "yarn"] = Field(default="pnpm")
    vite_template: str = Field(default="react-ts", min_length=1)
    default_project_name: str = Field(default="my-ts-project", min_length=1)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            TSCRAFT_PACKAGE_MANAGER, TSCRAFT_VITE_TEMPLATE, TSCRAFT_DEFAULT_NAME.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("TSCRAFT_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["TSCRAFT_PACKAGE_MANAGER"]
        if os.environ.get("TSCRAFT_VITE_TEMPLATE"):
            kwargs["vite_template"] = os.environ["TSCRAFT_VITE_TEMPLATE"]
        if os.environ.get("TSCRAFT_DEFAULT_NAME"):
            kwargs["default_project_name"] = os.environ["TSCRAFT_DEFAULT_NAME"]
        return cls(**kwargs)
