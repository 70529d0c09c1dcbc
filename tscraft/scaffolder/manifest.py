"""The ``package.json`` manifest model.

The manifest is carried in memory from its first write to any later script
merge, then rewritten. It is never re-read from disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from tscraft.utils import dump_json, write_text

MANIFEST_FILENAME = "package.json"


class PackageManifest(BaseModel):
    """Pydantic model describing the generated ``package.json``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    version: str = Field(default="1.0.0")
    module_type: str = Field(default="module", alias="type")
    bin: dict[str, str] | None = Field(default=None)
    scripts: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] | None = Field(default=None)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    def with_scripts(self, scripts: dict[str, str]) -> PackageManifest:
        """Return a copy whose scripts are merged with *scripts* (new keys win)."""
        return self.model_copy(update={"scripts": {**self.scripts, **scripts}})

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest as npm expects it, keyed by npm field names."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return dump_json(self.to_dict())

    async def write(self, root: str | Path) -> Path:
        """Write the manifest to ``<root>/package.json``."""
        return await write_text(Path(root) / MANIFEST_FILENAME, self.to_json())
