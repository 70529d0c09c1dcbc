"""Shared configuration steps reused across templates.

Generates:
- ``.eslintrc.json`` and ``.prettierrc`` (after installing the lint, format
  and test tooling)
- ``tsconfig.json``
- ``.vscode/settings.json``
- ``.gitignore``

Each step overwrites its file if it already exists.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from tscraft.utils import print_step, save_json, write_text

from .package_manager import PackageManager


TOOLING_PACKAGES: list[str] = [
    "typescript",
    "@types/node",
    "eslint",
    "@typescript-eslint/parser",
    "@typescript-eslint/eslint-plugin",
    "prettier",
    "eslint-config-prettier",
    "eslint-plugin-prettier",
    "vitest",
    "@vitest/coverage-v8",
]

ESLINT_CONFIG: dict[str, Any] = {
    "parser": "@typescript-eslint/parser",
    "parserOptions": {"ecmaVersion": 2020, "sourceType": "module"},
    "plugins": ["@typescript-eslint"],
    "extends": [
        "eslint:recommended",
        "plugin:@typescript-eslint/recommended",
        "plugin:prettier/recommended",
    ],
    "rules": {
        "@typescript-eslint/no-unused-vars": ["warn"],
        "no-console": "off",
    },
}

PRETTIER_CONFIG: dict[str, Any] = {
    "semi": True,
    "singleQuote": True,
    "trailingComma": "all",
    "printWidth": 80,
}

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "module": "ESNext",
        "rootDir": "src",
        "outDir": "dist",
        "strict": True,
        "esModuleInterop": True,
        "skipLibCheck": True,
        "forceConsistentCasingInFileNames": True,
        "declaration": True,
        "sourceMap": True,
    },
    "include": ["src"],
}

VSCODE_SETTINGS: dict[str, Any] = {
    "editor.formatOnSave": True,
    "editor.defaultFormatter": "esbenp.prettier-vscode",
    "eslint.validate": ["typescript", "typescriptreact"],
}

GITIGNORE_ENTRIES: list[str] = ["node_modules", "dist", ".env"]


class SharedConfigurators:
    """Writes the lint, format, compiler, editor and ignore configuration."""

    def __init__(self, package_manager: PackageManager) -> None:
        self.package_manager = package_manager

    async def configure_all(self, root: Path) -> list[Path]:
        """Run every configurator in order: tooling, tsconfig, VSCode, .gitignore."""
        written: list[Path] = []
        written.extend(await self.install_tooling(root))
        written.append(await self.write_tsconfig(root))
        written.append(await self.write_vscode_settings(root))
        written.append(await self.write_gitignore(root))
        return written

    async def install_tooling(self, root: Path) -> list[Path]:
        """Install the lint/format/test tooling and write its configuration."""
        print_step("Installing dev dependencies...")
        await self.package_manager.add(TOOLING_PACKAGES, root, dev=True)

        print_step("Setting up ESLint + Prettier...")
        eslint = await save_json(ESLINT_CONFIG, root / ".eslintrc.json")
        prettier = await save_json(PRETTIER_CONFIG, root / ".prettierrc")
        return [eslint, prettier]

    async def write_tsconfig(self, root: Path) -> Path:
        print_step("Initializing TypeScript...")
        return await save_json(TSCONFIG, root / "tsconfig.json")

    async def write_vscode_settings(self, root: Path) -> Path:
        print_step("Configuring VSCode...")
        return await save_json(VSCODE_SETTINGS, root / ".vscode" / "settings.json")

    async def write_gitignore(self, root: Path) -> Path:
        return await write_text(root / ".gitignore", "\n".join(GITIGNORE_ENTRIES) + "\n")
