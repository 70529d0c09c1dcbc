"""tscraft command line entry point.

Usage::

    tscraft                      # prompt for a name and a template
    tscraft my-app               # prompt for a template only
    tscraft my-app -p npm        # use npm instead of pnpm
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from tscraft import __version__
from tscraft.config import ProjectRequest, ScaffoldConfig, Template
from tscraft.errors import Cancelled, ScaffoldError
from tscraft.prompts import InputResolver
from tscraft.scaffolder import PackageManager, ProjectGenerator
from tscraft.utils import (
    console,
    print_banner,
    print_error,
    print_next_steps,
    print_success,
    print_warning,
)
from tscraft.workspace import ensure_workspace


async def scaffold(
    request: ProjectRequest,
    config: ScaffoldConfig,
    *,
    base_dir: str | Path | None = None,
    package_manager: PackageManager | None = None,
) -> Path:
    """Create the workspace for *request* and run its template pipeline.

    The current working directory is switched into the new workspace and
    left there.

    Returns:
        Path to the scaffolded workspace.
    """
    workspace = ensure_workspace(request.name, base_dir)

    pm = package_manager or PackageManager(config.package_manager)
    generator = ProjectGenerator(config, package_manager=pm)
    try:
        await generator.dispatch(request.template, request.name, root=workspace)
    except ScaffoldError:
        print_warning(f"Partially scaffolded project left in {workspace}")
        raise

    console.print()
    print_success("Project setup complete!")
    print_next_steps(
        pm.next_steps(request.name, with_tests=request.template is not Template.VITE_REACT)
    )
    return workspace


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tscraft",
        description="tscraft -- interactive TypeScript project scaffolder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  tscraft\n"
            "  tscraft my-app\n"
            "  tscraft my-app --package-manager npm\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (prompted for when omitted)",
    )
    parser.add_argument(
        "--package-manager", "-p",
        choices=["pnpm", "npm", "yarn"],
        default=None,
        help="Package manager used for installs (default: pnpm or $TSCRAFT_PACKAGE_MANAGER)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``tscraft`` and ``python -m tscraft``."""
    args = build_parser().parse_args(argv)

    try:
        config = ScaffoldConfig.from_env()
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        print_error(f"Invalid configuration: {details}")
        sys.exit(1)

    if args.package_manager:
        config = config.model_copy(update={"package_manager": args.package_manager})

    print_banner(
        "Welcome to tscraft, the TypeScript project generator!",
        f"Package manager: {config.package_manager}",
    )

    try:
        # Prompts run before the event loop so Ctrl-C reaches them directly.
        request = InputResolver(default_name=config.default_project_name).resolve(args.name)
        asyncio.run(scaffold(request, config))
    except Cancelled as exc:
        print_error(str(exc))
        sys.exit(1)
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
