"""Tests for the command line entry point (tscraft.cli).

Covers:
- argument parsing (optional name, package manager, version)
- exit codes for success, cancellation, existing target, failed command
- name prompt skipped when a name argument is given
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from tscraft import __version__
from tscraft.cli import build_parser, main, scaffold
from tscraft.config import ProjectRequest, ScaffoldConfig, Template
from tscraft.errors import CommandFailedError, TargetExistsError
from tscraft.scaffolder.package_manager import PackageManager

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("TSCRAFT_PACKAGE_MANAGER", "TSCRAFT_VITE_TEMPLATE", "TSCRAFT_DEFAULT_NAME"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_run():
    """Replace PackageManager.run for every instance created by the CLI."""
    with patch.object(PackageManager, "run", new=AsyncMock(return_value=None)) as run:
        yield run


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


class TestParser:
    def test_name_optional(self):
        args = build_parser().parse_args([])
        assert args.name is None
        assert args.package_manager is None

    def test_name_and_manager(self):
        args = build_parser().parse_args(["my-app", "-p", "npm"])
        assert args.name == "my-app"
        assert args.package_manager == "npm"

    def test_invalid_manager_rejected(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--package-manager", "bun"])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------


class TestMain:
    def test_success_with_name_argument(self, in_tmp_dir: Path, fake_run, capsys):
        with patch("tscraft.prompts.Prompt.ask", side_effect=["1"]) as ask:
            main(["my-app"])

        assert ask.call_count == 1
        assert ask.call_args.args[0] == "Template"
        workspace = in_tmp_dir / "my-app"
        assert json.loads((workspace / "package.json").read_text(encoding="utf-8"))["name"] == "my-app"
        assert Path.cwd() == workspace.resolve()
        out = capsys.readouterr().out
        assert "Project setup complete!" in out
        assert "cd my-app" in out

    def test_name_prompt_without_argument(self, in_tmp_dir: Path, fake_run):
        with patch("tscraft.prompts.Prompt.ask", side_effect=["typed-app", "2"]) as ask:
            main([])

        assert [c.args[0] for c in ask.call_args_list] == ["Project name", "Template"]
        assert (in_tmp_dir / "typed-app" / ".gitignore").is_file()
        fake_run.assert_awaited_once()
        assert fake_run.await_args.args[0][:3] == ["pnpm", "create", "vite@latest"]

    def test_package_manager_flag(self, in_tmp_dir: Path, fake_run):
        with patch("tscraft.prompts.Prompt.ask", side_effect=["1"]):
            main(["my-app", "--package-manager", "npm"])
        assert fake_run.await_args_list[0].args[0][:3] == ["npm", "install", "--save-dev"]

    def test_package_manager_from_env(self, in_tmp_dir: Path, fake_run, monkeypatch):
        monkeypatch.setenv("TSCRAFT_PACKAGE_MANAGER", "yarn")
        with patch("tscraft.prompts.Prompt.ask", side_effect=["1"]):
            main(["my-app"])
        assert fake_run.await_args_list[0].args[0][:2] == ["yarn", "add"]

    def test_cancel_exits_nonzero(self, in_tmp_dir: Path, fake_run, capsys):
        with patch("tscraft.prompts.Prompt.ask", side_effect=KeyboardInterrupt()):
            with pytest.raises(SystemExit) as exc_info:
                main([])

        assert exc_info.value.code == 1
        assert "Cancelled." in capsys.readouterr().out
        assert list(in_tmp_dir.iterdir()) == []
        fake_run.assert_not_awaited()

    def test_existing_target_exits_nonzero(self, in_tmp_dir: Path, fake_run, capsys):
        existing = in_tmp_dir / "my-app"
        existing.mkdir()
        (existing / "package.json").write_text('{"name": "first-run"}', encoding="utf-8")

        with patch("tscraft.prompts.Prompt.ask", side_effect=["1"]):
            with pytest.raises(SystemExit) as exc_info:
                main(["my-app"])

        assert exc_info.value.code == 1
        assert "already exists" in capsys.readouterr().out
        assert [p.name for p in existing.iterdir()] == ["package.json"]
        assert (existing / "package.json").read_text(encoding="utf-8") == '{"name": "first-run"}'
        fake_run.assert_not_awaited()

    def test_failed_command_exits_nonzero(self, in_tmp_dir: Path, capsys):
        failing = AsyncMock(side_effect=CommandFailedError(["pnpm", "add", "-D", "ts-node"], 1))
        with patch.object(PackageManager, "run", new=failing):
            with patch("tscraft.prompts.Prompt.ask", side_effect=["1"]):
                with pytest.raises(SystemExit) as exc_info:
                    main(["my-app"])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Command failed with exit code 1" in out
        assert "Partially scaffolded project left in" in out
        assert (in_tmp_dir / "my-app" / "package.json").is_file()

    def test_failed_write_exits_nonzero(self, in_tmp_dir: Path, fake_run, capsys):
        denied = PermissionError(13, "Permission denied")
        with patch("tscraft.utils._write_file", side_effect=denied):
            with patch("tscraft.prompts.Prompt.ask", side_effect=["1"]):
                with pytest.raises(SystemExit) as exc_info:
                    main(["my-app"])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Could not write" in out
        assert "Partially scaffolded project left in" in out
        fake_run.assert_not_awaited()
        assert list((in_tmp_dir / "my-app").iterdir()) == []

    def test_unstartable_package_manager_exits_nonzero(
        self, in_tmp_dir: Path, tmp_path_factory, monkeypatch, capsys
    ):
        bin_dir = tmp_path_factory.mktemp("bin")
        pnpm = bin_dir / "pnpm"
        pnpm.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        pnpm.chmod(0o644)
        monkeypatch.setenv("PATH", str(bin_dir))

        with patch("tscraft.prompts.Prompt.ask", side_effect=["1"]):
            with pytest.raises(SystemExit) as exc_info:
                main(["my-app"])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Command failed with exit code -1" in out
        assert "Partially scaffolded project left in" in out

    def test_invalid_env_config_exits_nonzero(self, in_tmp_dir: Path, monkeypatch, capsys):
        monkeypatch.setenv("TSCRAFT_PACKAGE_MANAGER", "bun")
        with patch("tscraft.prompts.Prompt.ask") as ask:
            with pytest.raises(SystemExit) as exc_info:
                main(["my-app"])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Invalid configuration" in out
        assert "package_manager" in out
        ask.assert_not_called()
        assert list(in_tmp_dir.iterdir()) == []

    def test_vite_next_steps_omit_test(self, in_tmp_dir: Path, fake_run, capsys):
        with patch("tscraft.prompts.Prompt.ask", side_effect=["2"]):
            main(["web-app"])

        out = capsys.readouterr().out
        assert "pnpm dev" in out
        assert "pnpm test" not in out

    def test_node_next_steps_include_test(self, in_tmp_dir: Path, fake_run, capsys):
        with patch("tscraft.prompts.Prompt.ask", side_effect=["1"]):
            main(["my-app"])

        assert "pnpm test" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# scaffold()
# ---------------------------------------------------------------------------


class TestScaffold:
    async def test_returns_workspace(self, in_tmp_dir: Path, package_manager):
        request = ProjectRequest(name="demo", template=Template.NPX_PROMPT)
        workspace = await scaffold(request, ScaffoldConfig(), package_manager=package_manager)
        assert workspace == (in_tmp_dir / "demo").resolve()
        assert "bin" in json.loads((workspace / "package.json").read_text(encoding="utf-8"))

    async def test_existing_target_raises(self, in_tmp_dir: Path, package_manager):
        (in_tmp_dir / "demo").mkdir()
        request = ProjectRequest(name="demo", template=Template.NODE)
        with pytest.raises(TargetExistsError):
            await scaffold(request, ScaffoldConfig(), package_manager=package_manager)
        package_manager.run.assert_not_awaited()
