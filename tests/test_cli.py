"""Tests for the noisekit CLI command and the end-to-end wizard flow."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console
from typer.testing import CliRunner

from fakes import CANCEL, FakeExecutor, ScriptedPrompter
from noisekit import __version__
from noisekit.cli.main import app
from noisekit.errors import CommandFailedError, WizardCancelled
from noisekit.execution.runner import TaskRunner
from noisekit.models import Adapter, Package
from noisekit.wizard.flow import run_wizard

runner = CliRunner()


def _console() -> Console:
    return Console(record=True, width=120, force_terminal=False)


class TestRunWizard:
    """End-to-end flow with scripted answers and a fake executor."""

    def test_my_app_end_to_end(self, tmp_path: Path):
        prompter = ScriptedPrompter(
            ["my-app", None, False, False, [Package.eslint, Package.vitest], True]
        )
        executor = FakeExecutor()
        console = _console()

        ctx = run_wizard(
            console,
            prompter,
            runner=TaskRunner(console, executor=executor),
            working_dir=tmp_path,
        )

        commands = [" ".join(argv) for argv, _, _ in executor.calls]
        assert len(commands) == 5
        assert commands[0].startswith("npx sv@0.6.18 create my-app")
        assert "add eslint" in commands[1]
        assert "add vitest" in commands[2]
        assert "--tailwindcss" in commands[3]
        assert commands[4] == "npm install"
        assert ctx.project_path == tmp_path / "my-app"
        readme = (tmp_path / "my-app" / "README.md").read_text(encoding="utf-8")
        assert "# my-app" in readme
        assert "Project created successfully" in console.export_text()

    def test_static_adapter_rewrites_layout(self, tmp_path: Path):
        prompter = ScriptedPrompter(["site", Adapter.static, False, False, [], True])
        console = _console()
        run_wizard(
            console,
            prompter,
            runner=TaskRunner(console, executor=FakeExecutor()),
            working_dir=tmp_path,
        )
        layout = tmp_path / "site" / "src" / "routes" / "+layout.ts"
        assert "prerender = true" in layout.read_text(encoding="utf-8")

    def test_decline_confirmation_runs_nothing(self, tmp_path: Path):
        prompter = ScriptedPrompter(["my-app", None, False, False, [], False])
        executor = FakeExecutor()
        console = _console()
        with pytest.raises(WizardCancelled):
            run_wizard(console, prompter, runner=TaskRunner(console, executor=executor), working_dir=tmp_path)
        assert executor.calls == []
        assert list(tmp_path.iterdir()) == []

    def test_failure_stops_remaining_tasks(self, tmp_path: Path):
        prompter = ScriptedPrompter(
            ["my-app", None, False, False, [Package.eslint, Package.vitest], True]
        )
        executor = FakeExecutor(fail_on={"add eslint": 1})
        console = _console()
        with pytest.raises(CommandFailedError) as exc_info:
            run_wizard(console, prompter, runner=TaskRunner(console, executor=executor), working_dir=tmp_path)
        assert "eslint" in exc_info.value.command
        assert len(executor.calls) == 2
        assert not (tmp_path / "my-app" / "README.md").exists()


class TestCLI:
    """Exit codes of the noisekit command."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_short_v_is_version_only(self):
        result = runner.invoke(app, ["-v"])
        assert result.exit_code == 0
        assert __version__ in result.output
        result = runner.invoke(app, ["-V"])
        assert result.exit_code != 0

    def test_verbose_long_flag(self):
        with patch("noisekit.cli.main.run_wizard") as mock_wizard:
            result = runner.invoke(app, ["--verbose"])
        assert result.exit_code == 0
        mock_wizard.assert_called_once()

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "SvelteKit" in result.output

    def test_success_exits_zero(self):
        with patch("noisekit.cli.main.run_wizard") as mock_wizard:
            result = runner.invoke(app, [])
        assert result.exit_code == 0
        mock_wizard.assert_called_once()

    def test_cancel_exits_zero(self):
        with patch("noisekit.cli.main.run_wizard", side_effect=WizardCancelled()):
            result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Operation cancelled." in result.output

    def test_cancel_at_first_prompt(self, tmp_path: Path):
        def _wizard(console, prompter, **kwargs):
            return run_wizard(console, ScriptedPrompter([CANCEL]), working_dir=tmp_path)

        with patch("noisekit.cli.main.run_wizard", side_effect=_wizard):
            result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert list(tmp_path.iterdir()) == []

    def test_command_failure_exits_one(self):
        error = CommandFailedError("npx sv@0.6.18 create x", 2, "npm ERR! boom")
        with patch("noisekit.cli.main.run_wizard", side_effect=error):
            result = runner.invoke(app, [])
        assert result.exit_code == 1

    def test_unexpected_error_exits_one(self):
        with patch("noisekit.cli.main.run_wizard", side_effect=PermissionError("README.md")):
            result = runner.invoke(app, [])
        assert result.exit_code == 1
