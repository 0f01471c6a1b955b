"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from conftest import write_project
from typer.testing import CliRunner

from tokensmith.cli import app
from tokensmith.core.ir import ThemeName


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "tokensmith version" in result.output


# =============================================================================
# build
# =============================================================================


class TestBuildCommand:
    """Test the build command."""

    def test_build_success(self, cli_runner: CliRunner, token_project: Path):
        result = cli_runner.invoke(app, ["build", "--project", str(token_project)])
        assert result.exit_code == 0, result.output
        written = [p for p in (token_project / "build").rglob("*") if p.is_file()]
        assert len(written) == 13
        assert f"Wrote {len(written)} file(s)" in result.output
        assert (token_project / "build" / "web" / "tokens.css").exists()

    def test_build_single_theme(self, cli_runner: CliRunner, token_project: Path):
        out = token_project / "dist"
        result = cli_runner.invoke(
            app, ["build", "-p", str(token_project), "-t", "advance-dark", "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert (out / "android" / "colors-advance-dark.xml").exists()
        assert not (out / "android" / "colors.xml").exists()

    def test_build_missing_theme_exits_1(self, cli_runner: CliRunner, tmp_path: Path):
        project = write_project(tmp_path, themes=[ThemeName.CLASSIC_LIGHT])
        result = cli_runner.invoke(app, ["build", "-p", str(project)])
        assert result.exit_code == 1
        assert "Failed themes (3)" in result.output
        assert (project / "build" / "web" / "tokens.css").exists()

    def test_build_unwritable_output_exits_1(self, cli_runner: CliRunner, token_project: Path):
        (token_project / "build").mkdir()
        (token_project / "build" / "web").write_text("", encoding="utf-8")
        result = cli_runner.invoke(app, ["build", "-p", str(token_project)])
        assert result.exit_code == 1
        assert "Failed writes (2)" in result.output
        assert (token_project / "build" / "android" / "colors.xml").exists()

    def test_build_invalid_manifest_exits_2(self, cli_runner: CliRunner, token_project: Path):
        (token_project / "tokensmith.toml").write_text("[output\n", encoding="utf-8")
        result = cli_runner.invoke(app, ["build", "-p", str(token_project)])
        assert result.exit_code == 2
        assert "Manifest error" in result.output

    def test_build_unknown_theme(self, cli_runner: CliRunner, token_project: Path):
        result = cli_runner.invoke(app, ["build", "-p", str(token_project), "-t", "neon"])
        assert result.exit_code == 2


# =============================================================================
# resolve / inspect / migrate
# =============================================================================


class TestResolveCommand:
    """Test the resolve command."""

    def test_resolve_chain(self, cli_runner: CliRunner, token_project: Path):
        result = cli_runner.invoke(
            app, ["resolve", "color.component.button.background", "-p", str(token_project)]
        )
        assert result.exit_code == 0, result.output
        assert "#2196F3" in result.output
        assert "var(--color-foundation-accent)" in result.output

    def test_resolve_dark_theme(self, cli_runner: CliRunner, token_project: Path):
        result = cli_runner.invoke(
            app,
            [
                "resolve",
                "color.foundation.background",
                "-t",
                "classic-dark",
                "-p",
                str(token_project),
            ],
        )
        assert result.exit_code == 0, result.output
        assert "#212121" in result.output

    def test_resolve_unknown_token(self, cli_runner: CliRunner, token_project: Path):
        result = cli_runner.invoke(app, ["resolve", "color.nope", "-p", str(token_project)])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestInspectCommand:
    """Test the inspect command."""

    def test_inspect_category(self, cli_runner: CliRunner, token_project: Path):
        result = cli_runner.invoke(app, ["inspect", "-c", "fontSize", "-p", str(token_project)])
        assert result.exit_code == 0, result.output
        assert "Statistics" in result.output
        assert "16px" in result.output

    def test_inspect_missing_theme(self, cli_runner: CliRunner, tmp_path: Path):
        project = write_project(tmp_path, themes=[ThemeName.CLASSIC_LIGHT])
        result = cli_runner.invoke(app, ["inspect", "-t", "classic-dark", "-p", str(project)])
        assert result.exit_code == 1


class TestMigrateCommand:
    """Test the migrate command."""

    def test_migrate_to_file(self, cli_runner: CliRunner, token_project: Path):
        out = token_project / "flat.json"
        result = cli_runner.invoke(
            app, ["migrate", "-t", "classic-dark", "-o", str(out), "-p", str(token_project)]
        )
        assert result.exit_code == 0, result.output
        flat = json.loads(out.read_text(encoding="utf-8"))
        assert flat["blue-500"]["value"] == "#2196F3"
        assert flat["foundation-background"]["sets"] == {
            "classic-dark": {"value": "{color.rawColors.gray.900}"}
        }

    def test_migrate_to_stdout(self, cli_runner: CliRunner, token_project: Path):
        result = cli_runner.invoke(app, ["migrate", "-p", str(token_project)])
        assert result.exit_code == 0, result.output
        assert "size-spacing-md" in json.loads(result.stdout)
