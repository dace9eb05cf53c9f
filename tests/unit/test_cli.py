"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from swatchkit import __version__
from swatchkit.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


class TestVersion:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"SwatchKit {__version__}" in result.output


class TestBuildCommand:
    def test_build(self, cli_runner: CliRunner, project_root: Path, monkeypatch) -> None:
        monkeypatch.chdir(project_root)

        result = cli_runner.invoke(app, ["build"])

        assert result.exit_code == 0, result.output
        assert (project_root / "public" / "swatchkit" / "index.html").exists()

    def test_build_with_overrides(self, cli_runner: CliRunner, project_root: Path, monkeypatch) -> None:
        monkeypatch.chdir(project_root)

        result = cli_runner.invoke(app, ["build", "-i", "swatchkit", "-o", "dist/site"])

        assert result.exit_code == 0, result.output
        assert (project_root / "dist" / "site" / "index.html").exists()

    def test_build_reads_config_file(self, cli_runner: CliRunner, project_root: Path) -> None:
        config = project_root / "swatchkit.toml"
        config.write_text('[swatchkit]\nout_dir = "build/library"\n', encoding="utf-8")

        result = cli_runner.invoke(app, ["build", "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert (project_root / "build" / "library" / "index.html").exists()

    def test_unsafe_out_dir_exits_with_error(
        self, cli_runner: CliRunner, project_root: Path, monkeypatch
    ) -> None:
        monkeypatch.chdir(project_root)

        result = cli_runner.invoke(app, ["build", "--out-dir", "dist"])

        assert result.exit_code == 1
        assert not (project_root / "dist").exists()

    def test_missing_source_exits_with_error(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        result = cli_runner.invoke(app, ["build"])

        assert result.exit_code == 1


    def test_undecodable_swatch_exits_cleanly(
        self, cli_runner: CliRunner, project_root: Path, monkeypatch
    ) -> None:
        monkeypatch.chdir(project_root)
        (project_root / "swatchkit" / "broken.html").write_bytes(b"<p>\xff</p>")

        result = cli_runner.invoke(app, ["build"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)


class TestInitCommand:
    def test_init_then_build(self, cli_runner: CliRunner, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)

        result = cli_runner.invoke(app, ["init"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "swatchkit" / "_layout.html").exists()
        assert (tmp_path / "css" / "tokens.css").exists()

        result = cli_runner.invoke(app, ["build"])
        assert result.exit_code == 0, result.output

    def test_init_force(self, cli_runner: CliRunner, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        cli_runner.invoke(app, ["init"])

        result = cli_runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "swatchkit" / "_layout.html.bak").exists()
