"""Tests for swatchkit.toml loading and settings resolution."""

from pathlib import Path

import pytest

from swatchkit.core.errors import ConfigError
from swatchkit.core.manifest import ProjectConfig, TokensConfig, load_config
from swatchkit.core.settings import resolve_settings


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path) -> None:
        config = load_config(project_root=tmp_path)

        assert config == ProjectConfig()
        assert config.out_dir == "public/swatchkit"

    def test_reads_values(self, tmp_path: Path) -> None:
        path = tmp_path / "swatchkit.toml"
        path.write_text(
            """
[swatchkit]
input = "patterns"
out_dir = "dist/patterns"
exclude = ["draft-*"]
copy_css = false

[tokens]
input = "design/tokens"
""",
            encoding="utf-8",
        )

        config = load_config(path)

        assert config.input == "patterns"
        assert config.out_dir == "dist/patterns"
        assert config.exclude == ["draft-*"]
        assert config.copy_css is False
        assert config.token_pages is True
        assert config.tokens.input == "design/tokens"
        assert config.source == path

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "swatchkit.toml"
        path.write_text("[swatchkit\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="invalid TOML"):
            load_config(path)

    def test_wrong_type(self, tmp_path: Path) -> None:
        path = tmp_path / "swatchkit.toml"
        path.write_text('[swatchkit]\nexclude = "draft-*"\n', encoding="utf-8")

        with pytest.raises(ConfigError, match="'exclude'"):
            load_config(path)


class TestResolveSettings:
    def test_paths_are_absolute(self, tmp_path: Path) -> None:
        settings = resolve_settings(ProjectConfig(), tmp_path)

        assert settings.swatchkit_dir == tmp_path.resolve() / "swatchkit"
        assert settings.tokens_dir == settings.swatchkit_dir / "tokens"
        assert settings.out_dir == tmp_path.resolve() / "public" / "swatchkit"
        assert settings.token_pages_dir == settings.swatchkit_dir / "tokens" / "generated"

    def test_overrides(self, tmp_path: Path) -> None:
        config = ProjectConfig(tokens=TokensConfig(input="design"))

        settings = resolve_settings(config, tmp_path, input="patterns", out_dir="dist/site")

        assert settings.swatchkit_dir.name == "patterns"
        assert settings.out_dir == tmp_path.resolve() / "dist" / "site"
        assert settings.tokens_dir == tmp_path.resolve() / "design"

    def test_settings_are_immutable(self, tmp_path: Path) -> None:
        settings = resolve_settings(ProjectConfig(), tmp_path)

        with pytest.raises(AttributeError):
            settings.out_dir = tmp_path  # type: ignore[misc]
