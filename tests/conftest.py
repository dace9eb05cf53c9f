"""Shared pytest fixtures for SwatchKit tests."""

import json
from pathlib import Path

import pytest

from swatchkit.core.manifest import ProjectConfig
from swatchkit.core.settings import BuildSettings, resolve_settings


def _write_json(path: Path, data: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def write_json():
    """Write a JSON document, creating parent directories."""
    return _write_json


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A minimal project: one section, one root swatch and a colors file."""
    patterns = tmp_path / "swatchkit"
    (patterns / "components").mkdir(parents=True)
    (patterns / "components" / "button.html").write_text(
        '<button class="btn">Go</button>', encoding="utf-8"
    )
    (patterns / "hero.html").write_text("<div>Hi</div>", encoding="utf-8")

    _write_json(
        patterns / "tokens" / "colors.json",
        {"title": "Colors", "items": [{"name": "Primary", "value": "#3b82f6"}]},
    )
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "styles.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> BuildSettings:
    """Default settings resolved against ``project_root``."""
    return resolve_settings(ProjectConfig(), project_root)
