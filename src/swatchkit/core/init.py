"""
Project scaffolding for ``swatchkit init``.

Creates the pattern, tokens and CSS directories and fills them with the
packaged blueprints. Existing files are never overwritten, except the
layout when ``force`` is given (the previous one is kept as a backup).
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path

from swatchkit.tokens.compiler import TOKEN_FILENAMES, compile_tokens

from .settings import BLUEPRINTS_DIR, BuildSettings

_CSS_BLUEPRINTS = ("styles.css", "swatchkit-ui.css")
_TOKENS_SCRIPT = "script.js"


def _copy_if_missing(source: Path, destination: Path, log: Callable[[str], None]) -> bool:
    if destination.exists():
        return False
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)
    log(f"Created {destination}")
    return True


def backup_path(path: Path) -> Path:
    """First free ``<name>.bak``, ``<name>.bak.1``, ... next to ``path``."""
    candidate = path.with_name(f"{path.name}.bak")
    index = 1
    while candidate.exists():
        candidate = path.with_name(f"{path.name}.bak.{index}")
        index += 1
    return candidate


def init_project(
    settings: BuildSettings,
    force: bool = False,
    log: Callable[[str], None] | None = None,
) -> list[Path]:
    """Scaffold a project. Returns the files created or replaced."""
    if log is None:
        log = lambda msg: None  # noqa: E731

    created: list[Path] = []

    for directory in (settings.swatchkit_dir, settings.tokens_dir, settings.css_dir):
        if not directory.exists():
            directory.mkdir(parents=True)
            log(f"Created directory {directory}")

    for filename in TOKEN_FILENAMES:
        destination = settings.tokens_dir / filename
        if _copy_if_missing(BLUEPRINTS_DIR / filename, destination, log):
            created.append(destination)

    tokens_section = settings.swatchkit_dir / "tokens"
    script = tokens_section / _TOKENS_SCRIPT
    if _copy_if_missing(BLUEPRINTS_DIR / _TOKENS_SCRIPT, script, log):
        created.append(script)

    for filename in _CSS_BLUEPRINTS:
        destination = settings.css_dir / filename
        if _copy_if_missing(BLUEPRINTS_DIR / filename, destination, log):
            created.append(destination)

    context = compile_tokens(settings.tokens_dir, settings.css_dir)
    if context.output_file is not None:
        log(f"Generated {context.output_file}")

    layout = settings.project_layout
    if layout.exists():
        if not force:
            log(f"Layout already exists at {layout} (use --force to overwrite)")
            return created
        backup = backup_path(layout)
        layout.rename(backup)
        log(f"Backed up existing layout to {backup}")

    shutil.copyfile(settings.internal_layout, layout)
    log(f"Created layout at {layout}")
    created.append(layout)
    return created
