"""
Resolved build settings.

A ``BuildSettings`` is built once per invocation from the project config
and CLI overrides, and passed explicitly to every build stage.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .manifest import ProjectConfig

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
BLUEPRINTS_DIR = PACKAGE_DIR / "blueprints"


@dataclass(frozen=True)
class BuildSettings:
    """Absolute paths and flags for a single build."""

    project_root: Path
    swatchkit_dir: Path
    out_dir: Path
    css_dir: Path
    tokens_dir: Path
    exclude: tuple[str, ...] = ()
    copy_css: bool = True
    token_pages: bool = True

    # Output locations

    @property
    def dist_css_dir(self) -> Path:
        return self.out_dir / "css"

    @property
    def dist_js_dir(self) -> Path:
        return self.out_dir / "js"

    @property
    def output_file(self) -> Path:
        return self.out_dir / "index.html"

    @property
    def output_js_file(self) -> Path:
        return self.dist_js_dir / "swatches.js"

    @property
    def preview_dir(self) -> Path:
        return self.out_dir / "preview"

    # Generated CSS in the project's css directory

    @property
    def tokens_css_file(self) -> Path:
        return self.css_dir / "tokens.css"

    @property
    def utilities_css_file(self) -> Path:
        return self.css_dir / "utilities.css"

    @property
    def styles_css_file(self) -> Path:
        return self.css_dir / "styles.css"

    # Layouts

    @property
    def internal_layout(self) -> Path:
        return TEMPLATES_DIR / "layout.html"

    @property
    def internal_preview_layout(self) -> Path:
        return TEMPLATES_DIR / "preview.html"

    @property
    def project_layout(self) -> Path:
        return self.swatchkit_dir / "_layout.html"

    @property
    def project_preview_layout(self) -> Path:
        return self.swatchkit_dir / "_preview.html"

    @property
    def token_pages_dir(self) -> Path:
        """Where generated token documentation swatches are written."""
        return self.swatchkit_dir / "tokens" / "generated"

    @property
    def generated_css_files(self) -> tuple[Path, ...]:
        return (self.tokens_css_file, self.utilities_css_file)


def resolve_settings(
    config: ProjectConfig,
    project_root: Path | None = None,
    *,
    input: str | None = None,
    out_dir: str | None = None,
) -> BuildSettings:
    """Resolve config values (and CLI overrides) against the project root."""
    root = (project_root or Path.cwd()).resolve()

    swatchkit_dir = (root / (input or config.input)).resolve()
    tokens_dir = (
        (root / config.tokens.input).resolve() if config.tokens.input else swatchkit_dir / "tokens"
    )

    return BuildSettings(
        project_root=root,
        swatchkit_dir=swatchkit_dir,
        out_dir=(root / (out_dir or config.out_dir)).resolve(),
        css_dir=(root / config.css).resolve(),
        tokens_dir=tokens_dir,
        exclude=tuple(config.exclude),
        copy_css=config.copy_css,
        token_pages=config.token_pages,
    )
