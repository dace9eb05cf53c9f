"""
Build orchestration.

One build runs these stages in order and never branches:

    validate source -> validate and clean output -> compile tokens
    -> scan content -> assemble -> write

A missing pattern directory or an unsafe output directory stops the build
before anything is written. Everything else (bad token files, skipped
entries) is reported and the build carries on. Given the same inputs a
build writes byte-identical output.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from swatchkit.site.assembler import SiteOutput, assemble
from swatchkit.site.layout import load_layouts
from swatchkit.site.models import PatternLibrary
from swatchkit.site.scanner import mirror_assets, scan
from swatchkit.tokens.compiler import compile_tokens
from swatchkit.tokens.pages import generate_token_pages
from swatchkit.tokens.utilities import generate_utilities

from .errors import SourceNotFoundError, UnsafeOutputDirError
from .settings import BuildSettings

logger = logging.getLogger(__name__)

NO_SCRIPTS = "// No swatch scripts found\n"


class BuildStage(StrEnum):
    IDLE = "idle"
    VALIDATE_SOURCE = "validate-source"
    CLEAN_OUTPUT = "clean-output"
    COMPILE_TOKENS = "compile-tokens"
    SCAN_CONTENT = "scan-content"
    ASSEMBLE = "assemble"
    WRITE = "write"
    DONE = "done"


@dataclass(frozen=True)
class BuildResult:
    """Summary of a completed build."""

    output_file: Path
    sections: tuple[str, ...]
    swatch_count: int
    preview_files: tuple[Path, ...]
    tokens_css: Path | None
    warnings: tuple[str, ...] = ()


# =============================================================================
# Output directory safety
# =============================================================================


def _is_within(path: Path, parent: Path) -> bool:
    return path == parent or parent in path.parents


def validate_output_dir(settings: BuildSettings) -> None:
    """Refuse output directories that a clean could use to delete unrelated files.

    Raises:
        UnsafeOutputDirError: If the output directory is the project root or
            one of its parents, lies outside the project root, is fewer than
            two segments below it, or overlaps an input directory.
    """
    root = settings.project_root.resolve()
    out = settings.out_dir.resolve()

    if out == root or out in root.parents:
        raise UnsafeOutputDirError("output directory is the project root or one of its parents", out)

    try:
        relative = out.relative_to(root)
    except ValueError:
        raise UnsafeOutputDirError(
            f"output directory must be inside the project root ({root})", out
        ) from None

    if len(relative.parts) < 2:
        raise UnsafeOutputDirError(
            "output directory must be at least two levels below the project root "
            "(e.g. public/swatchkit)",
            out,
        )

    for label, input_dir in (
        ("pattern", settings.swatchkit_dir),
        ("tokens", settings.tokens_dir),
        ("CSS", settings.css_dir),
    ):
        input_dir = input_dir.resolve()
        if _is_within(input_dir, out):
            raise UnsafeOutputDirError(f"output directory contains the {label} directory", out)

    if settings.copy_css and _is_within(out, settings.css_dir.resolve()):
        raise UnsafeOutputDirError("output directory is inside the CSS directory", out)


def clean_output_dir(settings: BuildSettings) -> None:
    """Validate, delete and recreate the output directory."""
    validate_output_dir(settings)
    if settings.out_dir.exists():
        shutil.rmtree(settings.out_dir)
    settings.out_dir.mkdir(parents=True)


# =============================================================================
# Writing
# =============================================================================


def render_script_bundle(library: PatternLibrary) -> str:
    """Wrap every collected script in an IIFE and concatenate them."""
    if not library.scripts:
        return NO_SCRIPTS
    chunks = []
    for script in library.scripts:
        body = script.path.read_text(encoding="utf-8")
        chunks.append(f"/* --- {script.label} --- */\n(function() {{\n{body}\n}})();\n")
    return "\n".join(chunks)


def _copy_css(settings: BuildSettings) -> None:
    if settings.copy_css and settings.css_dir.is_dir():
        shutil.copytree(settings.css_dir, settings.dist_css_dir, dirs_exist_ok=True)
        return

    settings.dist_css_dir.mkdir(parents=True, exist_ok=True)
    for generated in settings.generated_css_files:
        if generated.is_file():
            shutil.copy2(generated, settings.dist_css_dir / generated.name)


def write_site(settings: BuildSettings, library: PatternLibrary, site: SiteOutput) -> list[Path]:
    """Write CSS, scripts, the index and every preview. Returns preview paths."""
    _copy_css(settings)

    settings.dist_js_dir.mkdir(parents=True, exist_ok=True)
    settings.output_js_file.write_text(render_script_bundle(library), encoding="utf-8")
    if library.scripts:
        logger.info("Bundled %d script(s) to %s", len(library.scripts), settings.output_js_file)

    mirror_assets(library, settings.preview_dir)

    preview_files: list[Path] = []
    for page in site.previews:
        path = settings.out_dir / page.path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(page.html, encoding="utf-8")
        preview_files.append(path)

    settings.output_file.write_text(site.index_html, encoding="utf-8")
    return preview_files


# =============================================================================
# Entry point
# =============================================================================


def _enter(stage: BuildStage) -> None:
    logger.debug("Build stage: %s", stage)


def build(settings: BuildSettings) -> BuildResult:
    """Run one full build.

    Raises:
        SourceNotFoundError: If the pattern directory does not exist.
        UnsafeOutputDirError: If the output directory fails validation.
        LayoutError: If a layout cannot be read.
    """
    logger.info("Starting build...")
    logger.info("  Source:   %s", settings.swatchkit_dir)
    logger.info("  Output:   %s", settings.out_dir)

    _enter(BuildStage.VALIDATE_SOURCE)
    if not settings.swatchkit_dir.is_dir():
        raise SourceNotFoundError(
            'pattern directory not found. Run "swatchkit init" to get started.',
            settings.swatchkit_dir,
        )

    _enter(BuildStage.CLEAN_OUTPUT)
    clean_output_dir(settings)

    _enter(BuildStage.COMPILE_TOKENS)
    context = compile_tokens(settings.tokens_dir, settings.css_dir)
    generate_utilities(context, settings.css_dir)
    if settings.token_pages:
        generate_token_pages(context, settings.token_pages_dir)

    _enter(BuildStage.SCAN_CONTENT)
    library = scan(settings.swatchkit_dir, settings.exclude)

    _enter(BuildStage.ASSEMBLE)
    layout, preview_layout = load_layouts(
        settings.project_layout,
        settings.internal_layout,
        settings.project_preview_layout,
        settings.internal_preview_layout,
    )
    site = assemble(library, layout, preview_layout)

    _enter(BuildStage.WRITE)
    preview_files = write_site(settings, library, site)

    _enter(BuildStage.DONE)
    logger.info("Build complete! Generated %s", settings.output_file)
    return BuildResult(
        output_file=settings.output_file,
        sections=tuple(library.section_names()),
        swatch_count=len(library.swatches),
        preview_files=tuple(preview_files),
        tokens_css=context.output_file,
        warnings=tuple(context.warnings),
    )
