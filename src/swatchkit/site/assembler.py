"""
Site assembler.

Renders the sidebar, the per-swatch blocks and one standalone preview page
per swatch, then fills the layout slots. Pure: returns strings and
relative paths, the build writes them.
"""

from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass
from pathlib import PurePosixPath

from markupsafe import escape

from .layout import LayoutSlots, PreviewSlots, SlotTemplate, marker_for
from .models import PatternLibrary, Swatch, sort_sections
from .rendering import render_fragment

logger = logging.getLogger(__name__)

CSS_DIR = PurePosixPath("css")
PREVIEW_DIR = PurePosixPath("preview")


@dataclass(frozen=True)
class PreviewPage:
    """A standalone preview, ``path`` relative to the output directory."""

    swatch_id: str
    path: PurePosixPath
    html: str


@dataclass(frozen=True)
class SiteOutput:
    index_html: str
    previews: tuple[PreviewPage, ...]


def relative_dir(from_dir: PurePosixPath, to_dir: PurePosixPath) -> str:
    """Relative URL prefix (with trailing slash) from one output directory to another."""
    rel = posixpath.relpath(str(to_dir), str(from_dir))
    return f"{rel}/"


def preview_dir(swatch: Swatch) -> PurePosixPath:
    return PREVIEW_DIR / swatch.preview_path


def render_sidebar(library: PatternLibrary) -> str:
    return render_fragment("sidebar.html", sections=sort_sections(library.sections))


def render_swatch_block(swatch: Swatch, section_name: str) -> str:
    href = (preview_dir(swatch) / "index.html").as_posix()
    return render_fragment("swatch.html", swatch=swatch, section_name=section_name, preview_href=href)


def render_preview(swatch: Swatch, layout: SlotTemplate) -> PreviewPage:
    page_dir = preview_dir(swatch)
    slots = PreviewSlots(
        title=str(escape(swatch.name)),
        content=render_fragment("preview_body.html", swatch=swatch),
        css_path=relative_dir(page_dir, CSS_DIR),
    )
    return PreviewPage(swatch.id, page_dir / "index.html", layout.render(slots))


def _check_slots(layout: SlotTemplate, slots: type[LayoutSlots] | type[PreviewSlots]) -> None:
    missing = layout.missing_slots(slots)
    if "content" in missing:
        logger.warning(
            "Layout %s has no %s marker; swatches will not appear",
            layout.source or "<string>",
            marker_for("content"),
        )


def assemble(
    library: PatternLibrary,
    layout: SlotTemplate,
    preview_layout: SlotTemplate,
    head_extras: str = "",
) -> SiteOutput:
    """Render the index page and every preview page."""
    _check_slots(layout, LayoutSlots)
    _check_slots(preview_layout, PreviewSlots)

    sections = sort_sections(library.sections)
    blocks = [
        render_swatch_block(swatch, section.name)
        for section in sections
        for swatch in section.swatches
    ]

    index_html = layout.render(
        LayoutSlots(
            sidebar=render_sidebar(library),
            content="\n".join(blocks),
            css_path=relative_dir(PurePosixPath(""), CSS_DIR),
            head_extras=head_extras,
        )
    )

    previews = tuple(
        render_preview(swatch, preview_layout)
        for section in sections
        for swatch in section.swatches
    )
    return SiteOutput(index_html=index_html, previews=previews)
