"""
Token documentation swatches.

After compilation, one HTML swatch per compiled category is written to the
generated token pages directory so the "Design Tokens" section documents
the real custom property names. Pages are only rewritten when their
content changes, and pages for categories that no longer compile are
removed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from swatchkit.site.rendering import render_fragment

from .models import TokenContext

logger = logging.getLogger(__name__)

# output filename -> (category key, template)
TOKEN_PAGES: dict[str, tuple[str, str]] = {
    "colors.html": ("colors", "tokens/colors.html"),
    "typography.html": ("sizes", "tokens/typography.html"),
    "spacing.html": ("spacing", "tokens/spacing.html"),
    "fonts.html": ("fonts", "tokens/fonts.html"),
    "text-weights.html": ("weights", "tokens/text-weights.html"),
    "text-leading.html": ("leading", "tokens/text-leading.html"),
    "viewports.html": ("viewports", "tokens/viewports.html"),
}


def render_token_pages(context: TokenContext) -> dict[str, str]:
    """Render a page for each category that produced tokens."""
    pages: dict[str, str] = {}
    for filename, (category, template) in TOKEN_PAGES.items():
        tokens = context.category(category)
        if tokens:
            pages[filename] = render_fragment(template, tokens=tokens)
    return pages


def generate_token_pages(context: TokenContext, pages_dir: Path) -> list[Path]:
    """Sync rendered token pages into ``pages_dir``. Returns the files written."""
    pages = render_token_pages(context)
    written: list[Path] = []

    if pages_dir.is_dir():
        for stale in sorted(pages_dir.glob("*.html")):
            if stale.name in TOKEN_PAGES and stale.name not in pages:
                stale.unlink()
                logger.debug("Removed stale token page %s", stale)

    if not pages:
        return written

    pages_dir.mkdir(parents=True, exist_ok=True)
    for filename, html in pages.items():
        path = pages_dir / filename
        if path.exists() and path.read_text(encoding="utf-8") == html:
            continue
        path.write_text(html, encoding="utf-8")
        written.append(path)

    if written:
        logger.info("Generated %d token page(s) in %s", len(written), pages_dir)
    return written
