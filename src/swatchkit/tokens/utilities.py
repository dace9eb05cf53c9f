"""
Utility class generation from compiled tokens.

Writes ``utilities.css`` with one single-declaration class per token, each
pointing at the token's custom property.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .models import TokenContext

logger = logging.getLogger(__name__)

UTILITIES_CSS_FILENAME = "utilities.css"

# category -> ((class name template, CSS property), ...)
UTILITY_RULES: dict[str, tuple[tuple[str, str], ...]] = {
    "colors": (("color-{slug}", "color"), ("bg-{slug}", "background-color")),
    "weights": (("weight-{slug}", "font-weight"),),
    "leading": (("leading-{slug}", "line-height"),),
    "sizes": (("text-{slug}", "font-size"),),
    "spacing": (("gap-{slug}", "gap"),),
    "fonts": (("font-{slug}", "font-family"),),
}


def render_utilities(context: TokenContext) -> str:
    """Render utility rules for every compiled token, in category order."""
    blocks: list[str] = []
    for category, rules in UTILITY_RULES.items():
        tokens = context.category(category)
        if not tokens:
            continue
        lines = [f"/* {category} */"]
        for template, prop in rules:
            for token in tokens:
                class_name = template.format(slug=token.slug)
                lines.append(f".{class_name} {{ {prop}: var({token.variable}); }}")
        blocks.append("\n".join(lines))
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def generate_utilities(context: TokenContext, css_dir: Path) -> Path | None:
    """Write ``css_dir/utilities.css``. Returns None when there is nothing to write."""
    css = render_utilities(context)
    if not css:
        return None

    output_file = css_dir / UTILITIES_CSS_FILENAME
    css_dir.mkdir(parents=True, exist_ok=True)
    output_file.write_text(css, encoding="utf-8")
    logger.info("Generated %s", output_file)
    return output_file
