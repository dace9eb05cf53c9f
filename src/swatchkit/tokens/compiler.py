"""
Design token compiler.

Reads the seven token category files and writes a single ``:root`` block of
CSS custom properties. Categories are processed in a fixed order because
text sizes and spacing need the viewports read first.

A missing file skips its category. A file that is not valid JSON, or does
not match its model, skips its category with a warning; the remaining
categories still compile.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from swatchkit.core.errors import FluidConfigError
from swatchkit.core.slug import slugify

from .fluid import clamp_expression, format_number, resolve_bounds, viewport_range
from .models import (
    VIEWPORT_META_KEYS,
    CompiledToken,
    LeadingFile,
    TokenContext,
    TokenFile,
    TokenItem,
)

logger = logging.getLogger(__name__)

TOKENS_CSS_FILENAME = "tokens.css"


@dataclass(frozen=True)
class Category:
    """A token category and how it maps to custom properties."""

    key: str
    filename: str
    prefix: str  # Prepended to the item slug: "--{prefix}{slug}"
    title: str
    kind: str


# Processing order matters: viewports must come first.
CATEGORIES: tuple[Category, ...] = (
    Category("viewports", "viewports.json", "viewport-", "Viewports", "viewports"),
    Category("colors", "colors.json", "color-", "Colors", "static"),
    Category("weights", "text-weights.json", "weight-", "Text Weights", "static"),
    Category("leading", "text-leading.json", "leading-", "Text Leading", "leading"),
    Category("sizes", "text-sizes.json", "s", "Text Sizes", "fluid"),
    Category("spacing", "spacing.json", "space-", "Spacing", "fluid"),
    Category("fonts", "fonts.json", "font-", "Fonts", "static"),
)

TOKEN_FILENAMES = tuple(category.filename for category in CATEGORIES)


@dataclass
class CategoryBlock:
    """Declarations emitted for one category."""

    title: str
    declarations: list[tuple[str, str]] = field(default_factory=list)
    tokens: list[CompiledToken] = field(default_factory=list)

    def add(self, category: Category, name: str, slug: str, value: str) -> None:
        variable = f"--{category.prefix}{slug}"
        self.declarations.append((variable, value))
        self.tokens.append(CompiledToken(category.key, name, slug, variable, value))

    def render(self) -> str:
        title = self.title.replace("*/", "* /")
        lines = [f"  /* {title} */"]
        lines.extend(f"  {variable}: {value};" for variable, value in self.declarations)
        return "\n".join(lines) + "\n"


def _warn(context: TokenContext, message: str) -> None:
    logger.warning(message)
    context.warnings.append(message)


def _css_value(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(part) for part in value)
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def _item_slug(category: Category, item: TokenItem, context: TokenContext) -> str | None:
    """Slug for an item, or None (with a warning) when it has no usable name."""
    if not item.name:
        logger.debug("Skipping unnamed item in %s", category.filename)
        return None
    slug = slugify(item.name)
    if not slug:
        _warn(context, f"{category.filename}: token name {item.name!r} has no usable characters")
        return None
    return slug


def _read_json(path: Path, context: TokenContext) -> Any | None:
    if not path.exists():
        logger.debug("No %s, skipping", path.name)
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        _warn(context, f"Error processing {path.name}: invalid JSON ({e.msg} at line {e.lineno})")
    except UnicodeDecodeError as e:
        _warn(context, f"Error processing {path.name}: not valid UTF-8 (byte {e.start})")
    except OSError as e:
        _warn(context, f"Error processing {path.name}: {e}")
    return None


# =============================================================================
# Category compilers
# =============================================================================


def _compile_viewports(category: Category, data: Any, context: TokenContext) -> CategoryBlock | None:
    if not isinstance(data, dict):
        _warn(context, f"{category.filename}: expected an object of named widths")
        return None

    context.viewports = data
    block = CategoryBlock(str(data.get("title") or category.title))
    for key, value in data.items():
        if key in VIEWPORT_META_KEYS:
            continue
        slug = slugify(key)
        if not slug:
            continue
        if isinstance(value, bool) or not isinstance(value, int | float | str):
            logger.debug("Skipping viewport %r with unsupported value %r", key, value)
            continue
        css_value = f"{format_number(value)}px" if not isinstance(value, str) else value
        block.add(category, key, slug, css_value)
    return block


def _compile_static(category: Category, data: Any, context: TokenContext) -> CategoryBlock | None:
    doc = TokenFile.model_validate(data)
    block = CategoryBlock(doc.title or category.title)
    for item in doc.items:
        slug = _item_slug(category, item, context)
        if slug and item.is_static:
            # List values (font stacks) are joined verbatim; quoting is up to the author.
            block.add(category, item.name, slug, _css_value(item.value))
    return block


def _compile_leading(category: Category, data: Any, context: TokenContext) -> CategoryBlock | None:
    doc = LeadingFile.model_validate(data)
    block = CategoryBlock(doc.title or category.title)
    has_scale = doc.base is not None and doc.ratio is not None

    if has_scale:
        block.declarations.append((f"--{category.prefix}base", format_number(doc.base)))
        block.declarations.append((f"--{category.prefix}ratio", format_number(doc.ratio)))

    missing_scale: list[str] = []
    for item in doc.items:
        slug = _item_slug(category, item, context)
        if not slug:
            continue
        if item.is_static:
            block.add(category, item.name, slug, _css_value(item.value))
        elif item.step is not None:
            if not has_scale:
                missing_scale.append(item.name)
                continue
            value = (
                f"calc(var(--{category.prefix}base) * "
                f"pow(var(--{category.prefix}ratio), {format_number(item.step)}))"
            )
            block.add(category, item.name, slug, value)

    if missing_scale:
        _warn(
            context,
            f"{category.filename}: 'base' and 'ratio' are required for step tokens "
            f"({', '.join(missing_scale)}); skipping them",
        )
    return block


def _compile_fluid(category: Category, data: Any, context: TokenContext) -> CategoryBlock | None:
    doc = TokenFile.model_validate(data)
    block = CategoryBlock(doc.title or category.title)

    fluid_items = [item for item in doc.items if item.is_fluid]
    static_items = [item for item in doc.items if item.is_static]

    if fluid_items:
        try:
            viewports = viewport_range(context.viewports)
        except FluidConfigError as e:
            _warn(context, f"{category.filename}: {e.message}. Skipping fluid tokens.")
            viewports = None
        else:
            if viewports is None:
                _warn(
                    context,
                    f"Fluid {category.title.lower()} detected in {category.filename} but "
                    "viewports min/max are missing. Skipping fluid generation.",
                )

        if viewports is not None:
            for item in fluid_items:
                slug = _item_slug(category, item, context)
                if not slug:
                    continue
                bounds = resolve_bounds(item.min, item.max, item.fluid_ratio or doc.fluid_ratio)
                block.add(category, item.name, slug, clamp_expression(bounds, viewports))

    for item in static_items:
        slug = _item_slug(category, item, context)
        if slug:
            block.add(category, item.name, slug, _css_value(item.value))
    return block


_COMPILERS: dict[str, Callable[[Category, Any, TokenContext], CategoryBlock | None]] = {
    "viewports": _compile_viewports,
    "static": _compile_static,
    "leading": _compile_leading,
    "fluid": _compile_fluid,
}


# =============================================================================
# Public API
# =============================================================================


def render_stylesheet(blocks: list[CategoryBlock]) -> str:
    """Render category blocks as one ``:root`` rule."""
    body = "\n".join(block.render() for block in blocks)
    return ":root {\n" + body + "}\n"


def compile_tokens(tokens_dir: Path, css_dir: Path) -> TokenContext:
    """Compile every token category in ``tokens_dir`` into ``css_dir/tokens.css``.

    Returns the TokenContext. When no category produced a declaration,
    nothing is written and the context is empty.
    """
    context = TokenContext()
    blocks: list[CategoryBlock] = []

    for category in CATEGORIES:
        path = tokens_dir / category.filename
        data = _read_json(path, context)
        if data is None:
            continue

        try:
            block = _COMPILERS[category.kind](category, data, context)
        except ValidationError as e:
            _warn(
                context,
                f"Error processing {category.filename}: "
                f"{e.error_count()} invalid field(s), first: {e.errors()[0]['msg']}",
            )
            continue

        if block is None or not block.declarations:
            continue
        context.tokens[category.key] = block.tokens
        blocks.append(block)

    if not blocks:
        logger.debug("No tokens found in %s", tokens_dir)
        return context

    output_file = css_dir / TOKENS_CSS_FILENAME
    css_dir.mkdir(parents=True, exist_ok=True)
    output_file.write_text(render_stylesheet(blocks), encoding="utf-8")
    context.output_file = output_file
    logger.info("Generated %s", output_file)
    return context
