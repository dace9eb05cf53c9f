"""
Pattern library model.

The scanner produces one immutable ``PatternLibrary`` per build: an ordered
tuple of sections, each an ordered tuple of swatches.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

TOKENS_SECTION = "Design Tokens"
PATTERNS_SECTION = "Patterns"


@dataclass(frozen=True)
class Swatch:
    """One renderable HTML example."""

    id: str  # Unique across the library; DOM anchor and preview directory
    name: str
    content: str
    description: str | None = None
    section_slug: str | None = None  # None for root-level patterns
    source: Path | None = None
    assets: tuple[Path, ...] = ()  # Sibling files copied into the preview directory

    @property
    def preview_path(self) -> PurePosixPath:
        """Preview directory relative to ``<out>/preview``."""
        if self.section_slug:
            return PurePosixPath(self.section_slug, self.id)
        return PurePosixPath(self.id)


@dataclass(frozen=True)
class Script:
    """A JS file to bundle into swatches.js."""

    label: str  # "button/script.js" or "tokens/script.js"
    path: Path


@dataclass(frozen=True)
class Section:
    name: str
    slug: str | None
    swatches: tuple[Swatch, ...]


def section_sort_key(name: str) -> tuple[int, str]:
    """Design Tokens first, Patterns last, everything else alphabetical."""
    if name == TOKENS_SECTION:
        return (0, "")
    if name == PATTERNS_SECTION:
        return (2, "")
    return (1, name.casefold())


def sort_sections(sections: list[Section] | tuple[Section, ...]) -> tuple[Section, ...]:
    return tuple(sorted(sections, key=lambda section: (section_sort_key(section.name), section.name)))


@dataclass(frozen=True)
class PatternLibrary:
    """Sections in display order plus the scripts found while scanning."""

    sections: tuple[Section, ...] = ()
    scripts: tuple[Script, ...] = field(default=())

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    @property
    def swatches(self) -> tuple[Swatch, ...]:
        return tuple(swatch for section in self.sections for swatch in section.swatches)

    def section_names(self) -> list[str]:
        return [section.name for section in self.sections]
