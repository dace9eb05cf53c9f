"""
Slot-based layout templates.

A layout is plain HTML with ``<!-- SLOT_NAME -->`` markers. Parsing splits
it once into literal text and named slots; rendering fills every slot from a
typed slot object, so substituted content is never rescanned for markers.
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from pathlib import Path

from swatchkit.core.errors import LayoutError

logger = logging.getLogger(__name__)

_MARKER_RE = re.compile(r"<!--\s*([A-Z][A-Z0-9_]*)\s*-->")


def marker_for(slot: str) -> str:
    """``head-extras`` -> ``<!-- HEAD_EXTRAS -->``."""
    return f"<!-- {slot.upper().replace('-', '_')} -->"


@dataclass(frozen=True)
class LayoutSlots:
    """Slots filled in the main index layout."""

    sidebar: str
    content: str
    css_path: str
    head_extras: str = ""


@dataclass(frozen=True)
class PreviewSlots:
    """Slots filled in the standalone preview layout."""

    title: str
    content: str
    css_path: str


@dataclass(frozen=True)
class SlotTemplate:
    """A layout split into literal text and slot references."""

    literals: tuple[str, ...]  # One more literal than markers
    markers: tuple[tuple[str, str], ...]  # (slot key, marker as written)
    source: Path | None = None

    @classmethod
    def parse(cls, text: str, source: Path | None = None) -> SlotTemplate:
        literals: list[str] = []
        markers: list[tuple[str, str]] = []
        position = 0
        for match in _MARKER_RE.finditer(text):
            literals.append(text[position : match.start()])
            markers.append((match.group(1).lower(), match.group(0)))
            position = match.end()
        literals.append(text[position:])
        return cls(tuple(literals), tuple(markers), source)

    @classmethod
    def load(cls, path: Path) -> SlotTemplate:
        try:
            return cls.parse(path.read_text(encoding="utf-8"), path)
        except OSError as e:
            raise LayoutError(f"cannot read layout: {e.strerror or e}", path) from e

    @property
    def slot_names(self) -> frozenset[str]:
        return frozenset(key for key, _ in self.markers)

    def missing_slots(self, slots: type[LayoutSlots] | type[PreviewSlots]) -> list[str]:
        """Slot fields of ``slots`` that this layout never references."""
        return [name for name in slots.__dataclass_fields__ if name not in self.slot_names]

    def render(self, slots: LayoutSlots | PreviewSlots) -> str:
        """Fill slots; markers with no matching field are kept as written."""
        values = asdict(slots)
        out = [self.literals[0]]
        for (key, raw), literal in zip(self.markers, self.literals[1:], strict=True):
            out.append(values.get(key, raw))
            out.append(literal)
        return "".join(out)


def load_layouts(
    project_layout: Path,
    internal_layout: Path,
    project_preview_layout: Path,
    internal_preview_layout: Path,
) -> tuple[SlotTemplate, SlotTemplate]:
    """Pick project overrides when present, packaged layouts otherwise."""
    if project_layout.is_file():
        logger.info("Using custom layout: %s", project_layout)
        layout = SlotTemplate.load(project_layout)
    else:
        layout = SlotTemplate.load(internal_layout)

    if project_preview_layout.is_file():
        logger.info("Using custom preview layout: %s", project_preview_layout)
        preview = SlotTemplate.load(project_preview_layout)
    else:
        preview = SlotTemplate.load(internal_preview_layout)
    return layout, preview
