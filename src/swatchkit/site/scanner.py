"""
Pattern source scanner.

Classifies the entries of the pattern root:

- a directory without ``index.html`` is a section container; its swatches
  are collected recursively (nested containers are flattened into it)
- an ``.html`` file is a single-file swatch
- a directory with ``index.html`` is a component-folder swatch; its other
  files are assets copied next to its standalone preview
- ``.js`` files are bundled into swatches.js

Root-level swatches form the "Patterns" section. Entries starting with
``.`` or ``_`` and entries matching an exclusion pattern are skipped.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field, replace
from pathlib import Path

from swatchkit.core.errors import SourceEncodingError, SourceNotFoundError
from swatchkit.core.slug import is_excluded, slugify, title_case

from .models import (
    PATTERNS_SECTION,
    TOKENS_SECTION,
    PatternLibrary,
    Script,
    Section,
    Swatch,
    sort_sections,
)

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"
DESCRIPTION_FILE = "description.html"


def section_name(dirname: str) -> str:
    """Display heading for a section directory."""
    if dirname == "tokens":
        return TOKENS_SECTION
    return title_case(dirname)


@dataclass
class _ScanState:
    """Mutable accumulator local to one scan; frozen into a PatternLibrary at the end."""

    exclude: tuple[str, ...]
    scripts: list[Script] = field(default_factory=list)

    def entries(self, directory: Path) -> list[Path]:
        return [
            entry
            for entry in sorted(directory.iterdir(), key=lambda p: p.name)
            if not is_excluded(entry.name, self.exclude)
        ]


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceEncodingError(f"not valid UTF-8 (byte {e.start})", path) from e


def _component_assets(directory: Path, exclude: tuple[str, ...]) -> tuple[Path, ...]:
    return tuple(
        entry
        for entry in sorted(directory.iterdir(), key=lambda p: p.name)
        if entry.name not in (INDEX_FILE, DESCRIPTION_FILE) and not is_excluded(entry.name, exclude)
    )


def _component_swatch(directory: Path, section_slug: str | None, state: _ScanState) -> Swatch:
    description_file = directory / DESCRIPTION_FILE
    assets = _component_assets(directory, state.exclude)
    for asset in assets:
        if asset.is_file() and asset.suffix == ".js":
            state.scripts.append(Script(f"{directory.name}/{asset.name}", asset))

    return Swatch(
        id=slugify(directory.name),
        name=directory.name,
        content=_read(directory / INDEX_FILE),
        description=_read(description_file) if description_file.is_file() else None,
        section_slug=section_slug,
        source=directory,
        assets=assets,
    )


def _file_swatch(path: Path, section_slug: str | None) -> Swatch:
    return Swatch(
        id=slugify(path.stem),
        name=path.stem,
        content=_read(path),
        section_slug=section_slug,
        source=path,
    )


def _scan_section_dir(directory: Path, section_slug: str, state: _ScanState) -> list[Swatch]:
    """Collect swatches below a section container, flattening nested containers."""
    swatches: list[Swatch] = []
    for entry in state.entries(directory):
        if entry.is_dir():
            if (entry / INDEX_FILE).is_file():
                swatches.append(_component_swatch(entry, section_slug, state))
            else:
                swatches.extend(_scan_section_dir(entry, section_slug, state))
        elif entry.suffix == ".html":
            swatches.append(_file_swatch(entry, section_slug))
        elif entry.suffix == ".js":
            rel = entry.relative_to(directory.parent).as_posix()
            state.scripts.append(Script(rel, entry))
    return swatches


def _merge_sections(sections: list[Section]) -> list[Section]:
    """Fold sections whose headings coincide (`Buttons/` and `buttons/`) into the first."""
    merged: dict[str, Section] = {}
    for section in sections:
        first = merged.get(section.name)
        if first is None:
            merged[section.name] = section
        else:
            merged[section.name] = Section(first.name, first.slug, first.swatches + section.swatches)
    return list(merged.values())


def _unique_ids(sections: tuple[Section, ...]) -> tuple[Section, ...]:
    """Suffix colliding swatch ids with -2, -3, ... in display order."""
    used: set[str] = set()
    result: list[Section] = []
    for section in sections:
        swatches: list[Swatch] = []
        for swatch in section.swatches:
            base = swatch.id or "swatch"
            new_id, n = base, 1
            while new_id in used:
                n += 1
                new_id = f"{base}-{n}"
            used.add(new_id)
            if new_id != swatch.id:
                logger.debug("Swatch id %r already used, using %r", swatch.id, new_id)
                swatch = replace(swatch, id=new_id)
            swatches.append(swatch)
        result.append(Section(section.name, section.slug, tuple(swatches)))
    return tuple(result)


def scan(directory: Path, exclude: tuple[str, ...] | list[str] = ()) -> PatternLibrary:
    """Scan the pattern root into a PatternLibrary.

    Raises:
        SourceNotFoundError: If ``directory`` does not exist.
    """
    if not directory.is_dir():
        raise SourceNotFoundError("pattern directory not found", directory)

    state = _ScanState(exclude=tuple(exclude))
    entries = state.entries(directory)
    sections: list[Section] = []

    # Section containers
    for entry in entries:
        if entry.is_dir() and not (entry / INDEX_FILE).is_file():
            slug = slugify(entry.name) or "section"
            swatches = _scan_section_dir(entry, slug, state)
            if swatches:
                sections.append(Section(section_name(entry.name), slug, tuple(swatches)))
    sections = _merge_sections(sections)

    # Root-level swatches
    root_swatches: list[Swatch] = []
    for entry in entries:
        if entry.is_file() and entry.suffix == ".html":
            root_swatches.append(_file_swatch(entry, None))
        elif entry.is_dir() and (entry / INDEX_FILE).is_file():
            root_swatches.append(_component_swatch(entry, None, state))
    if root_swatches:
        sections.append(Section(PATTERNS_SECTION, None, tuple(root_swatches)))

    library = PatternLibrary(
        sections=_unique_ids(sort_sections(sections)),
        scripts=tuple(state.scripts),
    )
    logger.debug(
        "Scanned %s: %d section(s), %d swatch(es)",
        directory,
        len(library.sections),
        len(library.swatches),
    )
    return library


def _ignore_hidden(directory: str, names: list[str]) -> list[str]:
    return [name for name in names if name.startswith((".", "_"))]


def _copy_entry(source: Path, destination: Path) -> None:
    if source.is_dir():
        shutil.copytree(source, destination, ignore=_ignore_hidden, dirs_exist_ok=True)
    else:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)


def mirror_assets(library: PatternLibrary, preview_root: Path) -> int:
    """Copy each component swatch's assets into its preview directory.

    Returns the number of entries copied.
    """
    copied = 0
    for swatch in library.swatches:
        if not swatch.assets:
            continue
        target = preview_root / swatch.preview_path
        for asset in swatch.assets:
            _copy_entry(asset, target / asset.name)
            copied += 1
    return copied
