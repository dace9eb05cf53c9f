"""
Name normalisation helpers shared by the token compiler and the scanner.
"""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_NON_WORD_RE = re.compile(r"[^a-z0-9_-]+")
_HYPHEN_RUN_RE = re.compile(r"-{2,}")


def slugify(name: str) -> str:
    """Turn a token or swatch name into a CSS identifier fragment.

    Lowercases, replaces whitespace runs with ``-``, strips everything
    outside ``[a-z0-9_-]`` and collapses hyphen runs. Leading and trailing
    hyphens are trimmed so the result can be appended to a prefix.

    May return an empty string for all-punctuation input.
    """
    text = str(name).lower().strip()
    text = _WHITESPACE_RE.sub("-", text)
    text = _NON_WORD_RE.sub("", text)
    text = _HYPHEN_RUN_RE.sub("-", text)
    return text.strip("-")


def title_case(name: str) -> str:
    """``button-groups`` -> ``Button Groups``."""
    words = name.replace("-", " ").replace("_", " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def matches_glob(name: str, pattern: str) -> bool:
    """Match an entry name against an exclusion pattern.

    Supported shapes: ``exact``, ``prefix*``, ``*suffix`` and ``*substring*``.
    Any other placement of ``*`` falls back to an exact comparison.
    """
    if "*" in pattern:
        starts = pattern.startswith("*")
        ends = pattern.endswith("*")
        core = pattern.strip("*")
        if "*" not in core:
            if starts and ends:
                return core in name
            if ends:
                return name.startswith(core)
            if starts:
                return name.endswith(core)
    return name == pattern


def is_excluded(name: str, exclude: tuple[str, ...] | list[str]) -> bool:
    """True for hidden/internal entries and anything matching ``exclude``."""
    if name.startswith((".", "_")):
        return True
    return any(matches_glob(name, pattern) for pattern in exclude)
