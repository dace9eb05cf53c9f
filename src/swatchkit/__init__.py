"""
SwatchKit - a static pattern-library generator.

Compiles JSON design tokens into CSS custom properties and turns a folder
of HTML swatches into a browsable pattern library with standalone previews.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core.errors import (
    ConfigError,
    FluidConfigError,
    LayoutError,
    SourceEncodingError,
    SourceNotFoundError,
    SwatchKitError,
    UnsafeOutputDirError,
)


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("swatchkit")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "SwatchKitError",
    "ConfigError",
    "SourceNotFoundError",
    "SourceEncodingError",
    "UnsafeOutputDirError",
    "FluidConfigError",
    "LayoutError",
]
