"""
Error types for SwatchKit configuration, token compilation and builds.
"""

from pathlib import Path


class SwatchKitError(Exception):
    """Base exception for all SwatchKit errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending path if available."""
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class ConfigError(SwatchKitError):
    """
    Raised when project configuration cannot be loaded.

    Examples:
    - swatchkit.toml is not valid TOML
    - A config value has the wrong type
    """

    pass


class SourceNotFoundError(SwatchKitError):
    """Raised when the pattern source directory does not exist."""

    pass


class UnsafeOutputDirError(SwatchKitError):
    """
    Raised when the output directory is too broad to be cleaned.

    Examples:
    - Output directory is the project root or one of its parents
    - Output directory lives outside the project root
    - Output directory is only one segment below the project root
    """

    pass


class SourceEncodingError(SwatchKitError):
    """Raised when a swatch source file is not valid UTF-8."""

    pass


class FluidConfigError(SwatchKitError):
    """
    Raised when a fluid value cannot be interpolated.

    Examples:
    - Minimum and maximum viewport widths are equal
    - Viewport widths are not numbers
    """

    pass


class LayoutError(SwatchKitError):
    """Raised when a layout template cannot be read."""

    pass
