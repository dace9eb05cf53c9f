"""
Rich console helpers for the SwatchKit CLI.
"""

from rich.console import Console
from rich.style import Style
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

STYLES = {
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
}


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(message, style=STYLES["info"]))
