"""
SwatchKit command-line interface.

    swatchkit init              Scaffold tokens, CSS and a layout
    swatchkit build             Build the pattern library
    swatchkit build --watch     Build, then rebuild on changes
"""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

import typer
from rich.logging import RichHandler

from swatchkit import __version__
from swatchkit.cli_ui import err_console, print_error, print_info, print_success, print_warning
from swatchkit.core.errors import SwatchKitError
from swatchkit.core.manifest import load_config
from swatchkit.core.settings import BuildSettings, resolve_settings


def configure_logging(verbose: bool = False) -> None:
    """Route SwatchKit log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"SwatchKit {__version__}")
        typer.echo(f"Python {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="""SwatchKit - pattern library generator

Commands:
  • init   Scaffold design tokens, CSS and a layout
  • build  Compile tokens and build the pattern library (--watch to rebuild on changes)
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """SwatchKit CLI main callback for global options."""
    pass


def _load_settings(config: Path | None, input: str | None, out_dir: str | None) -> BuildSettings:
    project_config = load_config(config)
    root = config.resolve().parent if config is not None else Path.cwd()
    return resolve_settings(project_config, root, input=input, out_dir=out_dir)


@app.command(name="build")
def build_command(
    config: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="Path to swatchkit.toml (default: ./swatchkit.toml)"
    ),
    input: str | None = typer.Option(None, "--input", "-i", help="Pattern directory"),
    out_dir: str | None = typer.Option(None, "--out-dir", "-o", help="Output directory"),
    watch: bool = typer.Option(False, "--watch", "-w", help="Rebuild when sources change"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
) -> None:
    """
    Compile design tokens and build the pattern library.

    Examples:
        swatchkit build
        swatchkit build -i patterns -o public/patterns
        swatchkit build --watch
    """
    from swatchkit.core.build import build
    from swatchkit.core.watch import watch as watch_sources

    configure_logging(verbose)
    try:
        settings = _load_settings(config, input, out_dir)
        result = build(settings)
    except SwatchKitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    for warning in result.warnings:
        print_warning(warning)
    print_success(
        f"Built {result.swatch_count} swatch(es) in {len(result.sections)} section(s) "
        f"-> {result.output_file}"
    )

    if watch:
        watch_sources(settings, lambda: build(settings))


@app.command(name="init")
def init_command(
    config: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="Path to swatchkit.toml (default: ./swatchkit.toml)"
    ),
    input: str | None = typer.Option(None, "--input", "-i", help="Pattern directory"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Replace an existing layout (the old one is backed up)"
    ),
) -> None:
    """
    Scaffold a SwatchKit project in the current directory.

    Creates the pattern directory, starter design tokens, CSS and a layout.
    Existing files are kept; use --force to replace the layout.
    """
    from swatchkit.core.init import init_project

    configure_logging()
    try:
        settings = _load_settings(config, input, None)
        created = init_project(settings, force=force, log=print_info)
    except SwatchKitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if created:
        print_success(f"Initialized SwatchKit in {settings.swatchkit_dir}")
    else:
        print_success("Nothing to do; project already initialized")
    typer.echo("Next: swatchkit build")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
