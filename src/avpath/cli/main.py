"""
CLI for avpath.

Commands:
    avpath to-path URI - Convert a file URI to a path
    avpath to-uri PATH - Convert a path to a file URI
    avpath subpath URI - Sanitize a URI into a path segment
    avpath cache-path URI - Show where a URI is cached
    avpath config - Show current configuration
    avpath version - Print version
"""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from avpath import __version__
from avpath.config import Settings, clear_settings_cache, get_settings
from avpath.exceptions import ConfigurationError
from avpath.locations import cache_path_for_uri
from avpath.logging import log_context, setup_logging
from avpath.subpath import uri_to_subpath
from avpath.types import AuthorityStyle
from avpath.uri import parse_file_uri, path_to_file_uri

app = typer.Typer(
    name="avpath",
    help="URI and path utilities",
    no_args_is_help=True,
)

console = Console()
error_console = Console(stderr=True)


def _get_settings_safe() -> Settings | None:
    """Get settings, returning None if configuration is invalid."""
    try:
        clear_settings_cache()
        return get_settings()
    except ConfigurationError:
        return None


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Configure logging for every command."""
    settings = _get_settings_safe()
    level = "DEBUG" if verbose else (settings.LOG_LEVEL if settings else "INFO")
    setup_logging(log_level=level)


@app.command("to-path")
def to_path(
    uri: Annotated[str, typer.Argument(help="file:// URI")],
    style: Annotated[
        Optional[AuthorityStyle],
        typer.Option("--style", "-s", help="How to read file://host/path"),
    ] = None,
) -> None:
    """Convert a file URI to a filesystem path."""
    with log_context(operation="to-path"):
        result = parse_file_uri(uri, style)
    if not result.ok:
        error_console.print(f"[red]Error:[/red] not a file URI ({result.reason.value}): {uri}")
        raise typer.Exit(1)
    typer.echo(result.path)


@app.command("to-uri")
def to_uri(
    path: Annotated[str, typer.Argument(help="Filesystem path")],
) -> None:
    """Convert a filesystem path to a file URI."""
    typer.echo(path_to_file_uri(path))


@app.command()
def subpath(
    uri: Annotated[str, typer.Argument(help="Any URI")],
    max_length: Annotated[
        int,
        typer.Option("--max-length", "-m", min=0, help="Keep at most N trailing characters"),
    ] = 0,
) -> None:
    """Sanitize a URI into a filesystem-safe name."""
    typer.echo(uri_to_subpath(uri, max_length))


@app.command("cache-path")
def cache_path(
    uri: Annotated[str, typer.Argument(help="Any URI")],
    max_length: Annotated[
        Optional[int],
        typer.Option("--max-length", "-m", min=0, help="Subpath truncation"),
    ] = None,
) -> None:
    """Show the cache location for a URI."""
    if _get_settings_safe() is None:
        error_console.print("[red]Error:[/red] Configuration is invalid. Run 'avpath config'.")
        raise typer.Exit(1)
    typer.echo(str(cache_path_for_uri(uri, max_length)))


@app.command()
def config() -> None:
    """Show current configuration."""
    settings = _get_settings_safe()

    if settings is None:
        error_console.print("[red]Configuration is invalid.[/red]")
        error_console.print("Check the AVPATH_* environment variables and .env file.")
        raise typer.Exit(1)

    table = Table(title="avpath settings", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for key, value in settings.display().items():
        display_value = str(value) if value is not None else "[dim]not set[/dim]"
        table.add_row(key, display_value)

    console.print(table)


@app.command()
def version() -> None:
    """Print the version number."""
    console.print(f"avpath version {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
