"""Typer application root for the catalogue-search CLI."""

import logging
from importlib.metadata import PackageNotFoundError, version

import typer
from rich.console import Console

from catalogue_search.cli.catalogue import info
from catalogue_search.cli.search import search, shell
from catalogue_search.core.logging import configure_logging, suppress_third_party_loggers

# Shared console instance for consistent output across all CLI modules.
console = Console()

app = typer.Typer(
    name="catalogue-search",
    help="Check identifiers against a reference catalogue.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            current = version("catalogue-search")
        except PackageNotFoundError:
            current = "0.0.0"
        console.print(f"catalogue-search {current}")
        raise typer.Exit()


def _verbose_callback(value: bool) -> None:
    """Enable DEBUG-level logging when --verbose is passed."""
    if value:
        configure_logging(level=logging.DEBUG, force=True)
        suppress_third_party_loggers()


@app.callback()
def main(
    _version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    _verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable detailed debug output.",
        callback=_verbose_callback,
        is_eager=True,
    ),
) -> None:
    """Check identifiers against a reference catalogue."""


app.command(name="search")(search)
app.command(name="shell")(shell)
app.command(name="info")(info)
