"""Search commands: one-shot lookups and an interactive session."""

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from catalogue_search.cli.catalogue import DatasetOption, load_catalogue_or_exit
from catalogue_search.config import get_settings, parse_lookup_site
from catalogue_search.core import ConfigurationError, SearchMode, SearchOutcome, SessionStats
from catalogue_search.search import (
    LookupSite,
    SearchSession,
    build_lookup_links,
    sites_from_settings,
)

console = Console()

_EXIT_COMMANDS = {"exit", "quit", ":q"}

BulkOption = Annotated[
    bool,
    typer.Option("--bulk", "-b", help="Read one identifier per line."),
]
SiteOption = Annotated[
    Optional[list[str]],
    typer.Option(
        "--site",
        "-s",
        help="Extra lookup site as NAME=URL_TEMPLATE, with {id} in the URL. Repeatable.",
    ),
]


def _resolve_sites(extra: Optional[list[str]]) -> list[LookupSite]:
    """Combine configured lookup sites with ad-hoc ``--site`` options."""
    try:
        sites = sites_from_settings()
        for pair in extra or []:
            name, template = parse_lookup_site(pair)
            sites.append(LookupSite(name=name, url_template=template))
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--site") from None
    except ConfigurationError as e:
        raise typer.BadParameter(e.message, param_hint="--site") from None
    return sites


def _default_mode(bulk: bool) -> SearchMode:
    if bulk:
        return SearchMode.BULK
    return SearchMode.parse(get_settings().search.default_mode)


def _status_text(found: bool) -> Text:
    if found:
        return Text("✓ found", style="bold green")
    return Text("✗ not found", style="bold red")


def _links_text(identifier: int, sites: list[LookupSite]) -> Text:
    """Render lookup links as clickable terminal hyperlinks."""
    text = Text()
    for i, link in enumerate(build_lookup_links(identifier, sites)):
        if i:
            text.append("  ")
        text.append(link.site, style=f"link {link.url}")
    return text


def _stats_table(stats: SessionStats) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("Total", Text(f"{stats.total_count:,}", style="cyan"))
    table.add_row("Found", Text(f"{stats.found_count:,}", style="green"))
    table.add_row("Not found", Text(f"{stats.not_found_count:,}", style="red"))
    return table


def print_outcome(outcome: SearchOutcome, sites: list[LookupSite]) -> None:
    """Print the result table followed by the session statistics."""
    show_links = bool(sites) and bool(outcome.not_found)

    table = Table(expand=False, border_style="dim")
    table.add_column("#", style="bold", width=3, justify="right")
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    if show_links:
        table.add_column("Lookup")

    for i, result in enumerate(outcome.results, 1):
        row = [str(i), str(result.id), _status_text(result.found)]
        if show_links:
            # Lookup links for missing identifiers only
            row.append(Text("") if result.found else _links_text(result.id, sites))
        table.add_row(*row)

    console.print(table)
    console.print(
        f"[bold]{len(outcome.found)}[/bold] found, "
        f"[bold]{len(outcome.not_found)}[/bold] not found in this search"
    )
    console.print(_stats_table(outcome.stats))


def _read_file(file: Path) -> str:
    if str(file) == "-":
        return sys.stdin.read()
    try:
        return file.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Cannot read {file}:[/red] {e}")
        raise typer.Exit(code=1) from None


def search(
    query: Annotated[
        Optional[str],
        typer.Argument(help="Identifier to check (newline-separated with --bulk)."),
    ] = None,
    bulk: BulkOption = False,
    file: Annotated[
        Optional[Path],
        typer.Option(
            "--file",
            "-f",
            help="Read identifiers from a file, one per line ('-' for stdin).",
        ),
    ] = None,
    dataset: DatasetOption = None,
    links: Annotated[
        bool,
        typer.Option("--links/--no-links", help="Show lookup links for missing IDs."),
    ] = True,
    site: SiteOption = None,
) -> None:
    """
    Check whether identifiers exist in the reference dataset.

    Examples:

        catalogue-search search 1001

        catalogue-search search --file ids.txt

        printf '1001\\n1500\\n' | catalogue-search search -f -
    """
    if query is None and file is None:
        console.print("[red]Nothing to search:[/red] pass an identifier or --file.")
        raise typer.Exit(code=1)
    if query is not None and file is not None:
        raise typer.BadParameter(
            "pass either an identifier or --file, not both", param_hint="--file"
        )

    sites = _resolve_sites(site) if links else []

    if file is not None:
        raw_input = _read_file(file)
        mode = SearchMode.BULK
    else:
        raw_input = query
        mode = _default_mode(bulk)

    session = SearchSession(load_catalogue_or_exit(dataset))
    outcome = session.search(raw_input, mode)

    if not outcome.ok:
        console.print(f"[red]Search failed:[/red] {outcome.error.message}")
        if outcome.error.details:
            console.print(f"  [dim]{outcome.error.details}[/dim]")
        raise typer.Exit(code=1)

    print_outcome(outcome, sites)


def _read_query(bulk: bool) -> Optional[str]:
    """Read one query from the user. Returns None when the user is done."""
    prompt = "[bold cyan]ids>[/bold cyan] " if bulk else "[bold cyan]id>[/bold cyan] "
    try:
        first = console.input(prompt)
        if first.strip().lower() in _EXIT_COMMANDS:
            return None
        if not bulk:
            return first

        lines = [first]
        # A bulk query ends at the first blank line
        while lines[-1].strip():
            lines.append(console.input("[dim]...[/dim] "))
        return "\n".join(lines)
    except (EOFError, KeyboardInterrupt):
        return None


def shell(
    bulk: BulkOption = False,
    dataset: DatasetOption = None,
    links: Annotated[
        bool,
        typer.Option("--links/--no-links", help="Show lookup links for missing IDs."),
    ] = True,
    site: SiteOption = None,
) -> None:
    """
    Start an interactive search session.

    Statistics accumulate over every query until the session ends. In bulk
    mode, enter one identifier per line and finish the query with a blank
    line. Type 'exit' or 'quit' (or press Ctrl-D) to leave.
    """
    sites = _resolve_sites(site) if links else []
    mode = _default_mode(bulk)
    session = SearchSession(load_catalogue_or_exit(dataset))

    console.print(
        f"[bold]Session started[/bold] ({mode.value} mode, "
        f"{session.catalogue.size():,} IDs). Type 'exit' to leave."
    )

    while True:
        raw_input = _read_query(mode is SearchMode.BULK)
        if raw_input is None:
            break

        outcome = session.search(raw_input, mode)
        if not outcome.ok:
            console.print(f"[yellow]{outcome.error.message}.[/yellow] Try again.")
            continue
        print_outcome(outcome, sites)

    stats = session.current_stats()
    console.print(
        f"\n[bold]Session ended:[/bold] {stats.submitted_count:,} ID(s) checked"
    )
    console.print(_stats_table(stats))
