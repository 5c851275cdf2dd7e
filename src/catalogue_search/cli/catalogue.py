"""Dataset inspection command and shared catalogue loading for the CLI."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from catalogue_search.catalogue import Catalogue, load_catalogue
from catalogue_search.core import CatalogueSearchError

console = Console()

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

DatasetOption = Annotated[
    Optional[Path],
    typer.Option(
        "--dataset",
        "-d",
        help="Path to the dataset JSON file. Defaults to DATASET_PATH.",
    ),
]


def load_catalogue_or_exit(dataset: Optional[Path]) -> Catalogue:
    """Load the catalogue, printing the error and exiting with code 1 on failure."""
    try:
        with console.status("Loading dataset..."):
            return load_catalogue(dataset)
    except CatalogueSearchError as e:
        console.print(f"[red]Failed to load dataset:[/red] {e.message}")
        if e.details:
            console.print(f"  [dim]{e.details}[/dim]")
        console.print(
            "  [dim italic]Hint: Pass --dataset or set DATASET_PATH to a JSON file "
            "with ids, total_count and generated_at.[/dim italic]"
        )
        raise typer.Exit(code=1) from None


def info(dataset: DatasetOption = None) -> None:
    """
    Show the size and age of the reference dataset.

    Examples:

        catalogue-search info

        catalogue-search info -d exports/id_list.json
    """
    catalogue = load_catalogue_or_exit(dataset)
    summary = catalogue.info()

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("Total", Text(f"{summary.total_count:,}", style="cyan"))
    unique_style = "green" if summary.is_consistent else "yellow"
    table.add_row("Unique IDs", Text(f"{summary.unique_count:,}", style=unique_style))
    table.add_row("Generated", Text(summary.generated_at.strftime(DATETIME_FORMAT)))

    console.print(Panel(table, title="[bold]Dataset[/bold]", expand=False))

    if not summary.is_consistent:
        console.print(
            "[yellow]Declared total does not match the number of distinct IDs.[/yellow]"
        )
