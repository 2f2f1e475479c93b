"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from suttaplex_csv.catalog import Catalog
from suttaplex_csv.models.config import AppConfig
from suttaplex_csv.models.results import RunOutcome
from suttaplex_csv.utils.formatting import (
    author_label,
    collection_label,
    format_duration,
)


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "ConfigurationError": [
            "• Check the values in your configuration file.",
            "• Run `suttaplex-csv init --force` to write a fresh default config.",
        ],
        "CatalogError": [
            "• The catalog file must be a JSON object with 'books' and 'authors'.",
            "• Omit --catalog to use the built-in collections.",
        ],
        "ExportError": [
            "• Check that the output directory exists and is writable.",
            "• Choose another directory with --output-dir.",
        ],
        "ClientConnectorError": [
            "• Could not reach SuttaCentral. Check your internet connection.",
            "• Run `suttaplex-csv diagnose` to test connectivity.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_catalog(catalog: Catalog, console: Console | None = None):
    """Lists the selectable collections and authors in catalog order."""
    console = console or Console()

    books = Table(title="Book Collections")
    books.add_column("Key", style="dim")
    books.add_column("Collection", style="cyan")
    books.add_column("Suttas", justify="right", style="green")
    for key, uids in catalog.books.items():
        books.add_row(key, collection_label(key), str(len(uids)))
    console.print(books)

    authors = Table(title="Authors")
    authors.add_column("Key", style="dim")
    authors.add_column("Author", style="cyan")
    for author in catalog.authors:
        authors.add_row(author, author_label(author))
    console.print(authors)


def print_config(config_path: Path, config_data: dict[str, Any]):
    """Displays the current configuration."""
    console = Console()
    content = ""
    for key, value in config_data.items():
        content += f"{key} = {value}\n"

    console.print(
        Panel(
            content.strip(),
            title=f"Configuration ([dim]{config_path}[/dim])",
            border_style="cyan",
        )
    )


def print_validation_table(config: AppConfig):
    """Displays a summary of the current settings."""
    console = Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("API Base URL:", config.api_base_url)
    table.add_row("Request Delay:", f"{config.request_delay_ms} ms")
    table.add_row("Request Timeout:", f"{config.request_timeout} s")
    table.add_row("Output Directory:", f"[dim]{config.output_dir}[/dim]")
    table.add_row("Catalog:", f"[dim]{config.catalog_path or '(built-in)'}[/dim]")

    console.print(
        Panel(
            table,
            title="[bold green]✓ Validated Settings[/bold green]",
            border_style="green",
        )
    )


def print_summary_panel(outcome: RunOutcome, console: Console | None = None):
    """Displays the final summary of a successful run."""
    console = console or Console()
    stats = outcome.stats

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=20)
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row("Collection:", collection_label(outcome.collection))
    stats_table.add_row("Author:", author_label(outcome.author))
    stats_table.add_row("", "")
    stats_table.add_row("✓ Available:", f"[bold green]{stats.authors_found}[/bold green]")
    stats_table.add_row("✗ Missing:", f"[yellow]{stats.authors_missing}[/yellow]")
    stats_table.add_row("Checked:", f"{stats.items_processed} of {stats.items_total}")
    stats_table.add_row(
        "Time Elapsed:", f"[blue]{format_duration(outcome.duration_s)}[/blue]"
    )
    if outcome.output_path:
        stats_table.add_row("Saved To:", f"[dim]{outcome.output_path}[/dim]")

    console.print(
        Panel(
            stats_table,
            title="📄 [bold]Report Summary[/bold]",
            border_style="green",
            expand=False,
        )
    )
