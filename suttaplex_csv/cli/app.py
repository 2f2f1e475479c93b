"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging
import os
from collections.abc import Callable
from pathlib import Path

import aiohttp
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Prompt

from suttaplex_csv import __version__
from suttaplex_csv.api.client import SuttaCentralClient
from suttaplex_csv.api.pacer import FixedPacer
from suttaplex_csv.catalog import load_catalog
from suttaplex_csv.core.report_builder import (
    SELECT_PROMPT_MESSAGE,
    TranslationReportBuilder,
)
from suttaplex_csv.exceptions import SuttaplexCsvError
from suttaplex_csv.models.results import RunOutcome
from suttaplex_csv.storage.config_manager import ConfigManager
from suttaplex_csv.storage.exporter import CsvExporter
from suttaplex_csv.utils.formatting import author_label, collection_label

from .formatters import (
    print_catalog,
    print_config,
    print_summary_panel,
    print_validation_table,
)
from .progress_manager import ProgressManager

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("suttaplex_csv")

app = typer.Typer(
    name="suttaplex-csv",
    help=(
        "Check which suttas of a collection have a translation by an author and"
        " save the answer as CSV."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "suttaplex-csv"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
):
    """SuttaCentral translation report CLI"""
    if version:
        console.print(f"[bold]suttaplex-csv[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("suttaplex_csv").setLevel(log_level)

    if show_config:
        try:
            config = ConfigManager(CONFIG_FILE).load_config()
        except SuttaplexCsvError as e:
            console.print(f"[red]✗ {escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e
        print_config(CONFIG_FILE, config.model_dump(exclude={"config_path"}))
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing configuration file."
    ),
):
    """Write a configuration file with default settings."""
    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    try:
        ConfigManager(CONFIG_FILE).save_new_config()
    except SuttaplexCsvError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    console.print(f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]")


@app.command(name="list")
def list_command(
    catalog_path: Path | None = typer.Option(
        None, "--catalog", help="JSON catalog to use instead of the built-in one."
    ),
):
    """List the book collections and authors that can be selected."""
    try:
        config = ConfigManager(CONFIG_FILE).load_config(
            {"catalog_path": str(catalog_path)} if catalog_path else None
        )
        catalog = load_catalog(Path(config.catalog_path) if config.catalog_path else None)
    except SuttaplexCsvError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    print_catalog(catalog, console)


def _prompt_selection(
    label: str, keys: list[str], current: str, to_label: Callable[[str], str]
) -> str:
    """Asks for one of ``keys`` by its display label and returns the key."""
    if current:
        return current
    options = {to_label(key): key for key in keys}
    # Labels that collide cannot be mapped back, so offer the raw keys instead.
    if len(options) != len(keys):
        options = {key: key for key in keys}
    answer = Prompt.ask(label, choices=list(options), console=console)
    return options[answer]


@app.command(name="build")
def build_command(
    collection: str = typer.Option(
        "", "--collection", "-c", help="Book collection key, e.g. 'mn'."
    ),
    author: str = typer.Option(
        "", "--author", "-a", help="Translator identifier, e.g. 'sujato'."
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Directory for the CSV file."
    ),
    delay_ms: int | None = typer.Option(
        None, "--delay-ms", help="Pause between requests in milliseconds (default 100)."
    ),
    catalog_path: Path | None = typer.Option(
        None, "--catalog", help="JSON catalog to use instead of the built-in one."
    ),
    interactive: bool = typer.Option(
        False, "--interactive", "-i", help="Prompt for a missing collection or author."
    ),
):
    """Build the translation availability CSV for one collection and author."""
    cli_options = {
        key: value
        for key, value in {
            "output_dir": str(output_dir) if output_dir else None,
            "request_delay_ms": delay_ms,
            "catalog_path": str(catalog_path) if catalog_path else None,
        }.items()
        if value is not None
    }

    try:
        config = ConfigManager(CONFIG_FILE).load_config(cli_options)
        catalog = load_catalog(Path(config.catalog_path) if config.catalog_path else None)
    except SuttaplexCsvError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        raise typer.Exit(code=1) from e

    view = ProgressManager(console)
    if interactive:
        view.set_status(SELECT_PROMPT_MESSAGE)
        collection = _prompt_selection(
            "Book collection", catalog.collections, collection, collection_label
        )
        author = _prompt_selection("Author", catalog.authors, author, author_label)

    async def _build_async() -> RunOutcome:
        client = SuttaCentralClient(config.api_base_url, config.request_timeout)
        try:
            async with view:
                builder = TranslationReportBuilder(
                    catalog,
                    client,
                    view,
                    CsvExporter(Path(config.output_dir)).save,
                    FixedPacer(config.request_delay_ms),
                )
                return await builder.build(collection, author)
        finally:
            await client.close()

    outcome = asyncio.run(_build_async())
    if not outcome.succeeded:
        raise typer.Exit(code=1)
    log.debug(
        f"Report for {collection_label(outcome.collection)} / "
        f"{author_label(outcome.author)} finished in {outcome.duration_s:.1f}s"
    )
    print_summary_panel(outcome, console)


@app.command()
def validate():
    """Validate the current configuration."""
    try:
        config = ConfigManager(CONFIG_FILE).load_config()
        if config.catalog_path:
            load_catalog(Path(config.catalog_path))
        print_validation_table(config)
    except SuttaplexCsvError as e:
        console.print(f"[red]✗ Configuration is invalid: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def diagnose():
    """Diagnose common configuration and connectivity issues."""
    console.print("\n[bold cyan]Running diagnostics...[/bold cyan]\n")
    issues_found = False
    if CONFIG_FILE.is_file():
        console.print(f"[green]✓[/] Config file exists at: [dim]{CONFIG_FILE}[/dim]")
    else:
        console.print(
            "[yellow]○ No config file found.[/] Using defaults; run "
            "[cyan]suttaplex-csv init[/cyan] to create one."
        )
    try:
        config = ConfigManager(CONFIG_FILE).load_config()
        console.print("[green]✓[/] Configuration is valid and can be loaded.")
    except SuttaplexCsvError as e:
        console.print(f"[red]✗ Configuration validation failed: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    console.print("\n[dim]Testing connectivity to SuttaCentral...[/dim]")

    async def test_connection() -> bool:
        url = f"{config.api_base_url}/suttaplex/mn1"
        try:
            timeout = aiohttp.ClientTimeout(total=10)
            async with (
                aiohttp.ClientSession(timeout=timeout) as session,
                session.get(url) as resp,
            ):
                if resp.status == 200:
                    console.print("[green]✓[/] Successfully connected to SuttaCentral.")
                    return True
                console.print(
                    f"[red]✗ Could not reach the API (Status: {resp.status}).[/red]"
                )
                return False
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            console.print(f"[red]✗ Connection test failed: {escape(str(e))}[/red]")
            return False

    if not asyncio.run(test_connection()):
        issues_found = True
    console.print()
    if not issues_found:
        console.print(
            "[bold green]✓ All checks passed! Your setup looks good.[/bold green]\n"
        )
    else:
        console.print(
            "[bold red]✗ Some issues were found. "
            "Please review the messages above.[/bold red]\n"
        )
        raise typer.Exit(code=1)
