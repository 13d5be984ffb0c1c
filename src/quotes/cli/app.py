"""
Main CLI application entry point.

This module contains the Typer application and command handlers for the
``quotes`` command.
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from quotes import VERSION
from quotes.api import QuotesError, create_user_friendly_message
from quotes.application import load_settings, start

# Create the main Typer application
app = typer.Typer(
    name="quotes",
    help="Quotes - quote of the day from the command line",
    add_completion=False,
    rich_markup_mode="rich",
)

# Rich console for output
console = Console()


def setup_cli_logging() -> None:
    """Send ``quotes`` log records to stderr through rich, once per process."""
    package_logger = logging.getLogger("quotes")
    if any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold blue]Quotes[/bold blue] version [green]{VERSION}[/green]")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Quotes - quote of the day from the command line.
    """
    setup_cli_logging()


def _fail(error: QuotesError) -> None:
    console.print(f"[red]Error:[/red] {create_user_friendly_message(error)}")
    console.print(f"[dim]{error}[/dim]")
    raise typer.Exit(1)


@app.command("today")
def today_command(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only quotes from this category"),
    show_author: bool = typer.Option(True, "--author/--no-author", help="Show the quote's author"),
) -> None:
    """Show today's quote."""
    try:
        with start() as client:
            quote = client.quote_of_the_day(category)
    except QuotesError as e:
        _fail(e)
        return

    console.print(f"[italic]{quote.quote}[/italic]")
    if show_author and quote.author:
        console.print(f"[dim]- {quote.author}[/dim]")


@app.command("categories")
def categories_command(
    describe: bool = typer.Option(False, "--describe", "-d", help="Show category descriptions"),
) -> None:
    """List the available quote categories."""
    try:
        with start() as client:
            descriptions = client.category_descriptions()
    except QuotesError as e:
        _fail(e)
        return

    if not describe:
        for category in descriptions:
            console.print(category)
        return

    table = Table(title="Categories", show_header=True, header_style="bold magenta")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Description", style="green")
    for category, description in descriptions.items():
        table.add_row(category, str(description))
    console.print(table)


@app.command("config")
def config_command(
    show: bool = typer.Option(False, "--show", "-s", help="Show current configuration"),
) -> None:
    """Show the effective configuration."""
    if not show:
        console.print("[yellow]Use one of the following options:[/yellow]")
        console.print("  --show         Show current configuration")
        return

    try:
        settings = load_settings()
        resolved = settings.resolve()
    except QuotesError as e:
        _fail(e)
        return

    table = Table(title="Current Configuration", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Configured", style="yellow")
    table.add_column("Effective", style="green")

    configured = settings.to_dict()
    table.add_row("service_url", str(configured["service_url"]), resolved.service_url)
    table.add_row("token", str(configured["token"]), "Set" if resolved.token else "Not set")
    table.add_row("timeout", str(settings.timeout), str(resolved.timeout))
    table.add_row("log_level", settings.log_level, settings.effective_log_level)
    table.add_row("debug", str(settings.debug), str(settings.debug))

    console.print(table)


def main() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
