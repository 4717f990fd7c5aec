"""TinyStorage command-line tool."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from tinystorage.cli import __version__
from tinystorage.cli.commands import container, file
from tinystorage.cli.utils.context import CLIContext
from tinystorage.cli.utils.output import OutputFormatter
from tinystorage.core.config import get_settings
from tinystorage.infrastructure.filesystem import DiskStorageProvider
from tinystorage.infrastructure.logging import bind_context, setup_logging

app = typer.Typer(
    name="tinystorage",
    help="TinyStorage CLI - browse and edit containers stored on disk",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    pretty_exceptions_enable=False,
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    """Display version and exit."""
    if value:
        console.print(f"TinyStorage CLI v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug output",
    ),
    output_format: str = typer.Option(
        "table",
        "--output",
        "-o",
        help="Output format: table, json, yaml",
    ),
    base_path: Optional[Path] = typer.Option(
        None,
        "--base-path",
        "-b",
        help="Base directory of the storage (default: TINYSTORAGE_STORAGE_BASE_PATH)",
    ),
):
    """
    TinyStorage CLI

    Manage containers and files of a disk storage provider.
    """
    settings = get_settings()
    if debug:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    setup_logging(settings)
    bind_context(command=ctx.invoked_subcommand)

    try:
        provider = DiskStorageProvider(base_path or settings.storage_base_path)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    ctx.obj = CLIContext(
        debug=debug,
        provider=provider,
        formatter=OutputFormatter(output_format, console),
        console=console,
    )

    if debug:
        console.print(f"[dim]Base path: {provider.base_path}[/dim]")


app.add_typer(container.app, name="container", help="Manage containers")
app.add_typer(file.app, name="file", help="Manage files")


if __name__ == "__main__":
    app()
