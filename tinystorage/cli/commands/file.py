"""File management commands."""

from pathlib import Path
from typing import Optional

import typer

from tinystorage.cli.utils.context import CLIContext
from tinystorage.core.container import StorageContainer

app = typer.Typer(help="Manage files")


async def read_file(container: StorageContainer, name: str) -> bytes:
    stream = await container.open_read(name)
    try:
        return await stream.read()
    finally:
        await stream.close()


async def write_file(
    container: StorageContainer, name: str, data: bytes, overwrite: bool
) -> None:
    stream = await container.open_write(name, overwrite)
    try:
        await stream.write(data)
    finally:
        await stream.close()


@app.command("read")
def read_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Container path"),
    name: str = typer.Argument(..., help="File name"),
    output_file: Optional[Path] = typer.Option(
        None, "--output-file", "-O", help="Write the content to this local file"
    ),
):
    """
    Print the content of a file.

    Example:
        tinystorage file read reports/2024 summary.txt
    """
    cli_ctx: CLIContext = ctx.obj

    with cli_ctx.reporting_errors("read file"):
        container = cli_ctx.get_container(path)
        data = cli_ctx.run(read_file(container, name))

    if output_file:
        output_file.write_bytes(data)
        cli_ctx.formatter.print_success(f"Wrote {len(data)} bytes to {output_file}")
    else:
        typer.echo(data, nl=False)


@app.command("write")
def write_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Container path"),
    name: str = typer.Argument(..., help="File name"),
    source: Optional[Path] = typer.Option(
        None, "--source", "-s", exists=True, dir_okay=False, help="Local file to upload"
    ),
    content: Optional[str] = typer.Option(
        None, "--content", help="Text content to write (UTF-8)"
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Replace the file if it already exists"
    ),
):
    """
    Write a file from a local file, a text argument or standard input.

    Example:
        tinystorage file write reports/2024 summary.txt --source ./summary.txt
        echo hello | tinystorage file write reports/2024 hello.txt --overwrite
    """
    cli_ctx: CLIContext = ctx.obj

    if source is not None and content is not None:
        cli_ctx.formatter.print_error("Use either --source or --content, not both")
        raise typer.Exit(1)

    if source is not None:
        data = source.read_bytes()
    elif content is not None:
        data = content.encode("utf-8")
    else:
        data = typer.get_binary_stream("stdin").read()

    with cli_ctx.reporting_errors("write file"):
        container = cli_ctx.get_container(path)
        cli_ctx.run(write_file(container, name, data, overwrite))

    cli_ctx.formatter.print_success(f"Wrote {len(data)} bytes to '{name}'")


@app.command("exists")
def file_exists_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Container path"),
    name: str = typer.Argument(..., help="File name"),
):
    """
    Check whether a file exists.

    Example:
        tinystorage file exists reports/2024 summary.txt
    """
    cli_ctx: CLIContext = ctx.obj

    with cli_ctx.reporting_errors("check file"):
        container = cli_ctx.get_container(path)
        exists = cli_ctx.run(container.file_exists(name))

    cli_ctx.formatter.print_detail({"container": str(container.path) or "/", "file": name, "exists": exists})


@app.command("delete")
def delete_command(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Container path"),
    name: str = typer.Argument(..., help="File name"),
):
    """
    Delete a file. Succeeds when the file does not exist.

    Example:
        tinystorage file delete reports/2024 summary.txt
    """
    cli_ctx: CLIContext = ctx.obj

    with cli_ctx.reporting_errors("delete file"):
        container = cli_ctx.get_container(path)
        cli_ctx.run(container.delete_file(name))

    cli_ctx.formatter.print_success(f"File '{name}' deleted")
