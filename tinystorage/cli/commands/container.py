"""Container management commands."""

import typer
from rich.prompt import Confirm

from tinystorage.cli.utils.context import CLIContext

app = typer.Typer(help="Manage containers")


def _display(path_text: str) -> str:
    return path_text.strip("/") or "/"


@app.command("create")
def create_container(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Container path (a/b/c)"),
):
    """
    Create a container and any missing parent containers.

    Example:
        tinystorage container create reports/2024
    """
    cli_ctx: CLIContext = ctx.obj

    with cli_ctx.reporting_errors("create container"):
        container = cli_ctx.get_container(path)
        cli_ctx.run(container.create_if_not_exists())

    cli_ctx.formatter.print_success(f"Container '{_display(path)}' created")


@app.command("list")
def list_container(
    ctx: typer.Context,
    path: str = typer.Argument("", help="Container path; root when omitted"),
):
    """
    List the child containers and files of a container.

    Example:
        tinystorage container list reports
    """
    cli_ctx: CLIContext = ctx.obj

    async def collect(container):
        containers = await container.list_containers()
        files = await container.list_files()
        return containers, files

    with cli_ctx.reporting_errors("list container"):
        container = cli_ctx.get_container(path)
        containers, files = cli_ctx.run(collect(container))

    items = [{"name": name, "type": "container"} for name in containers]
    items += [{"name": name, "type": "file"} for name in files]

    cli_ctx.formatter.print_list(
        items,
        columns=["name", "type"],
        title=f"Container: {_display(path)}",
    )


@app.command("exists")
def container_exists(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Container path"),
):
    """
    Check whether a container exists.

    Example:
        tinystorage container exists reports/2024
    """
    cli_ctx: CLIContext = ctx.obj

    with cli_ctx.reporting_errors("check container"):
        container = cli_ctx.get_container(path)
        exists = cli_ctx.run(container.exists())

    cli_ctx.formatter.print_detail({"path": _display(path), "exists": exists})


@app.command("delete")
def delete_container(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Container path"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """
    Delete a container and everything inside it.

    Example:
        tinystorage container delete reports/2024 --force
    """
    cli_ctx: CLIContext = ctx.obj

    if not force:
        if not Confirm.ask(f"Delete container '{_display(path)}' and all its content?"):
            cli_ctx.formatter.print_warning("Deletion cancelled")
            raise typer.Exit(0)

    with cli_ctx.reporting_errors("delete container"):
        container = cli_ctx.get_container(path)
        cli_ctx.run(container.delete())

    cli_ctx.formatter.print_success(f"Container '{_display(path)}' deleted")
