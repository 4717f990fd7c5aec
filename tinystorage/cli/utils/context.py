"""CLI context management."""

import asyncio
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Coroutine, Iterator, TypeVar

import typer
from rich.console import Console

from tinystorage.cli.utils.output import OutputFormatter
from tinystorage.core.container import StorageContainer
from tinystorage.core.container_path import ContainerPath
from tinystorage.core.exceptions import StorageError
from tinystorage.core.provider import StorageProvider
from tinystorage.infrastructure.logging import bind_context

T = TypeVar("T")


def parse_container_path(text: str) -> ContainerPath:
    """
    Parse a '/'-separated container path given on the command line.

    Empty pieces are ignored, so '', '/' and 'a//b/' are valid.
    """
    return ContainerPath([piece for piece in text.split("/") if piece])


@dataclass
class CLIContext:
    """Context object passed through CLI commands."""

    debug: bool
    provider: StorageProvider
    formatter: OutputFormatter
    console: Console

    def get_container(self, path_text: str) -> StorageContainer:
        """
        Resolve a command-line container path.

        Raises:
            ValueError: If a piece of the path is whitespace
            InvalidPathError: If the provider cannot address the path
        """
        path = parse_container_path(path_text)
        bind_context(container=path)
        return self.provider.get_container(path)

    def run(self, operation: Coroutine[Any, Any, T]) -> T:
        """Run a storage coroutine to completion."""
        return asyncio.run(operation)

    @contextmanager
    def reporting_errors(self, action: str) -> Iterator[None]:
        """
        Report storage and argument errors and exit with status 1.

        Args:
            action: Description used as the message prefix
        """
        try:
            yield
        except StorageError as e:
            self.formatter.print_error(f"Failed to {action}: {e}")
            if self.debug and e.__cause__ is not None:
                self.console.print(f"[dim]Caused by: {e.__cause__!r}[/dim]")
            raise typer.Exit(1)
        except ValueError as e:
            self.formatter.print_error(f"Invalid argument: {e}")
            raise typer.Exit(1)
