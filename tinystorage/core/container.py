"""Abstract storage container capability"""
import asyncio
import functools
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Awaitable, Callable, List, Optional, TypeVar

from .container_path import ContainerPath

if TYPE_CHECKING:
    from .provider import StorageProvider

T = TypeVar("T")


def bounded_operation(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """
    Apply the optional ``timeout`` keyword of a container operation.

    The operation stops waiting once the timeout elapses and raises
    asyncio.TimeoutError. Native side effects already performed are not
    rolled back.
    """

    @functools.wraps(func)
    async def wrapper(self, *args: Any, timeout: Optional[float] = None, **kwargs: Any) -> T:
        if timeout is None:
            return await func(self, *args, **kwargs)
        return await asyncio.wait_for(func(self, *args, **kwargs), timeout)

    return wrapper


class StorageContainer(ABC):
    """
    A container of files and child containers, identified by a ContainerPath.

    Containers are stateless handles: every operation queries the backing
    medium, nothing is cached. Every operation accepts a keyword-only
    ``timeout`` in seconds.
    """

    def __init__(self, provider: "StorageProvider", path: ContainerPath):
        if provider is None:
            raise TypeError("provider must not be None")
        if not isinstance(path, ContainerPath):
            raise TypeError(f"path must be a ContainerPath, got {type(path).__name__}")
        self._provider = provider
        self._path = path

    @property
    def provider(self) -> "StorageProvider":
        return self._provider

    @property
    def path(self) -> ContainerPath:
        return self._path

    @abstractmethod
    async def exists(self, *, timeout: Optional[float] = None) -> bool:
        """Check whether the container exists"""

    @abstractmethod
    async def file_exists(self, file_name: str, *, timeout: Optional[float] = None) -> bool:
        """Check whether a file exists; False when the container is missing"""

    @abstractmethod
    async def create_if_not_exists(self, *, timeout: Optional[float] = None) -> None:
        """Create the container and any missing ancestors"""

    @abstractmethod
    async def list_files(self, *, timeout: Optional[float] = None) -> List[str]:
        """
        List the names of files directly inside the container

        Raises:
            ItemNotFoundError: If the container does not exist
            StorageError: On any other medium failure
        """

    @abstractmethod
    async def list_containers(self, *, timeout: Optional[float] = None) -> List[str]:
        """
        List the names of containers directly inside the container

        Raises:
            ItemNotFoundError: If the container does not exist
            StorageError: On any other medium failure
        """

    @abstractmethod
    async def open_read(self, file_name: str, *, timeout: Optional[float] = None) -> Any:
        """
        Open a file for reading

        The caller owns the returned stream and must close it.

        Raises:
            ItemNotFoundError: If the file or the container does not exist
        """

    @abstractmethod
    async def open_write(
        self, file_name: str, overwrite: bool, *, timeout: Optional[float] = None
    ) -> Any:
        """
        Open a file for writing, creating or truncating it

        The caller owns the returned stream and must close it.

        Raises:
            ItemNotFoundError: If the container does not exist
            StorageError: If overwrite is False and the file already exists
        """

    @abstractmethod
    async def delete(self, *, timeout: Optional[float] = None) -> None:
        """Delete the container and everything inside it; no-op when missing"""

    @abstractmethod
    async def delete_file(self, file_name: str, *, timeout: Optional[float] = None) -> None:
        """Delete a single file; no-op when the file or container is missing"""

    def append(self, segment: str) -> "StorageContainer":
        """Resolve a child container through the owning provider"""
        return self._provider.get_container(self._path.append(segment))

    def __truediv__(self, segment: str) -> "StorageContainer":
        return self.append(segment)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self._path)!r})"
