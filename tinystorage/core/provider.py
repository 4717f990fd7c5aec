"""Abstract storage provider capability"""
from abc import ABC, abstractmethod
from typing import Callable

from .container import StorageContainer
from .container_path import ContainerPath


class StorageProvider(ABC):
    """Resolves container paths into containers of one storage medium"""

    @abstractmethod
    def get_container(self, path: ContainerPath) -> StorageContainer:
        """
        Resolve a path to a container bound to this provider

        Resolution performs no I/O and does not require the container to exist.

        Raises:
            InvalidPathError: If the backend cannot address the path
        """

    def select_container(
        self, selector: Callable[[ContainerPath], ContainerPath]
    ) -> StorageContainer:
        """Resolve the path built by ``selector`` from the root path"""
        if selector is None:
            raise TypeError("selector must not be None")
        return self.get_container(selector(ContainerPath.ROOT))

    @property
    def root_container(self) -> StorageContainer:
        return self.get_container(ContainerPath.ROOT)
