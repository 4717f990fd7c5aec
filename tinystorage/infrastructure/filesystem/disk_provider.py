"""Disk-backed storage provider"""
import os
from pathlib import Path
from typing import Optional, Union

from tinystorage.core.config import Settings, get_settings
from tinystorage.core.container_path import ContainerPath
from tinystorage.core.provider import StorageProvider
from tinystorage.infrastructure.filesystem.disk_container import DiskStorageContainer
from tinystorage.infrastructure.filesystem.path_resolver import PathResolver
from tinystorage.infrastructure.logging import get_logger

logger = get_logger(__name__)


class DiskStorageProvider(StorageProvider):
    """Provides containers stored as directories below a base path"""

    def __init__(self, base_path: Union[str, os.PathLike]):
        self.resolver = PathResolver(base_path)
        logger.debug("disk_provider_initialized", base_path=self.resolver.base_path)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "DiskStorageProvider":
        settings = settings or get_settings()
        return cls(settings.storage_base_path)

    @property
    def base_path(self) -> Path:
        return self.resolver.base_path

    def get_container(self, path: ContainerPath) -> DiskStorageContainer:
        if path is None:
            raise TypeError("path must not be None")
        return DiskStorageContainer(self, path)

    def __repr__(self) -> str:
        return f"DiskStorageProvider(base_path={str(self.base_path)!r})"
