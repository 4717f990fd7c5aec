"""
TinyStorage - hierarchical container/file storage over pluggable backends.

Public API::

    from tinystorage import ContainerPath, DiskStorageProvider

    provider = DiskStorageProvider("./storage")
    container = provider.get_container(ContainerPath(["reports", "2024"]))
"""
from tinystorage.core import (
    ORDINAL,
    ORDINAL_IGNORE_CASE,
    ContainerPath,
    InvalidPathError,
    ItemNotFoundError,
    StorageContainer,
    StorageError,
    StorageProvider,
    StringComparer,
)
from tinystorage.infrastructure.filesystem import DiskStorageContainer, DiskStorageProvider

__version__ = "0.1.0"

__all__ = [
    "ContainerPath",
    "StorageContainer",
    "StorageProvider",
    "DiskStorageContainer",
    "DiskStorageProvider",
    "StorageError",
    "ItemNotFoundError",
    "InvalidPathError",
    "StringComparer",
    "ORDINAL",
    "ORDINAL_IGNORE_CASE",
]
