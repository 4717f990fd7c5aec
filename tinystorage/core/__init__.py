"""Storage abstractions: paths, containers, providers and errors"""
from .container import StorageContainer, bounded_operation
from .container_path import ContainerPath
from .exceptions import InvalidPathError, ItemNotFoundError, StorageError
from .provider import StorageProvider
from .string_comparer import ORDINAL, ORDINAL_IGNORE_CASE, StringComparer

__all__ = [
    'ContainerPath',
    'StorageContainer',
    'StorageProvider',
    'StorageError',
    'ItemNotFoundError',
    'InvalidPathError',
    'StringComparer',
    'ORDINAL',
    'ORDINAL_IGNORE_CASE',
    'bounded_operation',
]
