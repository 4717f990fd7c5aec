"""Filesystem infrastructure module."""
from .disk_container import DiskStorageContainer
from .disk_provider import DiskStorageProvider
from .error_translation import translate_os_errors
from .path_resolver import PathResolver, canonicalize

__all__ = [
    'DiskStorageContainer',
    'DiskStorageProvider',
    'PathResolver',
    'canonicalize',
    'translate_os_errors',
]
