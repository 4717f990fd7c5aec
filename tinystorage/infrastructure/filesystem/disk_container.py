"""Disk-backed storage container"""
import asyncio
import contextlib
import os
import shutil
from pathlib import Path
from typing import TYPE_CHECKING, List

import aiofiles
import aiofiles.os
from aiofiles.threadpool.binary import AsyncBufferedIOBase, AsyncBufferedReader

from tinystorage.core.container import StorageContainer, bounded_operation
from tinystorage.core.container_path import ContainerPath
from tinystorage.infrastructure.filesystem.error_translation import translate_os_errors
from tinystorage.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from tinystorage.infrastructure.filesystem.disk_provider import DiskStorageProvider

logger = get_logger(__name__)


def _scan_names(directory: Path, directories: bool) -> List[str]:
    """Names of the direct children that are directories or regular files"""
    with os.scandir(directory) as entries:
        return sorted(
            entry.name
            for entry in entries
            if (entry.is_dir() if directories else entry.is_file())
        )


_scan_names_async = aiofiles.os.wrap(_scan_names)
_rmtree_async = aiofiles.os.wrap(shutil.rmtree)


async def _open_stream(file_path: Path, mode: str):
    """
    Open a file in the executor, closing it if the caller stops waiting

    A file the executor opens after a cancellation is closed here.
    """
    opening = asyncio.ensure_future(aiofiles.open(file_path, mode))
    try:
        return await asyncio.shield(opening)
    except asyncio.CancelledError:
        stream = None
        with contextlib.suppress(OSError):
            stream = await opening
        if stream is not None:
            await stream.close()
            logger.debug("abandoned_stream_closed", target=file_path)
        raise


class DiskStorageContainer(StorageContainer):
    """
    Container mapped onto a directory below the provider's base path.

    The native directory is resolved once, when the container is created;
    invalid container paths therefore fail at resolution time.
    """

    def __init__(self, provider: "DiskStorageProvider", path: ContainerPath):
        super().__init__(provider, path)
        self.native_path = provider.resolver.resolve_container(path)

    def _file_path(self, file_name: str) -> Path:
        return self.provider.resolver.resolve_file(self.native_path, file_name)

    @bounded_operation
    async def exists(self) -> bool:
        with translate_os_errors("exists", str(self.native_path)):
            return await aiofiles.os.path.isdir(self.native_path)

    @bounded_operation
    async def file_exists(self, file_name: str) -> bool:
        file_path = self._file_path(file_name)
        with translate_os_errors("file_exists", str(file_path)):
            return await aiofiles.os.path.isfile(file_path)

    @bounded_operation
    async def create_if_not_exists(self) -> None:
        with translate_os_errors("create_if_not_exists", str(self.native_path)):
            await aiofiles.os.makedirs(self.native_path, exist_ok=True)
        logger.debug("container_created", container=self.path)

    @bounded_operation
    async def list_files(self) -> List[str]:
        with translate_os_errors("list_files", str(self.native_path)):
            return await _scan_names_async(self.native_path, directories=False)

    @bounded_operation
    async def list_containers(self) -> List[str]:
        with translate_os_errors("list_containers", str(self.native_path)):
            return await _scan_names_async(self.native_path, directories=True)

    @bounded_operation
    async def open_read(self, file_name: str) -> AsyncBufferedReader:
        file_path = self._file_path(file_name)
        with translate_os_errors("open_read", str(file_path)):
            stream = await _open_stream(file_path, "rb")
        logger.debug("file_opened", container=self.path, file=file_name, mode="read")
        return stream

    @bounded_operation
    async def open_write(self, file_name: str, overwrite: bool) -> AsyncBufferedIOBase:
        file_path = self._file_path(file_name)
        mode = "wb" if overwrite else "xb"
        with translate_os_errors("open_write", str(file_path)):
            stream = await _open_stream(file_path, mode)
        logger.debug(
            "file_opened",
            container=self.path,
            file=file_name,
            mode="write",
            overwrite=overwrite,
        )
        return stream

    @bounded_operation
    async def delete(self) -> None:
        with translate_os_errors("delete", str(self.native_path), on_missing=None):
            await _rmtree_async(self.native_path)
            logger.debug("container_deleted", container=self.path)

    @bounded_operation
    async def delete_file(self, file_name: str) -> None:
        file_path = self._file_path(file_name)
        with translate_os_errors("delete_file", str(file_path), on_missing=None):
            await aiofiles.os.remove(file_path)
            logger.debug("file_deleted", container=self.path, file=file_name)
