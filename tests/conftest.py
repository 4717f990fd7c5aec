"""Pytest configuration and fixtures"""

import logging
from pathlib import Path

import pytest
import structlog

from tinystorage.core.container_path import ContainerPath
from tinystorage.infrastructure.filesystem import DiskStorageContainer, DiskStorageProvider
from tinystorage.infrastructure.logging import clear_context


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging configuration done by a test or a CLI run"""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
    clear_context()


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """Base directory for a disk provider; not created up front"""
    return tmp_path / "storage"


@pytest.fixture
def provider(storage_dir: Path) -> DiskStorageProvider:
    """Create a disk provider rooted in a temporary directory"""
    return DiskStorageProvider(str(storage_dir))


@pytest.fixture
def container(provider: DiskStorageProvider) -> DiskStorageContainer:
    """A container two levels below the root that does not exist yet"""
    return provider.get_container(ContainerPath(["test", "container"]))


async def _write_text(container, file_name: str, text: str, overwrite: bool = True) -> None:
    stream = await container.open_write(file_name, overwrite)
    try:
        await stream.write(text.encode("utf-8"))
    finally:
        await stream.close()


async def _read_text(container, file_name: str) -> str:
    stream = await container.open_read(file_name)
    try:
        return (await stream.read()).decode("utf-8")
    finally:
        await stream.close()


@pytest.fixture
def write_text():
    """Write a whole text file through a container stream"""
    return _write_text


@pytest.fixture
def read_text():
    """Read a whole text file through a container stream"""
    return _read_text
