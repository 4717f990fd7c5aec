"""Tests for the disk storage provider"""

import os
from pathlib import Path

import pytest

from tinystorage.core.config import Settings
from tinystorage.core.container_path import ContainerPath
from tinystorage.core.exceptions import InvalidPathError
from tinystorage.infrastructure.filesystem import DiskStorageContainer, DiskStorageProvider
from tinystorage.infrastructure.filesystem.path_resolver import SEPARATOR_CHARS


class TestDiskStorageProviderConstruction:
    """Test provider construction"""

    def test_base_path_is_canonicalized(self, tmp_path: Path):
        """Test that the base path is stored absolute and normalized"""
        provider = DiskStorageProvider(f"{tmp_path}/storage/../storage")

        assert provider.base_path == Path(os.path.abspath(tmp_path)) / "storage"

    def test_relative_base_path(self, tmp_path: Path, monkeypatch):
        """Test that relative base paths resolve against the working directory"""
        monkeypatch.chdir(tmp_path)

        provider = DiskStorageProvider("storage")

        assert provider.base_path == Path(os.path.abspath(tmp_path)) / "storage"

    def test_accepts_path_objects(self, storage_dir: Path):
        """Test construction from a pathlib.Path"""
        assert DiskStorageProvider(storage_dir).base_path == Path(os.path.abspath(storage_dir))

    def test_none_base_path(self):
        """Test that None is rejected"""
        with pytest.raises(TypeError):
            DiskStorageProvider(None)

    @pytest.mark.parametrize("base_path", ["", "in\x00valid"])
    def test_invalid_base_path(self, base_path):
        """Test that invalid base paths are rejected"""
        with pytest.raises(ValueError):
            DiskStorageProvider(base_path)

    def test_construction_performs_no_io(self, storage_dir: Path):
        """Test that the base directory is not created eagerly"""
        DiskStorageProvider(storage_dir)

        assert not storage_dir.exists()

    def test_from_settings(self, storage_dir: Path):
        """Test building the provider from settings"""
        provider = DiskStorageProvider.from_settings(Settings(storage_base_path=storage_dir))

        assert provider.base_path == Path(os.path.abspath(storage_dir))


class TestGetContainer:
    """Test container resolution"""

    def test_returns_bound_container(self, provider: DiskStorageProvider):
        """Test that the container is bound to the provider and path"""
        path = ContainerPath(["a", "b"])

        container = provider.get_container(path)

        assert isinstance(container, DiskStorageContainer)
        assert container.provider is provider
        assert container.path == path
        assert container.native_path == provider.base_path / "a" / "b"

    def test_resolution_performs_no_io(self, provider: DiskStorageProvider, storage_dir: Path):
        """Test that resolving a container does not create it"""
        provider.get_container(ContainerPath(["a", "b"]))

        assert not storage_dir.exists()

    def test_no_caching(self, provider: DiskStorageProvider):
        """Test that each call yields a new container with equal identity"""
        first = provider.get_container(ContainerPath("a"))
        second = provider.get_container(ContainerPath("a"))

        assert first is not second
        assert first.path == second.path

    def test_none_path(self, provider: DiskStorageProvider):
        """Test that None is rejected"""
        with pytest.raises(TypeError):
            provider.get_container(None)

    def test_non_path_argument(self, provider: DiskStorageProvider):
        """Test that plain strings are not accepted as paths"""
        with pytest.raises(TypeError):
            provider.get_container("a/b")

    @pytest.mark.parametrize("separator", sorted(SEPARATOR_CHARS))
    def test_invalid_container_path(self, provider: DiskStorageProvider, separator):
        """Test that paths with native separators fail with InvalidPathError"""
        with pytest.raises(InvalidPathError):
            provider.get_container(ContainerPath(separator))

    def test_root_container(self, provider: DiskStorageProvider):
        """Test the root container shortcut"""
        root = provider.root_container

        assert root.path.is_root
        assert root.native_path == provider.base_path

    def test_select_container(self, provider: DiskStorageProvider):
        """Test resolving a path built from the root path"""
        container = provider.select_container(lambda root: root / "a" / "b")

        assert container.path == ContainerPath(["a", "b"])

    def test_select_container_receives_root(self, provider: DiskStorageProvider):
        """Test that the selector is called with the root path"""
        received = []

        provider.select_container(lambda root: received.append(root) or root)

        assert received == [ContainerPath.ROOT]

    def test_select_container_none(self, provider: DiskStorageProvider):
        """Test that a missing selector is rejected"""
        with pytest.raises(TypeError):
            provider.select_container(None)

    def test_container_append(self, provider: DiskStorageProvider):
        """Test resolving child containers from a container"""
        container = provider.get_container(ContainerPath("a"))

        child = container.append("b")
        grandchild = container / "b" / "c"

        assert child.path == ContainerPath(["a", "b"])
        assert grandchild.path == ContainerPath(["a", "b", "c"])
        assert grandchild.provider is provider

    def test_container_append_invalid(self, provider: DiskStorageProvider):
        """Test that appending goes through provider validation"""
        container = provider.get_container(ContainerPath("a"))

        with pytest.raises(InvalidPathError):
            container / ".."

    def test_container_string_forms(self, provider: DiskStorageProvider):
        """Test container rendering"""
        container = provider.get_container(ContainerPath(["a", "b"]))

        assert str(container) == "a/b"
        assert repr(container) == "DiskStorageContainer(path='a/b')"
