"""Tests for native path resolution"""

import os
from pathlib import Path

import pytest

from tinystorage.core.container_path import ContainerPath
from tinystorage.core.exceptions import InvalidPathError
from tinystorage.infrastructure.filesystem.path_resolver import (
    SEPARATOR_CHARS,
    PathResolver,
    canonicalize,
)


class TestCanonicalize:
    """Test native path canonicalization"""

    def test_relative_path_becomes_absolute(self, tmp_path: Path, monkeypatch):
        """Test that relative paths resolve against the working directory"""
        monkeypatch.chdir(tmp_path)

        assert canonicalize("data") == Path(os.path.abspath(tmp_path)) / "data"

    def test_path_is_normalized(self, tmp_path: Path):
        """Test lexical normalization"""
        assert canonicalize(f"{tmp_path}/a/../b/./c") == Path(os.path.abspath(tmp_path)) / "b" / "c"

    @pytest.mark.parametrize("value", ["", "a\x00b", None, 42])
    def test_invalid_paths(self, value):
        """Test values that cannot be native paths"""
        assert canonicalize(value) is None


class TestPathResolver:
    """Test container and file resolution"""

    @pytest.fixture
    def resolver(self, tmp_path: Path) -> PathResolver:
        return PathResolver(tmp_path)

    def test_base_path_is_canonical(self, tmp_path: Path):
        """Test that the base path is made absolute"""
        resolver = PathResolver(f"{tmp_path}/sub/..")

        assert resolver.base_path == Path(os.path.abspath(tmp_path))

    def test_none_base_path(self):
        """Test that None is rejected"""
        with pytest.raises(TypeError):
            PathResolver(None)

    @pytest.mark.parametrize("value", ["", "bad\x00path"])
    def test_invalid_base_path(self, value):
        """Test that invalid base paths are rejected"""
        with pytest.raises(ValueError):
            PathResolver(value)

    def test_root_maps_to_base(self, resolver: PathResolver):
        """Test that the root container is the base directory"""
        assert resolver.resolve_container(ContainerPath.ROOT) == resolver.base_path

    def test_segments_map_to_subdirectories(self, resolver: PathResolver):
        """Test the container layout on disk"""
        path = ContainerPath(["a", "b", "c"])

        assert resolver.resolve_container(path) == resolver.base_path / "a" / "b" / "c"

    @pytest.mark.parametrize("separator", sorted(SEPARATOR_CHARS))
    def test_separator_in_segment_is_rejected(self, resolver: PathResolver, separator):
        """Test that separator injection is rejected"""
        with pytest.raises(InvalidPathError) as exc_info:
            resolver.resolve_container(ContainerPath(["ok", f"a{separator}b"]))

        assert exc_info.value.path == f"ok/a{separator}b"

    @pytest.mark.parametrize("separator", sorted(SEPARATOR_CHARS))
    def test_separator_only_segment_is_rejected(self, resolver: PathResolver, separator):
        """Test single-character separator segments"""
        with pytest.raises(InvalidPathError):
            resolver.resolve_container(ContainerPath(separator))

    @pytest.mark.parametrize("segment", [".", ".."])
    def test_relative_segment_is_rejected(self, resolver: PathResolver, segment):
        """Test that relative references cannot escape the base directory"""
        with pytest.raises(InvalidPathError):
            resolver.resolve_container(ContainerPath(["a", segment]))

    def test_dots_inside_segment_are_allowed(self, resolver: PathResolver):
        """Test that dots are fine when they are not the whole segment"""
        path = ContainerPath(["a..b", ".hidden"])

        assert resolver.resolve_container(path) == resolver.base_path / "a..b" / ".hidden"

    def test_invalid_native_segment_is_rejected(self, resolver: PathResolver):
        """Test segments that cannot be part of any native path"""
        with pytest.raises(InvalidPathError):
            resolver.resolve_container(ContainerPath("nul\x00byte"))

    def test_resolve_file(self, resolver: PathResolver):
        """Test file path calculation"""
        directory = resolver.resolve_container(ContainerPath("a"))

        assert resolver.resolve_file(directory, "file.txt") == directory / "file.txt"

    def test_resolve_file_none(self, resolver: PathResolver):
        """Test that a None file name is rejected"""
        with pytest.raises(TypeError):
            resolver.resolve_file(resolver.base_path, None)

    @pytest.mark.parametrize("file_name", ["", ".", "..", "a/b", "x\x00y"])
    def test_resolve_file_invalid(self, resolver: PathResolver, file_name):
        """Test that invalid file names are rejected"""
        with pytest.raises(ValueError):
            resolver.resolve_file(resolver.base_path, file_name)

    @pytest.mark.parametrize("separator", sorted(SEPARATOR_CHARS))
    def test_resolve_file_separator(self, resolver: PathResolver, separator):
        """Test that file names cannot contain separators"""
        with pytest.raises(ValueError):
            resolver.resolve_file(resolver.base_path, f"a{separator}b")

    def test_is_within_base(self, resolver: PathResolver):
        """Test the containment check"""
        assert resolver.is_within_base(resolver.base_path / "a")
        assert not resolver.is_within_base(resolver.base_path.parent)
