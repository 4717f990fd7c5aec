"""Container path to native path calculation and security only"""
import os
from pathlib import Path
from typing import Optional, Union

from tinystorage.core.container_path import ContainerPath
from tinystorage.core.exceptions import InvalidPathError

# Directory, alternate directory, path-list and volume separators
SEPARATOR_CHARS = frozenset(
    char for char in (os.sep, os.altsep, os.pathsep, ":") if char
)

RELATIVE_SEGMENTS = frozenset({".", ".."})


def canonicalize(path: Union[str, os.PathLike]) -> Optional[Path]:
    """
    Make a native path absolute and normalized

    Symlinks are not followed. Returns None when the path cannot be a
    native path at all.
    """
    try:
        text = os.fspath(path)
    except TypeError:
        return None

    if not text or "\x00" in text:
        return None

    try:
        return Path(os.path.abspath(text))
    except (ValueError, OSError):
        return None


def has_separator(value: str) -> bool:
    return any(char in SEPARATOR_CHARS for char in value)


class PathResolver:
    """Maps container paths and file names below a base directory"""

    def __init__(self, base_path: Union[str, os.PathLike]):
        """
        Initialize with the base directory of all containers

        Args:
            base_path: Base directory; canonicalized once

        Raises:
            TypeError: If base_path is None
            ValueError: If base_path is not a valid native path
        """
        if base_path is None:
            raise TypeError("base_path must not be None")

        resolved = canonicalize(base_path)
        if resolved is None:
            raise ValueError(f"base_path is not a valid path: {base_path!r}")

        self.base_path = resolved

    def resolve_container(self, path: ContainerPath) -> Path:
        """
        Calculate the native directory of a container

        Args:
            path: Container path

        Returns:
            Canonical directory inside the base path

        Raises:
            InvalidPathError: If a segment contains a separator or is a
                relative reference, or the result is not a valid path
        """
        if not isinstance(path, ContainerPath):
            raise TypeError(f"path must be a ContainerPath, got {type(path).__name__}")

        for segment in path:
            if has_separator(segment):
                raise InvalidPathError(
                    "The container path contains one or more invalid characters. "
                    "Path separator characters cannot be used on disk.",
                    path=str(path),
                )
            if segment in RELATIVE_SEGMENTS:
                raise InvalidPathError(
                    f"The container path contains the relative segment '{segment}'.",
                    path=str(path),
                )

        # Should not fail after the segment checks
        container_dir = canonicalize(self.base_path.joinpath(*path))
        if container_dir is None:
            raise InvalidPathError(
                "The container path does not map to a valid file system path. "
                "Verify that the base path combined with all segments is a valid path.",
                path=str(path),
            )

        if not self.is_within_base(container_dir):
            raise InvalidPathError(
                "The container path resolves outside the base directory.",
                path=str(path),
            )

        return container_dir

    def resolve_file(self, container_dir: Path, file_name: str) -> Path:
        """
        Calculate the native path of a file inside a container directory

        Raises:
            TypeError: If file_name is None or not a string
            ValueError: If file_name is empty, a relative reference or
                contains a separator
        """
        if file_name is None:
            raise TypeError("file_name must not be None")
        if not isinstance(file_name, str):
            raise TypeError(f"file_name must be a string, got {type(file_name).__name__}")
        if not file_name or file_name in RELATIVE_SEGMENTS:
            raise ValueError(f"Invalid file name: {file_name!r}")
        if has_separator(file_name):
            raise ValueError("The file name must not contain any path separator characters.")

        file_path = canonicalize(container_dir / file_name)
        if file_path is None:
            raise ValueError(
                "Appending the file name to the container path resulted in an invalid path."
            )

        return file_path

    def is_within_base(self, path: Path) -> bool:
        """Check that a canonical path lies inside the base directory"""
        try:
            path.relative_to(self.base_path)
            return True
        except ValueError:
            return False
