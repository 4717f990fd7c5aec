"""Immutable hierarchical path identifying a storage container"""
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .string_comparer import ORDINAL, StringComparer

Segments = Union[str, Iterable[str]]


def _collect_segments(segments: Segments, argument: str) -> Tuple[str, ...]:
    """Normalize a single segment or an iterable of segments into a validated tuple"""
    if segments is None:
        raise TypeError(f"{argument} must not be None")

    if isinstance(segments, str):
        collected = (segments,)
    else:
        collected = tuple(segments)

    for segment in collected:
        if segment is None:
            raise TypeError(f"{argument} must not contain None")
        if not isinstance(segment, str):
            raise TypeError(
                f"{argument} must contain strings, got {type(segment).__name__}"
            )
        if not segment.strip():
            raise ValueError(
                "A ContainerPath cannot be initialized with a segment that is "
                "empty or whitespace."
            )

    return collected


class ContainerPath:
    """
    Ordered sequence of segments identifying a storage container.

    The root container is identified by the path with no segments. Segments
    may hold any character except that they cannot be empty or whitespace;
    backends decide which characters they can actually map.

    Equality and hashing default to exact (ordinal) string comparison. Use
    ``equals`` and ``get_hash`` with another ``StringComparer`` for other
    policies, e.g. case-insensitive lookups.
    """

    __slots__ = ("_segments",)

    ROOT: "ContainerPath"

    def __init__(self, segments: Segments = ()):
        object.__setattr__(self, "_segments", _collect_segments(segments, "segments"))

    def __setattr__(self, name, value):
        raise AttributeError("ContainerPath is immutable")

    def __delattr__(self, name):
        raise AttributeError("ContainerPath is immutable")

    def __reduce__(self):
        return (ContainerPath, (self._segments,))

    @property
    def segments(self) -> List[str]:
        """Copy of the segments making up this path"""
        return list(self._segments)

    @property
    def is_root(self) -> bool:
        return len(self._segments) == 0

    @property
    def name(self) -> Optional[str]:
        """Last segment, or None for the root path"""
        return self._segments[-1] if self._segments else None

    def get_parent(self) -> Optional["ContainerPath"]:
        """
        Get the path of the parent container

        Returns:
            None for the root path, the root path for single-segment paths,
            otherwise a new path without the last segment
        """
        if self.is_root:
            return None
        if len(self._segments) == 1:
            return ContainerPath.ROOT
        return ContainerPath(self._segments[:-1])

    def append(self, segments: Segments) -> "ContainerPath":
        """
        Create a new path with the given segment(s) appended

        Args:
            segments: A single segment or an iterable of segments

        Returns:
            New path; this instance is left untouched
        """
        added = _collect_segments(segments, "segments")
        return ContainerPath(self._segments + added)

    def join(self, *segments: str) -> "ContainerPath":
        """Variadic form of append"""
        return self.append(segments)

    def equals(self, other: object, comparer: StringComparer = ORDINAL) -> bool:
        if not isinstance(other, ContainerPath):
            return False
        if len(self._segments) != len(other._segments):
            return False
        return all(
            comparer.equals(left, right)
            for left, right in zip(self._segments, other._segments)
        )

    def get_hash(self, comparer: StringComparer = ORDINAL) -> int:
        return hash(tuple(comparer.hash(segment) for segment in self._segments))

    def to_string(self, separator: str = "/") -> str:
        return separator.join(self._segments)

    def __truediv__(self, segment: str) -> "ContainerPath":
        return self.append(segment)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContainerPath):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self.get_hash()

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ContainerPath({list(self._segments)!r})"


ContainerPath.ROOT = ContainerPath()
