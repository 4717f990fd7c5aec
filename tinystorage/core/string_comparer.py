"""String comparison policies used by path equality and hashing"""
from abc import ABC, abstractmethod


class StringComparer(ABC):
    """Pairs an equality test with a hash function that agrees with it"""

    @abstractmethod
    def equals(self, left: str, right: str) -> bool:
        ...

    @abstractmethod
    def hash(self, value: str) -> int:
        ...


class OrdinalComparer(StringComparer):
    """Exact, case-sensitive comparison"""

    def equals(self, left: str, right: str) -> bool:
        return left == right

    def hash(self, value: str) -> int:
        return hash(value)

    def __repr__(self) -> str:
        return "ORDINAL"


class OrdinalIgnoreCaseComparer(StringComparer):
    """Case-insensitive comparison using Unicode case folding"""

    def equals(self, left: str, right: str) -> bool:
        return left.casefold() == right.casefold()

    def hash(self, value: str) -> int:
        return hash(value.casefold())

    def __repr__(self) -> str:
        return "ORDINAL_IGNORE_CASE"


ORDINAL = OrdinalComparer()
ORDINAL_IGNORE_CASE = OrdinalIgnoreCaseComparer()
