"""Storage error taxonomy shared by every backend"""

from typing import Any, Dict, Optional


class StorageError(Exception):
    """Base exception for all storage failures"""

    default_message = "A storage error occurred."

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message or self._default_message(cause is not None)
        self.details = details or {}
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    @classmethod
    def _default_message(cls, has_cause: bool) -> str:
        if has_cause:
            return f"{cls.default_message} See the cause for details."
        return cls.default_message


class ItemNotFoundError(StorageError):
    """Raised when a file or one of its parent containers does not exist"""

    default_message = "The storage item or one of its parent containers does not exist."


class InvalidPathError(StorageError):
    """Raised when a container path cannot be mapped onto a backend"""

    default_message = "The specified storage path is invalid."

    def __init__(
        self,
        message: Optional[str] = None,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.path = path
        super().__init__(
            message,
            {"path": path} if path is not None else None,
            cause,
        )

    @classmethod
    def _default_message(cls, has_cause: bool) -> str:
        return cls.default_message
