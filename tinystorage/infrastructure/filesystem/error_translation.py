"""Translation of native OS errors into storage errors"""
from contextlib import contextmanager
from typing import Iterator, Optional, Type

from tinystorage.core.exceptions import ItemNotFoundError, StorageError
from tinystorage.infrastructure.logging import get_logger

logger = get_logger(__name__)

# Missing directory or a file standing where a directory was expected
MISSING_ERRORS = (FileNotFoundError, NotADirectoryError)


@contextmanager
def translate_os_errors(
    operation: str,
    target: str,
    on_missing: Optional[Type[StorageError]] = ItemNotFoundError,
) -> Iterator[None]:
    """
    Re-raise native failures of the wrapped block as storage errors

    Args:
        operation: Name of the storage operation, used for logging
        target: Native path the operation works on
        on_missing: Error raised when the target or a parent is missing;
            None treats a missing target as success

    Raises:
        ItemNotFoundError: The default mapping for a missing target
        StorageError: For every other OSError
    """
    try:
        yield
    except MISSING_ERRORS as e:
        if on_missing is None:
            logger.debug("storage_target_already_absent", operation=operation, target=target)
            return
        logger.debug("storage_target_missing", operation=operation, target=target)
        raise on_missing(details={"operation": operation, "target": target}, cause=e) from e
    except FileExistsError as e:
        logger.warning("storage_target_exists", operation=operation, target=target)
        raise StorageError(
            f"File already exists: {target}",
            {"operation": operation, "target": target},
            cause=e,
        ) from e
    except OSError as e:
        logger.warning(
            "storage_operation_failed",
            operation=operation,
            target=target,
            error=str(e),
        )
        raise StorageError(
            details={"operation": operation, "target": target},
            cause=e,
        ) from e
