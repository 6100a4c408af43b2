"""Resilient filesystem operations.

Deleting and recreating the output tree races with asynchronous filesystem
semantics: a handle closed late can keep a deleted directory alive, or a
freshly created directory can vanish again once the pending delete lands.
The helpers here run such operations through a bounded retry combinator.
"""

from __future__ import annotations

import errno
import shutil
import time
from enum import Enum
from pathlib import Path
from typing import Callable, IO, TypeVar

from .logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

MAX_ATTEMPTS = 10
BASE_DELAY = 0.1

_CONTENTION_ERRNOS = {errno.EACCES, errno.EPERM, errno.EBUSY, errno.ENOTEMPTY}


class FileOperationError(Exception):
    """Base exception for filesystem operation failures."""

    pass


class RetryExhaustedError(FileOperationError):
    """Raised when an operation still fails after the attempt ceiling."""

    def __init__(self, description: str, attempts: int, last_error: BaseException):
        super().__init__(
            f"{description} failed after {attempts} attempts: {last_error}"
        )
        self.description = description
        self.attempts = attempts
        self.last_error = last_error


class ErrorCategory(Enum):
    """How a failed filesystem call should be treated."""

    FATAL = "fatal"  # re-raise immediately
    CONTENTION = "contention"  # retry after exponential backoff
    MISSING = "missing"  # retry right away, recreation is cheap


def classify_os_error(exc: BaseException) -> ErrorCategory:
    """Sort an exception into a retry category."""
    if isinstance(exc, FileNotFoundError):
        return ErrorCategory.MISSING
    if isinstance(exc, PermissionError):
        return ErrorCategory.CONTENTION
    if isinstance(exc, OSError) and exc.errno in _CONTENTION_ERRNOS:
        return ErrorCategory.CONTENTION
    return ErrorCategory.FATAL


def exponential_backoff(attempt: int, base_delay: float = BASE_DELAY) -> float:
    """Delay in seconds before retrying after the given zero-based attempt."""
    return base_delay * (2**attempt)


def retry_operation(
    operation: Callable[[], T],
    *,
    max_attempts: int = MAX_ATTEMPTS,
    backoff: Callable[[int], float] = exponential_backoff,
    classify: Callable[[BaseException], ErrorCategory] = classify_os_error,
    sleep: Callable[[float], None] = time.sleep,
    description: str = "filesystem operation",
) -> T:
    """
    Run an operation, retrying transient failures.

    Args:
        operation: Zero-argument callable to run
        max_attempts: Total number of calls allowed
        backoff: Maps a zero-based attempt number to a delay in seconds
        classify: Decides whether an exception is retryable
        sleep: Sleep function (injectable for tests)
        description: Human-readable name used in logs and errors

    Returns:
        Whatever the operation returns

    Raises:
        RetryExhaustedError: If every attempt failed with a retryable error
        Exception: Any error classified as FATAL, unchanged
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    last_error: BaseException | None = None

    for attempt in range(max_attempts):
        try:
            return operation()
        except Exception as exc:
            category = classify(exc)
            if category == ErrorCategory.FATAL:
                raise

            last_error = exc
            if attempt + 1 >= max_attempts:
                break

            if category == ErrorCategory.CONTENTION:
                delay = backoff(attempt)
                logger.debug(
                    "%s contended (%s), retry %d/%d in %.2fs",
                    description,
                    exc,
                    attempt + 1,
                    max_attempts - 1,
                    delay,
                )
                sleep(delay)
            else:
                logger.debug(
                    "%s hit a missing path (%s), retry %d/%d",
                    description,
                    exc,
                    attempt + 1,
                    max_attempts - 1,
                )

    raise RetryExhaustedError(description, max_attempts, last_error) from last_error


def _remove_tree(path: Path) -> None:
    if path.exists():
        shutil.rmtree(path)


def _make_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def delete_directory(path: Path, **retry_options) -> None:
    """Delete a directory tree, tolerating transient contention."""
    retry_operation(
        lambda: _remove_tree(path),
        description=f"Deleting {path}",
        **retry_options,
    )


def create_directory(path: Path, **retry_options) -> None:
    """Create a directory (and parents), tolerating transient contention."""
    retry_operation(
        lambda: _make_directory(path),
        description=f"Creating {path}",
        **retry_options,
    )


def replace_directory(path: Path, **retry_options) -> None:
    """Delete a directory if it exists and recreate it empty."""
    delete_directory(path, **retry_options)
    create_directory(path, **retry_options)


def open_for_write(path: Path, **retry_options) -> IO[str]:
    """
    Open a file for writing, recreating its directory when needed.

    The parent directory is created inside the retried operation because a
    pending delete of the output tree may remove it again between attempts.
    """

    def _open() -> IO[str]:
        path.parent.mkdir(parents=True, exist_ok=True)
        return path.open("w", encoding="utf-8", newline="\n")

    return retry_operation(_open, description=f"Opening {path}", **retry_options)


__all__ = [
    "ErrorCategory",
    "FileOperationError",
    "RetryExhaustedError",
    "classify_os_error",
    "create_directory",
    "delete_directory",
    "exponential_backoff",
    "open_for_write",
    "replace_directory",
    "retry_operation",
]
