"""
Result type and error policy for filesystem operations.

Strict operations return an FsResult: a value plus, on failure, an
FsError naming what went wrong. The convenience operations apply an
ErrorPolicy on top:

    SUPPRESS_AND_LOG   warn once, hand back the neutral value ([] or "")
    RAISE              raise FileSystemError carrying the FsError

SUPPRESS_AND_LOG is the default. Under it, callers cannot tell
"nothing found" from "operation failed" except through the warning.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar


T = TypeVar("T")


class FsErrorKind(Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    DECODE_ERROR = "decode_error"
    INVALID_INPUT = "invalid_input"
    OS_ERROR = "os_error"


class ErrorPolicy(Enum):
    SUPPRESS_AND_LOG = "suppress-and-log"
    RAISE = "raise"


@dataclass(frozen=True)
class FsError:
    """A categorized filesystem failure."""
    kind: FsErrorKind
    path: str
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException, path: Any) -> "FsError":
        """Categorize an exception raised by a filesystem primitive."""
        return cls(kind=categorize(exc), path=str(path), message=str(exc))

    def __str__(self):
        return f"{self.kind.value}: {self.path}: {self.message}"


@dataclass(frozen=True)
class FsResult(Generic[T]):
    """Either a value or a categorized failure (with a neutral value)."""
    value: T
    error: Optional[FsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "FsResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: FsError, default: T) -> "FsResult[T]":
        return cls(value=default, error=error)


class FileSystemError(Exception):
    """Raised for a failed filesystem operation under ErrorPolicy.RAISE."""

    def __init__(self, error: FsError):
        super().__init__(str(error))
        self.error = error

    @property
    def kind(self) -> FsErrorKind:
        return self.error.kind


def categorize(exc: BaseException) -> FsErrorKind:
    """Map an exception onto an FsErrorKind."""
    if isinstance(exc, FileNotFoundError):
        return FsErrorKind.NOT_FOUND
    if isinstance(exc, PermissionError):
        return FsErrorKind.PERMISSION_DENIED
    if isinstance(exc, NotADirectoryError):
        return FsErrorKind.NOT_A_DIRECTORY
    if isinstance(exc, IsADirectoryError):
        return FsErrorKind.IS_A_DIRECTORY
    # UnicodeDecodeError is a ValueError, check it first
    if isinstance(exc, UnicodeDecodeError):
        return FsErrorKind.DECODE_ERROR
    if isinstance(exc, (TypeError, ValueError)):
        return FsErrorKind.INVALID_INPUT
    return FsErrorKind.OS_ERROR
