"""Exceptions raised while resolving paths and interpolating strings."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Category of a resolution failure."""

    NOT_FOUND = "not found"
    BAD_PATH = "bad path"
    FORBIDDEN = "forbidden"


class ResolverError(Exception):
    """Base exception for all resolution errors.

    A ResolverError may wrap another exception (its ``cause``) to add
    context such as the token or file being resolved. The ``kind`` of a
    wrapping error is taken from the wrapped one when it has none itself,
    so callers can inspect the category regardless of how deep the
    original failure was.

    Attributes:
        message: Context for this layer of the error
        cause: The wrapped exception, if any
    """

    default_kind: Optional[ErrorKind] = None

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message
        self.cause = cause
        super().__init__(message)

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error category, inherited from the cause chain if unset here."""
        if self.default_kind is not None:
            return self.default_kind
        if isinstance(self.cause, ResolverError):
            return self.cause.kind
        return None

    def wrap(self, message: str) -> "ResolverError":
        """Return an error of the same class that adds *message* as context."""
        return self.__class__(message, cause=self)

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class NotFoundError(ResolverError):
    """Raised when a key, index, filter match, file or variable does not exist."""

    default_kind = ErrorKind.NOT_FOUND


class BadPathError(ResolverError):
    """Raised for malformed path expressions or interpolation tokens."""

    default_kind = ErrorKind.BAD_PATH


class ForbiddenError(ResolverError):
    """Raised when a source exists but may not be read."""

    default_kind = ErrorKind.FORBIDDEN


class ConfigError(ValueError):
    """Raised when a resolver configuration file is invalid."""

    pass


def is_kind(error: BaseException, kind: ErrorKind) -> bool:
    """Report whether *error* (or anything it wraps) is of *kind*."""
    current: Optional[BaseException] = error
    while current is not None:
        if isinstance(current, ResolverError) and current.default_kind is kind:
            return True
        current = getattr(current, "cause", None) or current.__cause__
    return False


def root_cause(error: BaseException) -> BaseException:
    """Return the innermost exception in a wrapped error chain."""
    current = error
    while True:
        nxt = getattr(current, "cause", None) or current.__cause__
        if nxt is None:
            return current
        current = nxt
