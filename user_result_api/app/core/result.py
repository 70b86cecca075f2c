"""
Result type used for expected failures throughout the service layer.

A ``Result`` is either a success carrying a value or a failure carrying
a human readable message.  Stores and services return ``Result``
instances instead of raising for conditions such as "user not found"
or "email already exists"; the API layer then turns them into HTTP
responses (see ``api.responses``).

Reading ``value`` from a failure, or ``error`` from a success, is a
programming error and raises :class:`InvalidResultStateError`.

Example::

    result = await service.get_by_id(user_id)
    if result.is_failure:
        return result
    user = result.value
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

_NOT_FOUND_MARKER = "not found"


class InvalidResultStateError(RuntimeError):
    """Raised when the wrong side of a ``Result`` is accessed."""


class ErrorKind(str, Enum):
    """Category attached to a failure."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, repr=False)
class Result(Generic[T]):
    """Success-with-value or failure-with-message.

    Use the ``success`` and ``failure`` constructors rather than
    instantiating the class directly.
    """

    is_success: bool
    _value: Optional[T] = None
    _error: Optional[str] = None
    kind: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        if self.is_success and (self._error is not None or self.kind is not None):
            raise InvalidResultStateError("A successful result cannot carry an error.")
        if not self.is_success:
            if self._error is None:
                raise InvalidResultStateError("A failed result must carry an error message.")
            if self._value is not None:
                raise InvalidResultStateError("A failed result cannot carry a value.")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(True, value, None)

    @classmethod
    def failure(cls, message: str, kind: Optional[ErrorKind] = None) -> "Result[T]":
        return cls(False, None, message, kind)

    @classmethod
    def of(cls, value: Any) -> "Result[Any]":
        """Wrap a bare value as a success; pass an existing ``Result`` through."""
        if isinstance(value, Result):
            return value
        return cls.success(value)

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        if not self.is_success:
            raise InvalidResultStateError("Cannot access value on a failed result.")
        return self._value  # type: ignore[return-value]

    @property
    def error(self) -> str:
        if self.is_success:
            raise InvalidResultStateError("Cannot access error on a successful result.")
        return self._error  # type: ignore[return-value]

    @property
    def is_not_found(self) -> bool:
        """Whether this failure denotes a missing entity.

        The typed ``ErrorKind.NOT_FOUND`` is checked first.  Failures
        without that kind still count when their message contains
        "not found" in any case, which keeps older message-based
        callers working.
        """
        if self.is_success:
            return False
        if self.kind is ErrorKind.NOT_FOUND:
            return True
        return _NOT_FOUND_MARKER in self.error.lower()

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.success({self._value!r})"
        if self.kind is None:
            return f"Result.failure({self._error!r})"
        return f"Result.failure({self._error!r}, kind={self.kind.value})"
