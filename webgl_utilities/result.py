"""Explicit success-or-error values returned by the linear algebra helpers.

Every operation that can reject its input hands back a :class:`LinearResult`
instead of an implicit ``None``. Callers either branch on :attr:`LinearResult.ok`
or call :meth:`LinearResult.unwrap` to turn a failure into an exception.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


# //1.- Root of the error taxonomy so callers can catch every library failure at once.
class LinearError(ValueError):
    """Base class for all linear algebra failures."""


# //2.- Raised or returned when operand lengths, dimensions or kinds disagree.
class ShapeMismatchError(LinearError):
    """Operands do not share the same vector length or matrix dimension."""


# //3.- Signals arguments of the wrong kind or values outside the accepted domain.
class InvalidArgumentError(LinearError):
    """An argument is not the kind of value the operation requires."""


# //4.- Reported when inversion meets a zero determinant.
class SingularMatrixError(LinearError):
    """The matrix has no inverse."""


# //5.- The one hard failure: projection volumes with coincident bounds.
class DegenerateGeometryError(LinearError):
    """A projection volume collapses to zero width, height or depth."""


@dataclass(frozen=True)
class LinearResult(Generic[T]):
    """Outcome of an operation: either ``value`` or ``error`` is set."""

    value: Optional[T] = None
    error: Optional[LinearError] = None

    @classmethod
    def success(cls, value: T) -> "LinearResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LinearError) -> "LinearResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error for failed results."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]


__all__ = [
    "LinearError",
    "ShapeMismatchError",
    "InvalidArgumentError",
    "SingularMatrixError",
    "DegenerateGeometryError",
    "LinearResult",
]
