"""
Two-state result container for partial matrix operations.

trace() and determinant() are only defined for square matrices. Instead of
raising, they return a Result that is either a success carrying the value or
a failure carrying the error, so batch computations over many matrices can
inspect each outcome without exception-driven control flow.

Design decisions:
    - Generic over payload P for type safety
    - info dict for flexible metadata (method used, matrix size)
    - Immutable (frozen=True)
    - unwrap() re-raises the carried error unchanged
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

from pyexact.core.exceptions import PyExactError

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable success/failure envelope.

    Type Parameters:
        P: The payload type (a scalar of the matrix domain)

    Attributes:
        value: The computed payload, or None on failure
        error: The failure reason, or None on success
        info: Structured metadata (e.g. {'method': 'leibniz', 'size': 4})

    Examples:
        >>> result = matrix.determinant()
        >>> if result.ok:
        ...     print(result.value)
        >>> result.unwrap_or(0)
    """
    value: P | None
    error: PyExactError | None = None
    info: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(cls, value: P, info: dict[str, Any] | None = None) -> 'Result[P]':
        """Wrap a computed value."""
        return cls(value=value, error=None, info=dict(info or {}))

    @classmethod
    def failure(cls, error: PyExactError, info: dict[str, Any] | None = None) -> 'Result[P]':
        """Wrap the reason an operation could not produce a value."""
        if error is None:
            raise ValueError("failure requires an error")
        return cls(value=None, error=error, info=dict(info or {}))

    @property
    def ok(self) -> bool:
        """True if this result carries a value."""
        return self.error is None

    @property
    def failed(self) -> bool:
        """True if this result carries an error."""
        return self.error is not None

    def unwrap(self) -> P:
        """
        Return the value or raise the carried error.

        Raises:
            PyExactError: The error this failed result carries
        """
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: P) -> P:
        """Return the value, or default if this result failed."""
        if self.error is not None:
            return default
        return self.value
