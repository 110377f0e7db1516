"""
Tagged result type returned by every query resolver operation.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from mushaf.exceptions import MushafError

T = TypeVar("T")


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """
    Outcome of a single query: exactly one of ``value`` or ``error`` is set.

    Example:
        result = resolver.get_ayah("1", "1")
        if result.ok:
            view = result.value
        else:
            handle(result.error)
    """

    value: T | None = None
    error: MushafError | None = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("QueryResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "QueryResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: MushafError) -> "QueryResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value
