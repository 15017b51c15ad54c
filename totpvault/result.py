"""
Result values for fallible operations.

An operation that can fail for expected reasons returns either
Ok(value) or Err(error) instead of raising.

Example:
    >>> result = compute_code(HashAlgorithm.SHA1, 6, seed, counter)
    >>> if result.is_ok():
    ...     print(result.value)
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar('T')
E = TypeVar('E')


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], Any]) -> 'Ok':
        """Apply fn to the wrapped value."""
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result carrying the error value."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """
        Raise the carried error.

        Errors that know how to raise themselves (HashFailure) do so;
        anything else is wrapped in a RuntimeError.
        """
        raise_for = getattr(self.error, 'raise_for', None)
        if raise_for is not None:
            raise_for()
        raise RuntimeError(f"unwrap() called on Err: {self.error}")

    def map(self, fn: Callable[[Any], Any]) -> 'Err':
        # Errors pass through unchanged
        return self


Result = Union[Ok, Err]
