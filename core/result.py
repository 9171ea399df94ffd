"""Result type for returning errors from use cases without raising."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union

T = TypeVar('T')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful outcome carrying a value."""
    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, fn: Callable[[T], Any]) -> "Result[Any, Exception]":
        """Transform the value; an exception raised by ``fn`` becomes a Failure."""
        try:
            return Success(fn(self.value))
        except Exception as e:
            return Failure(e)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def value_or_none(self) -> Optional[T]:
        return self.value

    def to_dict(self) -> dict:
        """Serializable envelope used by the command line output."""
        value = self.value
        if hasattr(value, "to_dict"):
            value = value.to_dict()
        elif isinstance(value, list):
            value = [v.to_dict() if hasattr(v, "to_dict") else v for v in value]
        return {"ok": True, "value": value}


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A failed outcome carrying the error."""
    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, fn: Callable) -> "Failure[E]":
        return self

    def unwrap(self):
        """Raise the wrapped error."""
        if isinstance(self.error, Exception):
            raise self.error
        raise RuntimeError(str(self.error))

    def unwrap_or(self, default):
        return default

    def value_or_none(self) -> None:
        return None

    def to_dict(self) -> dict:
        return {
            "ok": False,
            "error": type(self.error).__name__,
            "message": str(self.error),
        }


Result = Union[Success[T], Failure[E]]
