"""
ABOUTME: Result types produced by classifying an environment lookup
ABOUTME: Success, Missing and Invalid form a closed union; each knows how to unwrap itself
"""

from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union

from .exceptions import InvalidValueError, MissingVariableError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """The variable was present and parsed."""

    value: T

    ok = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Missing:
    """No value existed for the name."""

    name: str

    ok = False

    def error(self) -> MissingVariableError:
        return MissingVariableError(self.name)

    def unwrap(self) -> NoReturn:
        raise self.error()


@dataclass(frozen=True)
class Invalid:
    """A value existed but the parser rejected it.

    ``cause`` is the exception raised by the parser, kept as-is so callers can
    inspect it or render it.
    """

    name: str
    raw: str
    cause: Exception

    ok = False

    def error(self) -> InvalidValueError:
        return InvalidValueError(self.name, self.raw, self.cause)

    def unwrap(self) -> NoReturn:
        raise self.error()


Outcome = Union[Success[Any], Missing, Invalid]
