"""
ABOUTME: Text parsers for the target types an environment variable can be converted into
ABOUTME: Resolves a target type to a callable and ships strict bool and fixed-width integer parsers
"""

import re
from datetime import date, datetime, time
from typing import Any, Callable, Dict, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)

# Exceptions that mean "the text was rejected" rather than a bug in the parser.
# ArithmeticError covers decimal.InvalidOperation.
PARSE_ERRORS = (ValueError, ArithmeticError)


class TextParser(Protocol[T_co]):
    """Anything that turns a raw string into a value or raises a parse error."""

    def __call__(self, raw: str) -> T_co: ...


class ParseError(ValueError):
    """Base class for errors raised by the built-in parsers."""


class ParseBoolError(ParseError):
    """Text rejected by parse_bool."""

    def __init__(self):
        super().__init__("provided string was not `true` or `false`")


class ParseIntError(ParseError):
    """Integer text rejected by an IntegerParser; ``kind`` names the reason."""

    MESSAGES = {
        "empty": "cannot parse integer from empty string",
        "invalid_digit": "invalid digit found in string",
        "pos_overflow": "number too large to fit in target type",
        "neg_overflow": "number too small to fit in target type",
    }

    def __init__(self, kind: str):
        super().__init__(self.MESSAGES[kind])
        self.kind = kind


def parse_bool(raw: str) -> bool:
    """Accept exactly ``true`` or ``false``."""
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ParseBoolError()


_DIGITS = re.compile(r"[0-9]+")


class IntegerParser:
    """Parser for an integer confined to ``[minimum, maximum]``.

    Accepts an optional sign followed by ASCII digits. Whitespace, underscores
    and other forms ``int()`` tolerates are rejected.
    """

    def __init__(self, name: str, minimum: int, maximum: int):
        self.name = name
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def unsigned(cls, bits: int) -> "IntegerParser":
        return cls(f"u{bits}", 0, 2**bits - 1)

    @classmethod
    def signed(cls, bits: int) -> "IntegerParser":
        return cls(f"i{bits}", -(2 ** (bits - 1)), 2 ** (bits - 1) - 1)

    def __call__(self, raw: str) -> int:
        if not raw:
            raise ParseIntError("empty")

        digits = raw
        negative = False
        if raw[0] in "+-":
            negative = raw[0] == "-"
            digits = raw[1:]
            if negative and self.minimum >= 0:
                raise ParseIntError("invalid_digit")
            if not digits:
                raise ParseIntError("invalid_digit")

        if not _DIGITS.fullmatch(digits):
            raise ParseIntError("invalid_digit")

        # Bound the length before int(), which refuses very long digit strings.
        digits = digits.lstrip("0") or "0"
        limit = -self.minimum if negative else self.maximum
        if len(digits) > len(str(limit)):
            raise ParseIntError("neg_overflow" if negative else "pos_overflow")

        value = -int(digits) if negative else int(digits)
        if value > self.maximum:
            raise ParseIntError("pos_overflow")
        if value < self.minimum:
            raise ParseIntError("neg_overflow")
        return value

    def __repr__(self) -> str:
        return f"IntegerParser({self.name!r}, {self.minimum}, {self.maximum})"


U8 = IntegerParser.unsigned(8)
U16 = IntegerParser.unsigned(16)
U32 = IntegerParser.unsigned(32)
U64 = IntegerParser.unsigned(64)
I8 = IntegerParser.signed(8)
I16 = IntegerParser.signed(16)
I32 = IntegerParser.signed(32)
I64 = IntegerParser.signed(64)


_REGISTRY: Dict[type, Callable[[str], Any]] = {
    bool: parse_bool,
    datetime: datetime.fromisoformat,
    date: date.fromisoformat,
    time: time.fromisoformat,
}


def register_parser(target: type, parser: Callable[[str], Any]) -> None:
    """Use ``parser`` whenever ``target`` is requested."""
    if not callable(parser):
        raise TypeError(f"Parser for {target!r} is not callable: {parser!r}")
    _REGISTRY[target] = parser


def resolve_parser(target: Any) -> Callable[[str], Any]:
    """
    Return the text parser for a target type.

    Resolution order:
        1. a callable ``from_str`` attribute on the target
        2. a parser registered for the target (``bool``, the datetime types, ...)
        3. the target's own constructor when it is a class
        4. the target itself when it is any other callable

    Raises:
        TypeError: If the target cannot parse text at all.
    """
    from_str = getattr(target, "from_str", None)
    if callable(from_str):
        return from_str
    if isinstance(target, type) and target in _REGISTRY:
        return _REGISTRY[target]
    if callable(target):
        return target
    raise TypeError(f"Cannot parse environment values into {target!r}")
