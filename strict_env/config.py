"""
ABOUTME: Strict environment variable lookup and conversion
ABOUTME: Reads one named value from a source and parses it, keeping missing and invalid apart
"""

from typing import Any, Optional, TypeVar

from .outcome import Invalid, Missing, Outcome, Success
from .parsers import PARSE_ERRORS, resolve_parser
from .sources import EnvironSource, Source

T = TypeVar("T")

_ENVIRON = EnvironSource()


def classify(name: str, target: Any = str, *, source: Optional[Source] = None) -> Outcome:
    """
    Look up ``name`` and parse it into ``target``, returning the outcome as data.

    An empty string is a present value and goes to the parser like any other.
    Nothing is trimmed, defaulted or cached.

    Parameters:
        name (str): Variable name, passed verbatim to the source.
        target: A type or parser accepted by ``resolve_parser``.
        source (Source, optional): Where to look; defaults to the process environment.

    Returns:
        Outcome: ``Success(value)``, ``Missing(name)`` or ``Invalid(name, raw, cause)``.
    """
    parser = resolve_parser(target)
    raw = (_ENVIRON if source is None else source).lookup(name)
    if raw is None:
        return Missing(name)

    try:
        # Undecodable bytes survive in os.environ as lone surrogates.
        raw.encode("utf-8")
    except UnicodeEncodeError as e:
        return Invalid(name, raw, e)

    try:
        value = parser(raw)
    except PARSE_ERRORS as e:
        return Invalid(name, raw, e)
    return Success(value)


def strict_parse(name: str, target: Any = str, *, source: Optional[Source] = None) -> Any:
    """Return the parsed value or raise MissingVariableError / InvalidValueError."""
    return classify(name, target, source=source).unwrap()


def strict_parse_optional(
    name: str, target: Any = str, *, source: Optional[Source] = None
) -> Optional[Any]:
    """Like strict_parse, but a missing variable yields None. Invalid values still raise."""
    outcome = classify(name, target, source=source)
    if isinstance(outcome, Missing):
        return None
    return outcome.unwrap()


def strict_parse_or_default(
    name: str, target: Any, default: T, *, source: Optional[Source] = None
) -> T:
    """Like strict_parse_optional, but falls back to ``default`` when missing."""
    outcome = classify(name, target, source=source)
    if isinstance(outcome, Missing):
        return default
    return outcome.unwrap()
