"""
ABOUTME: Strict parsing of environment variables into typed values
ABOUTME: Exposes the lookup-and-convert operations, their outcomes, errors, parsers and sources
"""

from .config import classify, strict_parse, strict_parse_optional, strict_parse_or_default
from .exceptions import InvalidValueError, MissingVariableError, StrictEnvError
from .outcome import Invalid, Missing, Outcome, Success
from .parsers import (
    I8,
    I16,
    I32,
    I64,
    U8,
    U16,
    U32,
    U64,
    IntegerParser,
    ParseBoolError,
    ParseError,
    ParseIntError,
    TextParser,
    parse_bool,
    register_parser,
    resolve_parser,
)
from .sources import ChainSource, DotenvSource, EnvironSource, MappingSource, Source

__version__ = "0.1.0"
__all__ = [
    "classify",
    "strict_parse",
    "strict_parse_optional",
    "strict_parse_or_default",
    "StrictEnvError",
    "MissingVariableError",
    "InvalidValueError",
    "Outcome",
    "Success",
    "Missing",
    "Invalid",
    "TextParser",
    "ParseError",
    "ParseBoolError",
    "ParseIntError",
    "IntegerParser",
    "parse_bool",
    "register_parser",
    "resolve_parser",
    "U8",
    "U16",
    "U32",
    "U64",
    "I8",
    "I16",
    "I32",
    "I64",
    "Source",
    "EnvironSource",
    "MappingSource",
    "DotenvSource",
    "ChainSource",
]
