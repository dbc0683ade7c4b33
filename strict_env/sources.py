"""
ABOUTME: Key/value sources that answer "what is the raw value for this name"
ABOUTME: Wraps the process environment, plain mappings and .env files behind one lookup protocol
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Protocol, Union

from dotenv import dotenv_values


class Source(Protocol):
    """Anything that can look up the raw string for a variable name."""

    def lookup(self, name: str) -> Optional[str]:
        """Return the raw value, or None when the name is not set."""
        ...


class EnvironSource:
    """The live process environment.

    Every lookup reads ``os.environ`` again, so changes made between calls are
    visible on the next one.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    def lookup(self, name: str) -> Optional[str]:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(name)


class MappingSource:
    """A fixed mapping of names to raw values."""

    def __init__(self, mapping: Mapping[str, Optional[str]]):
        self._mapping = dict(mapping)

    def lookup(self, name: str) -> Optional[str]:
        return self._mapping.get(name)

    def __repr__(self) -> str:
        return f"MappingSource({sorted(self._mapping)!r})"


class DotenvSource(MappingSource):
    """Values read from a ``.env`` file without touching ``os.environ``.

    The file is read once. A key declared without ``=`` is reported as missing.
    Values are kept verbatim; ``${VAR}`` references are not expanded.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        if not self.path.is_file():
            raise FileNotFoundError(f"Environment file not found: {self.path}")
        values = dotenv_values(self.path, interpolate=False)
        logging.debug(f"Loaded {len(values)} entries from {self.path}")
        super().__init__(values)

    def __repr__(self) -> str:
        return f"DotenvSource({str(self.path)!r})"


class ChainSource:
    """Looks a name up in each source in turn; the first hit wins."""

    def __init__(self, *sources: Source):
        self.sources = sources

    def lookup(self, name: str) -> Optional[str]:
        for source in self.sources:
            value = source.lookup(name)
            if value is not None:
                return value
        return None
