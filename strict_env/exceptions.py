"""
ABOUTME: Exception classes for strict environment variable parsing
ABOUTME: Distinguishes a missing variable from a present value that failed to convert
"""


class StrictEnvError(Exception):
    """Base error for a variable that could not be read strictly."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class MissingVariableError(StrictEnvError):
    """The requested environment variable is not set."""

    def __init__(self, name: str):
        super().__init__(name, f"Missing environment variable '{name}'")


class InvalidValueError(StrictEnvError):
    """The variable is set but its value could not be parsed into the target type."""

    def __init__(self, name: str, raw: str, cause: Exception):
        super().__init__(
            name,
            f"Error parsing environment variable '{name}' (value {raw!r}): {cause}",
        )
        self.raw = raw
        self.cause = cause
        self.__cause__ = cause
