"""Exceptions raised while locating, reading and parsing env files."""

from __future__ import annotations


class DotenvError(Exception):
    """Base class for every error the package raises."""

    def not_found(self) -> bool:
        """Return True when the error means the env file does not exist."""
        return False


class LineParseError(DotenvError):
    """A line could not be parsed; ``index`` is where parsing stopped."""

    def __init__(self, line: str, index: int) -> None:
        super().__init__(
            f"Error parsing line: '{line}', error at line index: {index}"
        )
        self.line = line
        self.index = index


class IoError(DotenvError):
    """An operating-system error met while finding or reading a file."""

    def __init__(self, error: OSError) -> None:
        super().__init__(str(error))
        self.error = error
        self.__cause__ = error

    def not_found(self) -> bool:
        return isinstance(self.error, FileNotFoundError)


class EnvVarError(DotenvError, KeyError):
    """A requested environment variable is not set."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return "environment variable not found"