"""Parsing of single env-file lines and their values."""

from __future__ import annotations

import enum
import os
from typing import MutableMapping, Optional, Tuple

from envloader.errors import LineParseError

SubstitutionData = MutableMapping[str, Optional[str]]

_ESCAPABLE = {"\\", "'", '"', "$", " "}


class _Mode(enum.Enum):
    NONE = enum.auto()
    BLOCK = enum.auto()
    ESCAPED_BLOCK = enum.auto()


def _is_key_start(char: str) -> bool:
    return (char.isascii() and char.isalpha()) or char == "_"


def _is_key_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in "_."


class _LineParser:
    def __init__(self, line: str, substitution_data: SubstitutionData) -> None:
        self.original = line
        self.rest = line.rstrip()
        self.pos = 0
        self.data = substitution_data

    def error(self) -> LineParseError:
        return LineParseError(self.original, self.pos)

    def skip_whitespace(self) -> None:
        stripped = self.rest.lstrip()
        self.pos += len(self.rest) - len(stripped)
        self.rest = stripped

    def parse_key(self) -> str:
        if not self.rest or not _is_key_start(self.rest[0]):
            raise self.error()
        end = next(
            (i for i, c in enumerate(self.rest) if not _is_key_char(c)),
            len(self.rest),
        )
        key, self.rest = self.rest[:end], self.rest[end:]
        self.pos += end
        return key

    def take_equal(self) -> bool:
        if not self.rest.startswith("="):
            return False
        self.rest = self.rest[1:]
        self.pos += 1
        return True

    def expect_equal(self) -> None:
        if not self.take_equal():
            raise self.error()

    def parse(self) -> Optional[Tuple[str, str]]:
        self.skip_whitespace()
        if not self.rest or self.rest.startswith("#"):
            return None

        key = self.parse_key()
        self.skip_whitespace()

        # "export" is either a shell-style prefix or a key of its own.
        if key == "export":
            if not self.take_equal():
                key = self.parse_key()
                self.skip_whitespace()
                self.expect_equal()
        else:
            self.expect_equal()
        self.skip_whitespace()

        if not self.rest or self.rest.startswith("#"):
            self.data[key] = None
            return key, ""

        value = parse_value(self.rest, self.data)
        self.data[key] = value
        return key, value


def parse_line(
    line: str, substitution_data: SubstitutionData
) -> Optional[Tuple[str, str]]:
    """Parse one logical line into ``(key, value)``.

    Returns None for blank and comment lines. Parsed values are recorded in
    ``substitution_data`` so later lines can refer to them.
    """
    return _LineParser(line, substitution_data).parse()


def _substitute(substitution_data: SubstitutionData, name: str) -> str:
    if not name:
        return ""
    from_env = os.environ.get(name)
    if from_env is not None:
        return from_env
    return substitution_data.get(name) or ""


def parse_value(text: str, substitution_data: SubstitutionData) -> str:
    """Unquote, unescape and substitute variables in a raw value."""
    strong_quote = False
    weak_quote = False
    escaped = False
    expecting_end = False
    output: list[str] = []
    mode = _Mode.NONE
    name: list[str] = []

    def flush_name() -> None:
        output.append(_substitute(substitution_data, "".join(name)))
        name.clear()

    for index, char in enumerate(text):
        if expecting_end:
            # permits "k=v #comment" while rejecting "k=v w"
            if char in " \t":
                continue
            if char == "#":
                break
            raise LineParseError(text, index)
        elif escaped:
            if char in _ESCAPABLE:
                output.append(char)
            elif char == "n":
                output.append("\n")
            else:
                raise LineParseError(text, index)
            escaped = False
        elif strong_quote:
            if char == "'":
                strong_quote = False
            else:
                output.append(char)
        elif mode is not _Mode.NONE:
            if char.isalnum():
                name.append(char)
            elif mode is _Mode.BLOCK:
                if char == "{" and not name:
                    mode = _Mode.ESCAPED_BLOCK
                else:
                    flush_name()
                    if char == "$":
                        mode = _Mode.BLOCK
                    else:
                        mode = _Mode.NONE
                        output.append(char)
            elif char == "}":
                mode = _Mode.NONE
                flush_name()
            else:
                name.append(char)
        elif char == "$":
            mode = _Mode.BLOCK
        elif weak_quote:
            if char == '"':
                weak_quote = False
            elif char == "\\":
                escaped = True
            else:
                output.append(char)
        elif char == "'":
            strong_quote = True
        elif char == '"':
            weak_quote = True
        elif char == "\\":
            escaped = True
        elif char in " \t":
            expecting_end = True
        else:
            output.append(char)

    if mode is _Mode.ESCAPED_BLOCK or strong_quote or weak_quote:
        raise LineParseError(text, max(len(text) - 1, 0))

    flush_name()
    return "".join(output)