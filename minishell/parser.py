"""Syntax checks and variable expansion for one command line."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from .expand import expand_variables

__all__ = ["ErrorKind", "ParseResult", "ShellSyntaxError", "parse", "check_line"]

_QUOTES = ("'", '"')
_OPERATORS = ("|", "<", ">")
_REDIRECTIONS = ("<", ">")


class ErrorKind(Enum):
    """Why a command line was rejected."""

    EMPTY = 1
    OPEN_QUOTES = 2
    UNEXPECTED_TOKEN = 3

    @property
    def description(self) -> str:
        return {
            ErrorKind.EMPTY: "empty line",
            ErrorKind.OPEN_QUOTES: "open quotes",
            ErrorKind.UNEXPECTED_TOKEN: "syntax error near unexpected token `newline'",
        }[self]


class ShellSyntaxError(ValueError):
    """Raised by :func:`check_line` for a rejected command line."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.description)
        self.kind = kind


@dataclass(frozen=True)
class ParseResult:
    """The line after expansion and the error found in it, if any."""

    line: str
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _has_open_quote(line: str) -> bool:
    pos = 0
    while pos < len(line):
        quote = line[pos]
        if quote in _QUOTES:
            close = line.find(quote, pos + 1)
            if close < 0:
                return True
            pos = close
        pos += 1
    return False


def _has_operator_error(line: str) -> bool:
    """Check that pipes follow a word and every operator is followed by one."""
    words = 0
    pos = 0
    end = len(line)
    while pos < end:
        char = line[pos]
        if char in _QUOTES:
            close = line.find(char, pos + 1)
            pos = end if close < 0 else close
            words += 1
        elif char in _OPERATORS:
            if char == "|":
                if words == 0:
                    return True
                words = 0
            elif pos + 1 < end and line[pos + 1] in _REDIRECTIONS:
                pos += 1
            next_pipe = line.find("|", pos + 1)
            segment = line[pos + 1:end if next_pipe < 0 else next_pipe]
            if not segment.strip(" "):
                return True
        elif char != " ":
            words += 1
        pos += 1
    return False


def parse(line: str, env: Mapping[str, str] | None = None) -> ParseResult:
    """Check ``line`` and expand its variables.

    Expansion and the operator check only run when no earlier error was
    found, and only if the original line held a ``$`` or an operator.
    """
    error = None
    if all(char == " " for char in line):
        error = ErrorKind.EMPTY
    if _has_open_quote(line):
        error = ErrorKind.OPEN_QUOTES
    has_operator = any(char in _OPERATORS for char in line)
    if error is None and "$" in line:
        line = expand_variables(line, env)
    if error is None and has_operator and _has_operator_error(line):
        error = ErrorKind.UNEXPECTED_TOKEN
    return ParseResult(line, error)


def check_line(line: str, env: Mapping[str, str] | None = None) -> str:
    """Return the expanded line, or raise :class:`ShellSyntaxError`."""
    result = parse(line, env)
    if result.error is not None:
        raise ShellSyntaxError(result.error)
    return result.line