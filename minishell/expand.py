"""Expansion of ``$NAME`` references in a command line."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .textutil import is_alnum, is_alpha, is_digit

__all__ = ["expand_variables"]


class _Expander:
    """Walks a command line once, replacing variable references in place."""

    def __init__(self, line: str, env: Mapping[str, str]) -> None:
        self.text = line
        self.env = env

    def _at(self, pos: int) -> str:
        return self.text[pos] if 0 <= pos < len(self.text) else ""

    def _substitute(self, pos: int, single_digit: bool) -> int:
        """Replace the reference starting at ``pos``.

        Returns the index of the last character of the inserted value, or
        the index just before ``pos`` when the value is empty.
        """
        end = pos + 1
        while is_alnum(self._at(end)) or self._at(end) == "_":
            end += 1
            if single_digit:
                break
        name = self.text[pos + 1:end]
        value = self.env.get(name) or ""
        self.text = self.text[:pos] + value + self.text[end:]
        return pos + len(value) - 1

    def _reference(self, pos: int) -> int:
        """Expand a ``$`` at ``pos`` if a valid name follows it."""
        following = self._at(pos + 1)
        if is_digit(following):
            return self._substitute(pos, single_digit=True)
        if is_alpha(following) or following == "_":
            return self._substitute(pos, single_digit=False)
        return pos

    def _double_quoted(self, pos: int) -> int:
        """Expand references up to the closing double quote and return its index."""
        pos += 1
        while (char := self._at(pos)) and char != '"':
            if char == "$":
                pos = self._reference(pos)
            pos += 1
        return pos

    def _skip_single_quoted(self, pos: int) -> int:
        pos += 1
        while self._at(pos) not in ("'", ""):
            pos += 1
        return pos + 1

    def _skip_heredoc(self, pos: int) -> int:
        """Step over ``<<`` and its delimiter word, which is never expanded."""
        pos += 2
        while self._at(pos) == " ":
            pos += 1
        while self._at(pos) not in (" ", "|", ""):
            quote = self._at(pos)
            if quote in ('"', "'"):
                pos += 1
                while self._at(pos) not in (quote, ""):
                    pos += 1
            pos += 1
        return pos + 1

    def expand(self) -> str:
        pos = 0
        while pos < len(self.text):
            if self._at(pos) == '"':
                pos = self._double_quoted(pos)
            if self._at(pos) == "'":
                pos = self._skip_single_quoted(pos)
            if self._at(pos) == "<" and self._at(pos + 1) == "<":
                pos = self._skip_heredoc(pos)
            if self._at(pos) == "$":
                pos = self._reference(pos)
            pos += 1
        return self.text


def expand_variables(line: str, env: Mapping[str, str] | None = None) -> str:
    """Return ``line`` with ``$NAME`` references replaced from ``env``.

    References inside single quotes and heredoc delimiters stay as written.
    A ``$`` followed by a digit names a one-digit variable. Unset variables
    expand to nothing. ``env`` defaults to the process environment.
    """
    return _Expander(line, os.environ if env is None else env).expand()