"""The interactive read–check–print loop."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Mapping
from typing import TextIO

from .parser import ErrorKind, parse

__all__ = ["PROMPT", "error_message", "process_line", "run", "main"]

PROMPT = "yaz:"

_MESSAGES = {
    ErrorKind.EMPTY: "",
    ErrorKind.OPEN_QUOTES: "minishell: open quotes \"'",
    ErrorKind.UNEXPECTED_TOKEN: "minishell: syntax error near unexpected token `newline'\n",
}


def error_message(kind: ErrorKind) -> str:
    """The text shown for a rejected line; empty lines show nothing."""
    return _MESSAGES[kind]


def process_line(line: str, env: Mapping[str, str] | None = None) -> str:
    """Return what the shell prints for one input line."""
    result = parse(line, env)
    if result.error is None:
        return result.line + "\n"
    return error_message(result.error)


def run(
    lines: Iterable[str],
    out: TextIO | None = None,
    env: Mapping[str, str] | None = None,
) -> None:
    """Process each line in turn and write the results to ``out``."""
    target = sys.stdout if out is None else out
    for line in lines:
        target.write(process_line(line.removesuffix("\n"), env))


def _prompted_lines() -> Iterator[str]:
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Run the interactive shell until end of input; arguments are ignored."""
    if sys.stdin.isatty():
        try:
            import readline  # noqa: F401  line editing and history for input()
        except ImportError:
            pass
    try:
        run(_prompted_lines())
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())