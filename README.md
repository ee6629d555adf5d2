# minishell

A small interactive shell front end. It reads command lines, checks them for
common syntax mistakes and expands `$VARIABLE` references from the environment.
Each line that passes is echoed back in expanded form. Lines that fail get an
error message instead.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Using the shell

```
minishell
```

The prompt is `yaz:`. Type a line and press Enter. Press Ctrl-D to leave. When
standard input is a terminal, line editing and history come from Python's
`readline` module if it is available. Command-line arguments are ignored.

The checks it makes:

- A line made up only of spaces, or an empty line, counts as empty. Nothing is
  printed for it.
- A quote with no closing quote gives `minishell: open quotes "'`. No newline
  follows this message.
- A pipe with no word before it, or an operator (`|`, `<`, `>`, `<<`, `>>`)
  with nothing but spaces after it up to the next pipe, gives
  ``minishell: syntax error near unexpected token `newline'``.

How variables are expanded:

- `$NAME` is expanded outside quotes and inside double quotes.
- Inside single quotes, `$NAME` is left as it is.
- A `$` followed by a digit takes only that one digit as the name.
- The word after a `<<` here-document operator is not expanded.
- A variable that is not set expands to the empty string.
- Expansion only happens when no empty-line or open-quote error was found.

## What it does not do

The shell does not run commands. It does not start programs, open files for
redirections, connect pipes or read here-documents. A line that passes the
checks is only printed back after expansion.

## Using it as a library

```python
from minishell.parser import parse, check_line
from minishell.expand import expand_variables
from minishell.pipeline import split_pipeline
from minishell.shell import process_line, run

env = {"USER": "alice"}

expand_variables('echo "$USER" \'$USER\'', env)
# 'echo "alice" \'$USER\''

result = parse("echo $USER | cat", env)
result.ok          # True
result.line        # 'echo alice | cat'

check_line("cat |", env)   # raises ShellSyntaxError; its .kind is ErrorKind.UNEXPECTED_TOKEN

split_pipeline("a b|c")
# [['a ', 'b'], ['|c']]
```

- `minishell.parser.parse(line, env)` returns a `ParseResult` with the
  expanded `line`, an `error` that is an `ErrorKind` (`EMPTY`, `OPEN_QUOTES`,
  `UNEXPECTED_TOKEN`) or `None`, and an `ok` property.
- `minishell.parser.check_line(line, env)` returns the expanded line or raises
  `ShellSyntaxError`, a `ValueError` with a `kind` attribute.
- `minishell.expand.expand_variables(line, env)` does the expansion alone.
  `env` defaults to the process environment everywhere it is accepted.
- `minishell.pipeline.split_pipeline(line)` cuts a line at `|` into segments
  of raw chunks. A chunk ends at a space followed by a non-space, or just
  before a pipe or the end of the line; chunks keep their spaces, and a pipe
  character starts the first chunk of the segment after it.
- `minishell.shell.process_line(line, env)` returns what the shell prints for
  one line; `error_message(kind)` gives the text for an `ErrorKind`.
- `minishell.shell.run(lines, out, env)` feeds an iterable of lines through
  the shell and writes the output to `out` (standard output by default). It is
  useful for scripting and testing without a terminal.

`minishell.textutil` provides small ASCII character and string helpers:
`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`, `atoi`, `itoa`, `split`, `strtrim`, `strnstr`, `strncmp` and
`substr`.