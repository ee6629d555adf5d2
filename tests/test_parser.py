import pytest

from minishell.parser import ErrorKind, ParseResult, ShellSyntaxError, check_line, parse


def test_plain_line_is_accepted_unchanged():
    result = parse("echo hi", {})
    assert result == ParseResult("echo hi", None)
    assert result.ok


@pytest.mark.parametrize("line", ["", " ", "    "])
def test_blank_lines_are_empty(line):
    result = parse(line, {})
    assert result.error is ErrorKind.EMPTY
    assert not result.ok


def test_tab_counts_as_content():
    assert parse("\t", {}).error is None


@pytest.mark.parametrize("line", ['echo "hi', "echo 'hi", "a 'b' \"c"])
def test_open_quotes(line):
    assert parse(line, {}).error is ErrorKind.OPEN_QUOTES


@pytest.mark.parametrize("line", ["echo 'a' \"b\"", 'echo "it\'s"', "echo '|'"])
def test_balanced_quotes_are_accepted(line):
    result = parse(line, {})
    assert result.error is None
    assert result.line == line


@pytest.mark.parametrize(
    "line",
    ["| ls", "ls |", "ls >", "cat <", "ls >> | cat", "ls || cat", "a | b |  "],
)
def test_operator_errors(line):
    assert parse(line, {}).error is ErrorKind.UNEXPECTED_TOKEN


@pytest.mark.parametrize(
    "line",
    ["ls | grep a > out", "< in cat", "cat < in | wc > out", "ls <> f", "ls > > a"],
)
def test_valid_operators(line):
    assert parse(line, {}).error is None


def test_variables_are_expanded():
    env = {"X": "v"}
    assert parse("echo $X", env).line == f"echo {env['X']}"


def test_no_expansion_after_quote_error():
    line = 'echo "$X'
    result = parse(line, {"X": "v"})
    assert result.error is ErrorKind.OPEN_QUOTES
    assert result.line == line


def test_operator_check_runs_on_expanded_line():
    result = parse("a | $X", {"X": ""})
    assert result.error is ErrorKind.UNEXPECTED_TOKEN
    assert result.line == "a | "


def test_operators_from_expansion_alone_are_not_checked():
    result = parse("$X ls", {"X": "|"})
    assert result.error is None
    assert result.line == "| ls"


def test_check_line_returns_expanded_line():
    env = {"NAME": "world"}
    assert check_line("hello $NAME", env) == f"hello {env['NAME']}"


def test_check_line_raises_with_kind():
    with pytest.raises(ShellSyntaxError) as info:
        check_line("ls |", {})
    assert info.value.kind is ErrorKind.UNEXPECTED_TOKEN
    assert str(info.value) == ErrorKind.UNEXPECTED_TOKEN.description


def test_check_line_error_is_value_error():
    with pytest.raises(ValueError):
        check_line("   ", {})