import io
from unittest import mock

from minishell.parser import ErrorKind
from minishell.shell import PROMPT, error_message, main, process_line, run


def test_error_messages():
    assert error_message(ErrorKind.OPEN_QUOTES) == "minishell: open quotes \"'"
    assert (
        error_message(ErrorKind.UNEXPECTED_TOKEN)
        == "minishell: syntax error near unexpected token `newline'\n"
    )
    assert error_message(ErrorKind.EMPTY) == ""


def test_process_accepted_line_echoes_it():
    assert process_line("echo hi", {}) == "echo hi\n"


def test_process_line_expands():
    env = {"X": "value"}
    assert process_line("echo $X", env) == f"echo {env['X']}\n"


def test_process_rejected_line():
    assert process_line("ls |", {}) == error_message(ErrorKind.UNEXPECTED_TOKEN)
    assert process_line('echo "x', {}) == error_message(ErrorKind.OPEN_QUOTES)
    assert process_line("   ", {}) == error_message(ErrorKind.EMPTY)


def test_run_writes_each_result_in_order():
    out = io.StringIO()
    lines = ["one\n", "| bad\n", "two"]
    run(lines, out, {})
    assert out.getvalue() == (
        "one\n" + error_message(ErrorKind.UNEXPECTED_TOKEN) + "two\n"
    )


def test_run_with_no_lines_writes_nothing():
    out = io.StringIO()
    run([], out, {})
    assert out.getvalue() == ""


def test_main_reads_until_end_of_input(capsys):
    with mock.patch("builtins.input", side_effect=["echo hi", "| x", EOFError()]) as fake:
        assert main() == 0
    assert capsys.readouterr().out == "echo hi\n" + error_message(
        ErrorKind.UNEXPECTED_TOKEN
    )
    fake.assert_called_with(PROMPT)
    assert fake.call_count == 3


def test_main_prompt_is_fixed():
    with mock.patch("builtins.input", side_effect=EOFError()) as fake:
        assert main([]) == 0
    fake.assert_called_once_with("yaz:")


def test_main_interrupt_returns_130():
    with mock.patch("builtins.input", side_effect=KeyboardInterrupt()):
        assert main() == 130