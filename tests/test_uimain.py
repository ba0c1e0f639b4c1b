import io

from tokenshell.tokenizer import format_tokens
from tokenshell.uimain import run


def _run(text):
    out = io.StringIO()
    status = run(io.StringIO(text), out)
    return status, out.getvalue()


def test_tokenizes_line():
    status, output = _run("hello world\n")
    assert status == 0
    assert output == "$ " + format_tokens(["hello", "world"]) + "$ "


def test_exit_stops_loop():
    _, output = _run("exit\nhello\n")
    assert output == "$ "


def test_quit_stops_loop():
    _, output = _run("quit\nhello\n")
    assert output == "$ "


def test_recall_missing_item():
    _, output = _run("!5\n")
    assert "No history item found\n" in output


def test_recall_repeats_tokens():
    _, output = _run("a b\n!1\n")
    assert output.count(format_tokens(["a", "b"])) == 2


def test_recall_history_prints_history():
    _, output = _run("history\n!1\n")
    assert output.endswith("1: history$ ")


def test_bare_bang_is_tokenized():
    _, output = _run("!\n")
    assert format_tokens(["!"]) in output


def test_long_line_is_read_in_pieces():
    _, output = _run("a" * 300 + "\n")
    assert format_tokens(["a" * 223]) in output
    assert format_tokens(["a" * 77]) in output


def test_empty_input():
    status, output = _run("")
    assert status == 0
    assert output == "$ "