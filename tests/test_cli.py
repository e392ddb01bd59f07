import pytest

from infix_evaluator import cli


def _feed(monkeypatch, lines):
    """Make input() return ``lines`` one by one, then signal EOF."""
    remaining = list(lines)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)


def test_expression_argument(capsys):
    assert cli.main(["2+3*4"]) == 0

    out = capsys.readouterr().out
    assert "postfix: 2 3 4 * +" in out
    assert "result: 14.0" in out


def test_error_is_reported(capsys):
    assert cli.main(["(1+2"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: unmatched left parenthesis")


def test_one_bad_expression_fails_the_run(capsys):
    assert cli.main(["1", "1+"]) == 1

    captured = capsys.readouterr()
    assert "result: 1.0" in captured.out
    assert "not enough operands" in captured.err


def test_postfix_mode(capsys):
    assert cli.main(["--postfix", "2 3 2 ** **"]) == 0

    assert "result: 512.0" in capsys.readouterr().out


def test_postfix_mode_rejects_parentheses(capsys):
    assert cli.main(["--postfix", "(1 2 +)"]) == 1

    assert "parentheses are not allowed" in capsys.readouterr().err


def test_builtin_only(capsys):
    assert cli.main(["--builtin-only", "2**3"]) == 1

    assert "unknown operator '**'" in capsys.readouterr().err


def test_list_operators(capsys):
    assert cli.main(["--list-operators"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 11
    assert lines[0].split() == [">>", "RightShift", "rank", "3", "right", "integer"]
    assert lines[-1].startswith("|")


def test_interactive_loop(monkeypatch, capsys):
    _feed(monkeypatch, ["1+1", "", "clear", "5.5&3", "2*3"])

    assert cli.main([]) == 0

    captured = capsys.readouterr()
    assert "result: 2.0" in captured.out
    assert "result: 6.0" in captured.out
    assert "error: operator '&' requires integer operands" in captured.err


def test_interactive_interrupt(monkeypatch, capsys):
    def interrupted(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)

    assert cli.main([]) == 1
    assert "interrupted" in capsys.readouterr().err


def test_help_exits(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["--help"])

    assert info.value.code == 0
    assert "infix-eval" in capsys.readouterr().out


def test_list_builtin_operators_in_rank_order(capsys):
    assert cli.main(["--builtin-only", "--list-operators"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ["*", "/", "+", "-"]
