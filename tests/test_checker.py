import io

import pytest

from pushswap import cli
from pushswap.checker import CommandError, main, parse_command, run_commands
from pushswap.stack import Operation, Stacks


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


@pytest.mark.parametrize("operation", list(Operation))
def test_parse_command_reads_every_operation(operation):
    assert parse_command(f"{operation.value}\n") is operation
    assert parse_command(operation.value) is operation


@pytest.mark.parametrize("line", ["", "\n", "sx\n", "ra \n", "SA\n", "rrrr\n", "p\n"])
def test_parse_command_rejects_unknown(line):
    with pytest.raises(CommandError):
        parse_command(line)


def test_run_commands_applies_operations():
    stacks = Stacks([2, 1, 3])
    run_commands(stacks, ["sa\n"])
    assert stacks.values_a() == [1, 2, 3]


def test_run_commands_push_and_back():
    stacks = Stacks([3, 1, 2])
    run_commands(stacks, ["pb\n", "ra\n", "pa\n"])
    assert stacks.values_a() == [3, 2, 1]
    assert stacks.values_b() == []


def test_run_commands_rejects_push_from_empty_stack():
    stacks = Stacks([1, 2])
    with pytest.raises(CommandError):
        run_commands(stacks, ["pa\n"])


def test_run_commands_stops_at_bad_line():
    stacks = Stacks([2, 1, 3])
    with pytest.raises(CommandError):
        run_commands(stacks, ["sa\n", "bad\n", "sa\n"])
    assert stacks.values_a() == [1, 2, 3]


def test_main_reports_ok(monkeypatch, capsys):
    _feed(monkeypatch, "sa\n")
    assert main(["2 1 3"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_accepts_last_line_without_newline(monkeypatch, capsys):
    _feed(monkeypatch, "sa")
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_reports_ko_when_unsorted(monkeypatch, capsys):
    _feed(monkeypatch, "")
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_reports_ko_when_b_not_empty(monkeypatch, capsys):
    _feed(monkeypatch, "pb\n")
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == "KO\n"


@pytest.mark.parametrize("text", ["sa\nxx\n", "\n", "pa\n"])
def test_main_reports_error_for_bad_instruction(text, monkeypatch, capsys):
    _feed(monkeypatch, text)
    assert main(["2", "1", "3"]) == 255
    assert capsys.readouterr().out == "Error\n"


def test_main_without_arguments(monkeypatch, capsys):
    _feed(monkeypatch, "sa\n")
    assert main([]) == 255
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("args", [["1", "1"], ["1 x"], ["99999999999"]])
def test_main_reports_error_for_bad_numbers(args, monkeypatch, capsys):
    _feed(monkeypatch, "")
    assert main(args) == 255
    assert capsys.readouterr().out == "Error\n"


@pytest.mark.parametrize(
    "values",
    [[5, 4, 3, 2, 1], [3, -7, 12, 0, 8, 1, -2], list(range(40, 0, -3))],
)
def test_checker_accepts_sorting_output(values, monkeypatch, capsys):
    args = [str(value) for value in values]
    assert cli.main(args) == 0
    _feed(monkeypatch, capsys.readouterr().out)
    assert main(args) == 0
    assert capsys.readouterr().out == "OK\n"