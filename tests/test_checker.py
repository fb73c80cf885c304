import io

import pytest

from pushswap.checker import InvalidInstruction, check, execute, main, parse_instruction
from pushswap.sorter import sort_operations
from pushswap.stacks import Operation, Stacks


@pytest.mark.parametrize("operation", list(Operation))
def test_parse_full_lines(operation):
    assert parse_instruction(f"{operation.value}\n") is operation


@pytest.mark.parametrize("operation", list(Operation))
def test_parse_last_line_without_newline(operation):
    assert parse_instruction(operation.value) is operation


def test_parse_prefix_takes_first_match():
    assert parse_instruction("rr") is Operation.RR
    assert parse_instruction("r") is Operation.RA


@pytest.mark.parametrize("line", ["x\n", "sa \n", "rrrr\n", "\n", "SA\n"])
def test_parse_rejects_unknown(line):
    with pytest.raises(InvalidInstruction) as info:
        parse_instruction(line)
    assert info.value.line == line


def test_execute_applies_in_order():
    stacks = execute(Stacks([3, 1, 2]), ["pb\n", "sa\n", "pa\n"])
    assert stacks.a == [3, 2, 1]
    assert stacks.b == []


def test_execute_stops_at_invalid_line():
    stacks = Stacks([2, 1, 3])
    with pytest.raises(InvalidInstruction):
        execute(stacks, ["sa\n", "bad\n", "sa\n"])
    assert stacks.a == [1, 2, 3]


def test_check_sorted_result():
    assert check([2, 1, 3], ["sa\n"]) is True


def test_check_unsorted_result():
    assert check([3, 2, 1], []) is False


def test_check_nonempty_b_is_failure():
    assert check([1, 2, 3], ["pb\n"]) is False


@pytest.mark.parametrize(
    "values",
    [[5, 4, 3, 2, 1], [3, 1, 2], [10, -4, 7, 0, 22, 13, -9, 1], list(range(30, 0, -1))],
)
def test_check_accepts_sorter_output(values):
    lines = [f"{op}\n" for op in sort_operations(values)]
    assert check(values, lines) is True


def _run(monkeypatch, capsys, argv, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main(argv)
    out, err = capsys.readouterr()
    return code, out, err


def test_main_ok(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, ["2", "1"], "sa\n")
    assert (code, out, err) == (0, "OK\n", "")


def test_main_ko(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, ["2 1 3"], "ra\n")
    assert (out, err) == ("KO\n", "")


def test_main_invalid_instruction(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, ["2", "1"], "sa\nnope\n")
    assert (out, err) == ("", "Error\n")


def test_main_bad_arguments(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, ["1", "1"], "")
    assert (out, err) == ("", "Error\n")


def test_main_without_arguments(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, [], "sa\n")
    assert (out, err) == ("", "")