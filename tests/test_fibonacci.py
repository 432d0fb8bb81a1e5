import pytest

from exercisekit.fibonacci import fib, main


@pytest.mark.parametrize("n", [0, 1])
def test_base_cases_return_n(n):
    assert fib(n) == n


@pytest.mark.parametrize("n", range(2, 30))
def test_recurrence_holds(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_sequence_is_non_decreasing():
    values = [fib(n) for n in range(25)]
    assert values == sorted(values)


def test_negative_input_rejected():
    with pytest.raises(ValueError):
        fib(-1)


def test_main_prints_fib_20(capsys):
    assert main() == 0
    assert capsys.readouterr().out == "fib(20) = 6765\n"