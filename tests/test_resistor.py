import itertools

import pytest

from minitools.resistor import resistor_combinations, main


def test_series_is_sum():
    result = resistor_combinations(3.1, 3.4, 6.5)
    assert result.series == pytest.approx(3.1 + 3.4 + 6.5)


def test_equal_resistors():
    r = 6.0
    result = resistor_combinations(r, r, r)
    assert result.parallel == pytest.approx(r / 3)
    assert result.first_with_rest_parallel == pytest.approx(r + r / 2)
    assert result.second_with_rest_parallel == pytest.approx(result.third_with_rest_parallel)


def test_parallel_below_smallest_and_series_above_largest():
    values = (3.1, 3.4, 6.5)
    result = resistor_combinations(*values)
    assert result.parallel < min(values)
    assert result.series > max(values)
    for mixed in list(result)[2:]:
        assert result.parallel < mixed < result.series


def test_series_and_parallel_ignore_order():
    values = (2.0, 5.0, 11.0)
    base = resistor_combinations(*values)
    for perm in itertools.permutations(values):
        other = resistor_combinations(*perm)
        assert other.series == pytest.approx(base.series)
        assert other.parallel == pytest.approx(base.parallel)


def test_iteration_order():
    result = resistor_combinations(1.0, 2.0, 4.0)
    assert list(result) == [
        result.series,
        result.parallel,
        result.first_with_rest_parallel,
        result.second_with_rest_parallel,
        result.third_with_rest_parallel,
    ]


def test_zero_resistance_raises():
    with pytest.raises(ZeroDivisionError):
        resistor_combinations(0.0, 1.0, 2.0)


def test_main(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(line.startswith("The value is: ") for line in lines)
    assert lines[0] == "The value is: 13.00"