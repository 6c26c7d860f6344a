import pytest

from minitools.statslibrary import (
    find_mode,
    geometric_mean,
    harmonic_mean,
    main,
    remove_outliers,
)

SAMPLE = [2.3, 3.3, 5.1, 3.3, 7.8, 8.4, 6.6]


def test_harmonic_mean_of_equal_values():
    assert harmonic_mean([4.0, 4.0, 4.0]) == pytest.approx(4.0)


def test_geometric_mean_of_equal_values():
    assert geometric_mean([5.0, 5.0, 5.0]) == pytest.approx(5.0)


def test_geometric_mean_of_two_values():
    assert geometric_mean([2.0, 8.0]) == pytest.approx(4.0)


def test_means_are_ordered():
    arithmetic = sum(SAMPLE) / len(SAMPLE)
    assert harmonic_mean(SAMPLE) <= geometric_mean(SAMPLE) <= arithmetic


@pytest.mark.parametrize("func", [harmonic_mean, geometric_mean, find_mode])
def test_empty_input_raises(func):
    with pytest.raises(ValueError):
        func([])


def test_harmonic_mean_rejects_zero():
    with pytest.raises(ValueError):
        harmonic_mean([1.0, 0.0])


def test_remove_outliers_drops_far_value():
    assert remove_outliers([1.0, 2.0, 3.0, 100.0], 30.0) == [1.0, 2.0, 3.0]


def test_remove_outliers_keeps_all_with_large_threshold():
    assert remove_outliers(SAMPLE, 1000.0) == SAMPLE


def test_remove_outliers_result_within_threshold():
    mean = sum(SAMPLE) / len(SAMPLE)
    kept = remove_outliers(SAMPLE, 2.0)
    assert all(abs(value - mean) <= 2.0 for value in kept)
    assert len(kept) < len(SAMPLE)


def test_remove_outliers_empty():
    assert remove_outliers([], 1.0) == []


def test_find_mode_of_sample():
    mode, count = find_mode(SAMPLE)
    assert mode == pytest.approx(3.3)
    assert count == 2


def test_find_mode_tie_goes_to_first():
    assert find_mode([5.0, 7.0, 7.0, 5.0])[0] == 5.0


def test_main_prints_three_lines(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[2].startswith("The mode is 3.30")