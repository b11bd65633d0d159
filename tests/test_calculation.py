import math

import pytest

from app.calculation import accuracy_percent, round_half_up, smooth, words_per_minute


def test_accuracy_percent():
    assert accuracy_percent(0, 0) == 100.0
    assert accuracy_percent(3, 4) == 75.0
    assert accuracy_percent(0, 7) == 0.0


def test_words_per_minute():
    assert words_per_minute(25, 60.0) == pytest.approx(5.0)
    assert words_per_minute(50, 30.0) == pytest.approx(20.0)
    assert words_per_minute(50, 0) == 0.0
    assert words_per_minute(50, -1) == 0.0
    assert words_per_minute(50, math.nan) == 0.0


@pytest.mark.parametrize("value,expected", [
    (0.0, 0), (0.49, 0), (0.5, 1), (1.5, 2), (2.5, 3), (7.4999, 7), (-2.5, -3),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_smooth():
    assert smooth([]) == []
    assert smooth([10.0, 10.0]) == [10.0, 10.0]
    assert smooth([0.0, 100.0], factor=0.5) == [0.0, 50.0]
