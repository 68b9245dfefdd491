"""Tests for half-up rounding."""

import pytest

from plankflow.core.rounding import round_half_up


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.5, 1),
        (2.5, 3),
        (3.5, 4),
        (2.49, 2),
        (2.51, 3),
        (0.0, 0),
        (154.0, 154),
    ],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_halves_do_not_round_to_even():
    assert round_half_up(2.5) != round(2.5)
