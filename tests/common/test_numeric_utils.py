from __future__ import annotations

import pytest

from src.absence_tracker.absence_tracker.common.numeric_utils import clamp_non_negative, coerce_number, parse_decimal


@pytest.mark.parametrize(
    "value, expected",
    [
        (3, 3.0),
        (-2.5, -2.5),
        ("5,5", 5.5),
        ("5.5", 5.5),
        (" 7 ", 7.0),
        ("1,5,5", 0.0),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        ("inf", 0.0),
        ("nan", 0.0),
        (float("-inf"), 0.0),
        (10**400, 0.0),
        ("1" + "0" * 400, 0.0),
        ("1_000", 0.0),
    ],
)
def test_parse_decimal(value, expected):
    assert parse_decimal(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(4, 4.0), ("4.5", 4.5), ("4,5", 0.0), (None, 0.0), ([], 0.0), ("Infinity", 0.0), (10**400, 0.0), ("2_5", 0.0)],
)
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


def test_clamp_non_negative():
    assert clamp_non_negative(-1.0) == 0.0
    assert clamp_non_negative(2.5) == 2.5
