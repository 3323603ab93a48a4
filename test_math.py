"""
Tests for the numeric helpers.
"""

import pytest

from fluid_css.utils.math import clamp, format_number, precision, to_precision


@pytest.mark.parametrize("number, expected", [
    (16, "16"),
    (16.0, "16"),
    (1.5, "1.5"),
    (-0.25, "-0.25"),
    (-0.0, "0"),
    (0.1 + 0.2, "0.30000000000000004"),
])
def test_format_number(number, expected):
    assert format_number(number) == expected


@pytest.mark.parametrize("number, expected", [
    (16, 0),
    (16.0, 0),
    (1.5, 1),
    (1.125, 3),
    (-0.25, 2),
    (1e-7, 7),
])
def test_precision(number, expected):
    assert precision(number) == expected


def test_to_precision_rounds_and_drops_trailing_zeros():
    assert to_precision(26.666666, 2) == "26.67"
    assert to_precision(10.666666, 2) == "10.67"
    assert to_precision(2.0, 2) == "2"
    assert to_precision(2.5, 3) == "2.5"


def test_to_precision_never_renders_negative_zero():
    assert to_precision(-0.0001, 2) == "0"


def test_clamp():
    assert clamp(1, 0.5, 2) == 1
    assert clamp(1, 1.5, 2) == 1.5
    assert clamp(1, 3, 2) == 2
