"""
Tests for Length parsing and rendering.
"""

import pytest

from fluid_css.css.length import Length, to_length


@pytest.mark.parametrize("text, number, unit", [
    ("16px", 16, "px"),
    ("1.5rem", 1.5, "rem"),
    (".5em", 0.5, "em"),
    ("-2.25rem", -2.25, "rem"),
    ("50%", 50, "%"),
    ("0", 0, None),
    ("  20rem ", 20, "rem"),
])
def test_parse(text, number, unit):
    length = Length.parse(text)
    assert length.number == number
    assert length.unit == unit


def test_parse_numbers():
    assert Length.parse(0) == Length(0)
    assert Length.parse(1.5) == Length(1.5, None)


@pytest.mark.parametrize("value", ["", "big", "1rem 2rem", "theme(spacing.4)", None, True, [1]])
def test_parse_rejects_non_lengths(value):
    assert Length.parse(value) is None


def test_parse_passes_lengths_through():
    length = Length(2, "rem")
    assert Length.parse(length) is length


def test_css_text_round_trips():
    for length in (Length(16, "px"), Length(0.625, "rem"), Length(-1.5, "vw"), Length(100, "%"), Length(0)):
        assert Length.parse(length.css_text) == length


def test_css_text():
    assert Length(16.0, "px").css_text == "16px"
    assert Length(1.125, "rem").css_text == "1.125rem"
    assert Length(0).css_text == "0"


def test_unit_compatibility():
    assert Length(1, "rem").is_unit_compatible(Length(2, "rem"))
    assert not Length(1, "rem").is_unit_compatible(Length(16, "px"))
    assert not Length(0).is_unit_compatible(Length(0))


def test_scale():
    assert Length(20, "rem").scale(5) == Length(100, "rem")


def test_lengths_are_immutable():
    length = Length(1, "rem")
    with pytest.raises(AttributeError):
        length.number = 2


def test_equality_and_hashing():
    assert Length(1, "rem") == Length(1.0, "rem")
    assert Length(1, "rem") != Length(1, "em")
    assert len({Length(1, "rem"), Length(1.0, "rem")}) == 1


def test_to_length_resolves_theme(context):
    assert to_length("theme(spacing.4)", context) == Length(1, "rem")
    assert to_length("theme('fontSize.lg')", context) == Length(1.125, "rem")
    assert to_length("theme(spacing[2.5])", context) == Length(0.625, "rem")


def test_to_length_unknown_theme_path(context):
    assert to_length("theme(spacing.99)", context) is None


def test_to_length_plain_values(context):
    assert to_length("2rem", context) == Length(2, "rem")
    assert to_length("nope", context) is None
