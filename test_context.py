"""
Tests for the context: axes, default breakpoints and theme lookups.
"""

import pytest

from fluid_css.context import DEFAULT_BREAKPOINT_KEYS, Axis, AxisKind, Context, Side
from fluid_css.css.length import Length
from fluid_css.utils.config import Config


@pytest.mark.parametrize("value, expected", [
    (None, Axis.viewport()),
    (False, Axis.viewport()),
    (True, Axis.container()),
    ("sidebar", Axis.container("sidebar")),
    (Axis.container("card"), Axis.container("card")),
])
def test_axis_coerce(value, expected):
    assert Axis.coerce(value) == expected


def test_axis_units_and_markers():
    assert Axis.viewport().unit == "vw"
    assert Axis.viewport().comment_suffix == ""
    assert Axis.container().unit == "cqw"
    assert Axis.container().comment_suffix == " (container)"
    assert Axis.container("card").comment_suffix == " (container: card)"


def test_viewport_axis_cannot_be_named():
    with pytest.raises(ValueError):
        Axis(AxisKind.SCREEN, "card")


def test_default_breakpoint_table_covers_every_side_and_axis():
    assert set(DEFAULT_BREAKPOINT_KEYS) == {(side, kind) for side in Side for kind in AxisKind}


def test_default_breakpoints(context):
    assert context.default_breakpoint(Side.START, AxisKind.SCREEN) == '20rem'
    assert context.default_breakpoint(Side.END, AxisKind.SCREEN) == '80rem'
    assert context.default_breakpoint(Side.START, AxisKind.CONTAINER) == '20rem'
    assert context.default_breakpoint(Side.END, AxisKind.CONTAINER) == '60rem'
    assert Context().default_breakpoint(Side.START, AxisKind.SCREEN) is None


def test_breakpoints_by_axis(context):
    assert context.breakpoints(AxisKind.SCREEN) == {'md': '48rem', 'lg': '60rem'}
    assert context.breakpoints(AxisKind.CONTAINER) == {'md': '40rem'}


def test_theme_lookup(context):
    assert context.theme('spacing.4') == '1rem'
    assert context.theme('"spacing.4"') == '1rem'
    assert context.theme('spacing[2.5]') == '0.625rem'
    # fontSize entries pair the size with a line height
    assert context.theme('fontSize.base') == '1rem'
    assert context.theme('screens.wide') == '90rem'


def test_theme_lookup_missing(context):
    assert context.theme('spacing.99') is None
    assert context.theme('colors.red.500') is None
    assert Context().theme('spacing.4') is None


def test_from_config_uses_smallest_and_largest_breakpoints():
    context = Context.from_config(Config())
    assert context.default_start_screen == Length(40, 'rem')
    assert context.default_end_screen == Length(96, 'rem')
    assert context.default_start_container == Length(16, 'rem')
    assert context.default_end_container == Length(80, 'rem')
    assert context.screens['md'] == '48rem'


def test_from_config_explicit_defaults():
    config = Config()
    config.set('defaults.start_screen', '20rem')
    config.set('screens', {'tablet': '700px', 'desktop': '1200px'})
    context = Context.from_config(config)
    assert context.default_start_screen == '20rem'
    assert context.default_end_screen == Length(1200, 'px')
    assert context.screens == {'tablet': '700px', 'desktop': '1200px'}
