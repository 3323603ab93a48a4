"""
Fluid value generation.

A fluid value is a CSS clamp() that scales linearly with the viewport (or
container) width between two breakpoints. Every generated value ends with a
provenance comment recording the values and breakpoints it was made from:

    clamp(1rem,0.67rem + 1.67vw,2rem)/* fluid from 1rem at 20rem to 2rem at 80rem */

The comment is the only record of those parameters, so parse() reads it back
and rewrite() uses it to regenerate values against new breakpoints.
"""

import logging
import re
from typing import Any, Callable, Dict, Optional, Protocol, Tuple, Union

from fluid_css.context import Axis, BREAKPOINT_MAP_KEYS, Context, Side
from fluid_css.css.declarations import Declaration
from fluid_css.css.length import Length, RawValue, to_length
from fluid_css.errors import error
from fluid_css.utils.math import clamp, precision, to_precision

logger = logging.getLogger(__name__)

# Provenance comment grammars by version. New fields get a new version;
# older versions stay so existing stylesheets keep parsing.
COMMENT_PATTERNS = {
    1: re.compile(
        r'/\* (?:not )?fluid from (.*?) at (.*?) to (.*?) at (.*?)'
        r'(?: \((container)(?:: )?(.*?)\))?'
        r'(?:;.*?)? \*/$'
    ),
}
COMMENT_GRAMMAR_VERSION = max(COMMENT_PATTERNS)
FLUID_COMMENT_PATTERN = COMMENT_PATTERNS[COMMENT_GRAMMAR_VERSION]

SC144_MARKER = 'WCAG SC 1.4.4'

ARBITRARY_VALUE_PATTERN = re.compile(r'^\[(.*?)\]$')

# Browser zoom scales rendered pixels but not the viewport/container width
ZOOM_FACTOR = 5

LengthInput = Union[Length, RawValue, None]
AxisInput = Union[Axis, bool, str, None]


class DeclarationContainer(Protocol):
    """Anything that visits its declarations, such as a block or stylesheet."""

    def walk_decls(self, callback: Callable[[Declaration], None]) -> None:
        ...


class FluidParameters:
    """Parameters recovered from a provenance comment."""

    def __init__(self, start: Length, start_bp: Length, end: Length, end_bp: Length,
                 axis: Axis, check_sc144: bool = False):
        self.start = start
        self.start_bp = start_bp
        self.end = end
        self.end_bp = end_bp
        self.axis = axis
        self.check_sc144 = check_sc144

    @property
    def container(self) -> Union[str, bool]:
        """Get the container name, or whether a container axis was used."""
        # An unnamed container reads as True, not as an empty name
        return self.axis.name or self.axis.is_container

    def as_dict(self) -> Dict[str, Any]:
        return {
            'start': self.start.css_text if self.start else None,
            'start_bp': self.start_bp.css_text if self.start_bp else None,
            'end': self.end.css_text if self.end else None,
            'end_bp': self.end_bp.css_text if self.end_bp else None,
            'container': self.container,
            'check_sc144': self.check_sc144,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FluidParameters):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return f"FluidParameters({self.as_dict()!r})"


def format_comment(start: Length, start_bp: Length, end: Length, end_bp: Length,
                   axis: Axis, checked_sc144: bool = False,
                   failing_bp: Optional[Length] = None) -> str:
    """
    Build the provenance comment for a fluid value.

    Args:
        start: Value at the start breakpoint
        start_bp: Start breakpoint
        end: Value at the end breakpoint
        end_bp: End breakpoint
        axis: Axis the value scales against
        checked_sc144: Whether the SC 1.4.4 result should be recorded
        failing_bp: Breakpoint where SC 1.4.4 fails, if it does

    Returns:
        str: The comment
    """
    result = ''
    if checked_sc144:
        if failing_bp is not None:
            result = f"; fails {SC144_MARKER} at i.e. {failing_bp.css_text}"
        else:
            result = f"; passes {SC144_MARKER}"
    return (f"/* {'not ' if failing_bp is not None else ''}fluid from {start.css_text} "
            f"at {start_bp.css_text} to {end.css_text} at {end_bp.css_text}"
            f"{axis.comment_suffix}{result} */")


def resolve_breakpoint(raw: LengthInput, side: Side, context: Context,
                       axis: AxisInput = None) -> Length:
    """
    Resolve a breakpoint to a length.

    Unit compatibility isn't checked here since the values it pairs with
    aren't known yet.

    Args:
        raw: Breakpoint as a Length, CSS text or theme(...) reference;
            falsy to use the context default
        side: Which breakpoint this is
        context: Context supplying defaults and theme lookups
        axis: Axis the breakpoint lies on

    Returns:
        Length: The breakpoint
    """
    axis = Axis.coerce(axis)
    if not raw:
        raw = context.default_breakpoint(side, axis.kind)
        if not raw:
            error(f"missing-default-{side.value}-bp")
    if isinstance(raw, Length):
        return raw

    breakpoint = to_length(raw, context)
    if breakpoint is None:
        error(f"non-length-{side.value}-bp", raw)
    return breakpoint


def _fails_sc144(start: Length, start_bp: Length, end: Length, end_bp: Length,
                 slope: float, intercept: float) -> Optional[Length]:
    """
    Simulate WCAG SC 1.4.4 (resize text to 200%) at both breakpoints.

    At 500% zoom the value must be at least twice the unzoomed value.

    Returns:
        Optional[Length]: The breakpoint where it fails, or None if it passes
    """
    def zoom1(axis_value: float) -> float:
        return clamp(start.number, intercept + slope * axis_value, end.number)

    def zoom5(axis_value: float) -> float:
        # Not ZOOM_FACTOR * zoom1(): zooming doesn't change the axis width
        return clamp(ZOOM_FACTOR * start.number,
                     ZOOM_FACTOR * intercept + slope * axis_value,
                     ZOOM_FACTOR * end.number)

    if ZOOM_FACTOR * start.number < 2 * zoom1(ZOOM_FACTOR * start_bp.number):
        return start_bp.scale(ZOOM_FACTOR)
    if zoom5(end_bp.number) < 2 * end.number:
        return end_bp
    return None


def generate(start: LengthInput, end: LengthInput, context: Context,
             start_bp: LengthInput = None, end_bp: LengthInput = None,
             at_container: AxisInput = None, check_sc144: bool = False,
             check_bp: bool = False) -> str:
    """
    Generate a fluid clamp() value with its provenance comment.

    Problems with the breakpoints only produce the comment (without a
    clamp()) unless check_bp is set, since the breakpoints may still be
    replaced by a later rewrite. Failing SC 1.4.4 also produces only the
    comment.

    Args:
        start: Value at the start breakpoint
        end: Value at the end breakpoint
        context: Context supplying defaults and theme lookups
        start_bp: Start breakpoint (context default if omitted)
        end_bp: End breakpoint (context default if omitted)
        at_container: Scale against a container instead of the viewport;
            True or a container name
        check_sc144: Check WCAG SC 1.4.4 and record the result
        check_bp: Raise on breakpoint problems instead of degrading

    Returns:
        str: The fluid value, or just its comment
    """
    axis = Axis.coerce(at_container)

    if not start:
        error('missing-start')
    start_length = to_length(start, context)
    if start_length is None:
        error('non-length-start', start)

    if not end:
        error('missing-end')
    end_length = to_length(end, context)
    if end_length is None:
        error('non-length-end', end)

    start_bp_length = resolve_breakpoint(start_bp, Side.START, context, axis)
    end_bp_length = resolve_breakpoint(end_bp, Side.END, context, axis)

    if not start_length.is_unit_compatible(end_length):
        error('mismatched-units', start_length, end_length)
    unit = start_length.unit

    if start_length.number == end_length.number:
        error('no-change', start_length)

    comment = format_comment(start_length, start_bp_length, end_length, end_bp_length, axis)

    if not start_bp_length.is_unit_compatible(end_bp_length):
        if check_bp:
            error('mismatched-bp-units', start_bp_length, end_bp_length)
        logger.debug(f"Breakpoint units differ, keeping comment only: {comment}")
        return comment

    if start_bp_length.number == end_bp_length.number:
        if check_bp:
            error('no-change-bp', start_bp_length)
        logger.debug(f"Breakpoints are equal, keeping comment only: {comment}")
        return comment

    if unit != start_bp_length.unit:
        if check_bp:
            error('mismatched-bp-val-units')
        logger.debug(f"Value and breakpoint units differ, keeping comment only: {comment}")
        return comment

    places = max(precision(start_length.number), precision(start_bp_length.number),
                 precision(end_length.number), precision(end_bp_length.number), 2)

    # clamp() needs its bounds in ascending order
    minimum = Length(min(start_length.number, end_length.number), unit)
    maximum = Length(max(start_length.number, end_length.number), unit)
    slope = ((end_length.number - start_length.number)
             / (end_bp_length.number - start_bp_length.number))
    intercept = start_length.number - start_bp_length.number * slope

    failing_bp = None
    if check_sc144:
        failing_bp = _fails_sc144(start_length, start_bp_length, end_length,
                                  end_bp_length, slope, intercept)

    comment = format_comment(start_length, start_bp_length, end_length, end_bp_length,
                             axis, checked_sc144=check_sc144, failing_bp=failing_bp)

    if failing_bp is not None:
        logger.debug(f"Fails SC 1.4.4 at {failing_bp.css_text}, keeping comment only")
        return comment

    return (f"clamp({minimum.css_text},{to_precision(intercept, places)}{unit} + "
            f"{to_precision(slope * 100, places)}{axis.unit},{maximum.css_text}){comment}")


def parse(text: str) -> Optional[FluidParameters]:
    """
    Recover the parameters of a fluid value from its provenance comment.

    Args:
        text: CSS value, possibly ending with a provenance comment

    Returns:
        Optional[FluidParameters]: The parameters, or None if the value
            isn't fluid
    """
    match = FLUID_COMMENT_PATTERN.search(text or '')
    if not match:
        return None

    raw_start, raw_start_bp, raw_end, raw_end_bp, container, container_name = match.groups()
    if container:
        axis = Axis.container(container_name)
    else:
        axis = Axis.viewport()

    return FluidParameters(
        start=Length.parse(raw_start),
        start_bp=Length.parse(raw_start_bp),
        end=Length.parse(raw_end),
        end_bp=Length.parse(raw_end_bp),
        axis=axis,
        check_sc144=SC144_MARKER in match.group(0),
    )


def _resolve_end_breakpoint(end_bp: LengthInput, context: Context, axis: Axis) -> LengthInput:
    """Resolve a named or [arbitrary] end breakpoint for rewrite()."""
    if not isinstance(end_bp, str):
        return end_bp

    match = ARBITRARY_VALUE_PATTERN.match(end_bp)
    if match:
        return match.group(1)

    breakpoint = context.breakpoints(axis.kind).get(end_bp)
    if not breakpoint:
        error('bp-not-found', BREAKPOINT_MAP_KEYS[axis.kind], end_bp)
    return breakpoint


def rewrite(block: DeclarationContainer, context: Context,
            breakpoints: Tuple[LengthInput, LengthInput], at_container: AxisInput = None) -> None:
    """
    Regenerate every fluid declaration in a block against new breakpoints.

    The start and end values come from each declaration's provenance comment.
    The end breakpoint is either a name from the context's screens (or
    containers) or an [arbitrary] value used as-is.

    Args:
        block: Anything with walk_decls(callback) visiting declarations
            that have a mutable value
        context: Context supplying breakpoints and theme lookups
        breakpoints: New (start, end) breakpoints
        at_container: Scale against a container instead of the viewport
    """
    axis = Axis.coerce(at_container)
    start_bp, end_bp = breakpoints
    end_bp = _resolve_end_breakpoint(end_bp, context, axis)

    rewritten = []

    def rewrite_declaration(declaration: Declaration) -> None:
        parsed = parse(declaration.value)
        if parsed is None:
            return

        declaration.value = generate(parsed.start, parsed.end, context,
                                     start_bp=start_bp, end_bp=end_bp,
                                     at_container=axis,
                                     check_sc144=parsed.check_sc144,
                                     check_bp=True)
        rewritten.append(declaration)

    block.walk_decls(rewrite_declaration)

    # A block without fluid values means the breakpoints were applied to
    # something that was never fluid
    if not rewritten:
        error('no-utility')
    logger.debug(f"Rewrote {len(rewritten)} fluid declarations")
