"""
Context for generating fluid values: the scaling axis, default breakpoints,
named screens and containers, and theme lookups.
"""

import logging
import re
from enum import Enum
from typing import Any, Dict, Optional, Union

from fluid_css.css.length import Length, RawValue

logger = logging.getLogger(__name__)

THEME_PATH_PATTERN = re.compile(r"\[([^\]]+)\]|([^.\[\]]+)")


class Side(Enum):
    """Which end of the interpolation a breakpoint belongs to."""
    START = 'start'
    END = 'end'


class AxisKind(Enum):
    """What the interpolation scales against."""
    SCREEN = 'screen'
    CONTAINER = 'container'


# (side, axis kind) -> Context attribute holding the default breakpoint
DEFAULT_BREAKPOINT_KEYS = {
    (Side.START, AxisKind.SCREEN): 'default_start_screen',
    (Side.END, AxisKind.SCREEN): 'default_end_screen',
    (Side.START, AxisKind.CONTAINER): 'default_start_container',
    (Side.END, AxisKind.CONTAINER): 'default_end_container',
}

BREAKPOINT_MAP_KEYS = {
    AxisKind.SCREEN: 'screens',
    AxisKind.CONTAINER: 'containers',
}

AXIS_UNITS = {
    AxisKind.SCREEN: 'vw',
    AxisKind.CONTAINER: 'cqw',
}


class Axis:
    """
    The axis a fluid value scales against.

    Either the viewport, or a container that may be named.
    """

    __slots__ = ('kind', 'name')

    def __init__(self, kind: AxisKind, name: Optional[str] = None):
        if kind is AxisKind.SCREEN and name:
            raise ValueError("Only container axes can be named")
        self.kind = kind
        self.name = name or None

    @classmethod
    def viewport(cls) -> 'Axis':
        return cls(AxisKind.SCREEN)

    @classmethod
    def container(cls, name: Optional[str] = None) -> 'Axis':
        return cls(AxisKind.CONTAINER, name)

    @classmethod
    def coerce(cls, value: Union['Axis', bool, str, None]) -> 'Axis':
        """
        Build an axis from the loose at_container form.

        Args:
            value: None/False for the viewport, True for an unnamed
                container, a string for a named container, or an Axis

        Returns:
            Axis: The matching axis
        """
        if isinstance(value, Axis):
            return value
        if not value:
            return cls.viewport()
        if isinstance(value, str):
            return cls.container(value)
        return cls.container()

    @property
    def is_container(self) -> bool:
        return self.kind is AxisKind.CONTAINER

    @property
    def unit(self) -> str:
        """Get the CSS unit for 1% of the axis width."""
        return AXIS_UNITS[self.kind]

    @property
    def comment_suffix(self) -> str:
        """Get the marker written into provenance comments."""
        if not self.is_container:
            return ''
        if self.name:
            return f" (container: {self.name})"
        return " (container)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Axis):
            return NotImplemented
        return self.kind is other.kind and self.name == other.name

    def __hash__(self) -> int:
        return hash((self.kind, self.name))

    def __repr__(self) -> str:
        if self.is_container:
            return f"Axis.container({self.name!r})"
        return "Axis.viewport()"


BreakpointValue = Union[Length, RawValue]


class Context:
    """
    Read-only configuration for one generate or rewrite call.
    """

    def __init__(self,
                 theme: Optional[Dict[str, Any]] = None,
                 default_start_screen: Optional[BreakpointValue] = None,
                 default_end_screen: Optional[BreakpointValue] = None,
                 default_start_container: Optional[BreakpointValue] = None,
                 default_end_container: Optional[BreakpointValue] = None,
                 screens: Optional[Dict[str, BreakpointValue]] = None,
                 containers: Optional[Dict[str, BreakpointValue]] = None):
        """
        Initialize the context.

        Args:
            theme: Nested theme values used by theme(...) lookups
            default_start_screen: Start breakpoint when none is given (viewport)
            default_end_screen: End breakpoint when none is given (viewport)
            default_start_container: Start breakpoint when none is given (container)
            default_end_container: End breakpoint when none is given (container)
            screens: Named viewport breakpoints
            containers: Named container breakpoints
        """
        self._theme = theme or {}
        self.default_start_screen = default_start_screen
        self.default_end_screen = default_end_screen
        self.default_start_container = default_start_container
        self.default_end_container = default_end_container
        self.screens = dict(screens or {})
        self.containers = dict(containers or {})

    def theme(self, lookup: str) -> Any:
        """
        Look up a theme value by path.

        Args:
            lookup: Dotted path such as 'fontSize.lg' or "spacing[2.5]",
                optionally quoted

        Returns:
            Any: The theme value, or None if the path doesn't exist
        """
        path = lookup.strip().strip('\'"')
        value: Any = self._theme
        for bracketed, plain in THEME_PATH_PATTERN.findall(path):
            key = (bracketed or plain).strip()
            if not isinstance(value, dict) or key not in value:
                logger.debug(f"Theme path {lookup!r} not found")
                return None
            value = value[key]

        # fontSize-style entries pair the size with extra settings
        if isinstance(value, (list, tuple)):
            value = value[0] if value else None
        return value

    def default_breakpoint(self, side: Side, kind: AxisKind) -> Optional[BreakpointValue]:
        """Get the configured default breakpoint for a side of an axis."""
        return getattr(self, DEFAULT_BREAKPOINT_KEYS[(side, kind)])

    def breakpoints(self, kind: AxisKind) -> Dict[str, BreakpointValue]:
        """Get the named breakpoints for an axis kind."""
        return getattr(self, BREAKPOINT_MAP_KEYS[kind])

    @classmethod
    def from_config(cls, config) -> 'Context':
        """
        Build a context from a Config.

        Missing defaults fall back to the smallest and largest named
        breakpoint of the axis.

        Args:
            config: Loaded configuration

        Returns:
            Context: The context
        """
        screens = config.get('screens', {}) or {}
        containers = config.get('containers', {}) or {}
        smallest_screen, largest_screen = _breakpoint_range(screens)
        smallest_container, largest_container = _breakpoint_range(containers)

        context = cls(
            theme=config.get('theme', {}),
            default_start_screen=config.get('defaults.start_screen') or smallest_screen,
            default_end_screen=config.get('defaults.end_screen') or largest_screen,
            default_start_container=config.get('defaults.start_container') or smallest_container,
            default_end_container=config.get('defaults.end_container') or largest_container,
            screens=screens,
            containers=containers,
        )
        logger.debug(f"Context built with {len(screens)} screens and {len(containers)} containers")
        return context


def _breakpoint_range(breakpoints: Dict[str, BreakpointValue]):
    """Get the smallest and largest length-valued breakpoints."""
    lengths = [Length.parse(value) for value in breakpoints.values()]
    lengths = [length for length in lengths if length is not None]
    if not lengths:
        return None, None
    return (min(lengths, key=lambda length: length.number),
            max(lengths, key=lambda length: length.number))
