"""
CSS length values.

Lengths are parsed with the tinycss2 tokenizer so that anything CSS accepts as
a number, percentage or dimension is accepted here too.
"""

import logging
import re
from typing import Any, Optional, Union

import tinycss2

from fluid_css.utils.math import format_number

logger = logging.getLogger(__name__)

THEME_FUNCTION_PATTERN = re.compile(r'^\s*theme\((.*?)\)\s*$')

RawValue = Union[str, int, float]


class Length:
    """
    An immutable number paired with a CSS unit.

    A plain number (e.g. unitless zero) has no unit.
    """

    __slots__ = ('_number', '_unit')

    def __init__(self, number: Union[int, float], unit: Optional[str] = None):
        """
        Initialize a length.

        Args:
            number: Numeric part
            unit: Unit such as 'px', 'rem' or '%' (None for a plain number)
        """
        object.__setattr__(self, '_number', float(number))
        object.__setattr__(self, '_unit', unit or None)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Length is immutable")

    @property
    def number(self) -> float:
        return self._number

    @property
    def unit(self) -> Optional[str]:
        return self._unit

    @property
    def css_text(self) -> str:
        """Get the canonical CSS text of the length."""
        return f"{format_number(self._number)}{self._unit or ''}"

    def is_unit_compatible(self, other: 'Length') -> bool:
        """
        Check whether two lengths can be combined.

        Args:
            other: Length to compare with

        Returns:
            bool: True if both have the same, non-empty unit
        """
        return bool(self._unit) and self._unit == other.unit

    def scale(self, factor: Union[int, float]) -> 'Length':
        """Get a new length with the number multiplied by factor."""
        return Length(self._number * factor, self._unit)

    @classmethod
    def parse(cls, value: Union[RawValue, 'Length', None]) -> Optional['Length']:
        """
        Parse a length from CSS text.

        Args:
            value: CSS text such as '1.5rem', or a plain int/float

        Returns:
            Optional[Length]: Parsed length, or None if the value isn't one
        """
        if isinstance(value, Length):
            return value
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, (int, float)):
            return cls(value)
        if not isinstance(value, str):
            return None

        token = tinycss2.parse_one_component_value(value, skip_comments=True)
        if token.type == 'dimension':
            return cls(token.value, token.unit)
        if token.type == 'percentage':
            return cls(token.value, '%')
        if token.type == 'number':
            return cls(token.value)

        logger.debug(f"Not a length: {value!r}")
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self._number == other.number and self._unit == other.unit

    def __hash__(self) -> int:
        return hash((self._number, self._unit))

    def __repr__(self) -> str:
        return f"Length({self.css_text!r})"

    def __str__(self) -> str:
        return self.css_text


def to_length(value: Union[RawValue, Length, None], context) -> Optional[Length]:
    """
    Convert a raw value to a length, resolving theme() lookups first.

    Args:
        value: Length, CSS text or a theme(...) reference
        context: Context providing the theme lookup

    Returns:
        Optional[Length]: Resolved length, or None if it isn't one
    """
    if isinstance(value, Length):
        return value
    if isinstance(value, str):
        match = THEME_FUNCTION_PATTERN.match(value)
        if match and match.group(1):
            value = context.theme(match.group(1))
            logger.debug(f"Resolved theme({match.group(1)}) to {value!r}")
    return Length.parse(value)
