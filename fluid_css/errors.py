"""
Errors raised while generating or rewriting fluid values.
"""

import logging
from typing import Any, NoReturn

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    'missing-start': "Missing start value",
    'missing-end': "Missing end value",
    'non-length-start': "Start value {0!r} is not a length",
    'non-length-end': "End value {0!r} is not a length",
    'mismatched-units': "Start value {0} and end value {1} must share a unit",
    'no-change': "Start and end values are both {0}",
    'missing-default-start-bp': "No start breakpoint given and no default start breakpoint configured",
    'missing-default-end-bp': "No end breakpoint given and no default end breakpoint configured",
    'non-length-start-bp': "Start breakpoint {0!r} is not a length",
    'non-length-end-bp': "End breakpoint {0!r} is not a length",
    'mismatched-bp-units': "Start breakpoint {0} and end breakpoint {1} must share a unit",
    'no-change-bp': "Start and end breakpoints are both {0}",
    'mismatched-bp-val-units': "Breakpoints must use the same unit as the values",
    'bp-not-found': "Breakpoint {1!r} not found in {0}",
    'no-utility': "No fluid declarations found to rewrite",
    'bad-config': "Could not load configuration from {0}: {1}",
}


class FluidError(Exception):
    """Error raised when a fluid value can't be generated or rewritten."""

    def __init__(self, kind: str, *details: Any):
        """
        Initialize the error.

        Args:
            kind: Error kind, e.g. 'mismatched-units'
            *details: Values the message refers to
        """
        self.kind = kind
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        template = ERROR_MESSAGES.get(self.kind)
        if template is None:
            return self.kind
        try:
            return template.format(*self.details)
        except IndexError:
            # Raised without the values the message needs
            return self.kind


class ConfigError(FluidError):
    """Error raised when a configuration file can't be read."""

    def __init__(self, path: str, reason: Any):
        super().__init__('bad-config', path, reason)


def error(kind: str, *details: Any) -> NoReturn:
    """
    Raise a FluidError of the given kind.

    Args:
        kind: Error kind
        *details: Values the message refers to
    """
    logger.debug(f"Raising {kind} with {details!r}")
    raise FluidError(kind, *details)
