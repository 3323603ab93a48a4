"""
fluid-css - Fluid CSS clamp() values that scale between breakpoints.
"""

import logging

from fluid_css.context import Axis, AxisKind, Context, Side
from fluid_css.css.length import Length
from fluid_css.errors import ConfigError, FluidError
from fluid_css.fluid import FluidParameters, generate, parse, resolve_breakpoint, rewrite

# Package information
__version__ = "1.0.0"
__author__ = "fluid-css contributors"
__description__ = "Fluid CSS clamp() values that scale between breakpoints"

# Applications opt into output with fluid_css.utils.logging.setup_logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Axis',
    'AxisKind',
    'ConfigError',
    'Context',
    'FluidError',
    'FluidParameters',
    'Length',
    'Side',
    'generate',
    'parse',
    'resolve_breakpoint',
    'rewrite',
]
