"""
Utility modules for fluid-css.
"""

from fluid_css.utils.config import Config
from fluid_css.utils.logging import setup_logging, log_exception

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
]
