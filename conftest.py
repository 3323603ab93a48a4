"""
Shared fixtures for the fluid-css tests.
"""

import logging

import pytest

from fluid_css.context import Context


@pytest.fixture
def context():
    """A context with screen and container defaults and a small theme."""
    return Context(
        theme={
            'fontSize': {
                'base': ['1rem', {'lineHeight': '1.5rem'}],
                'lg': ['1.125rem', {'lineHeight': '1.75rem'}],
            },
            'spacing': {'4': '1rem', '2.5': '0.625rem'},
            'screens': {'wide': '90rem'},
        },
        default_start_screen='20rem',
        default_end_screen='80rem',
        default_start_container='20rem',
        default_end_container='60rem',
        screens={'md': '48rem', 'lg': '60rem'},
        containers={'md': '40rem'},
    )


@pytest.fixture(autouse=True)
def reset_fluid_logger():
    """Drop handlers the CLI installs so each test configures logging afresh."""
    yield
    logger = logging.getLogger('fluid_css')
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
