#!/usr/bin/env python3
"""
fluid-css - Generate and rewrite fluid CSS clamp() values.

Main entry point when running from a source checkout.
"""

import os
import sys

# Add the package to the path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from fluid_css.main import main

if __name__ == "__main__":
    sys.exit(main())
