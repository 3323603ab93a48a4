#!/usr/bin/env python3
"""
fluid-css Setup
"""

import os

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))

# Read requirements from requirements.txt
with open(os.path.join(here, 'requirements.txt')) as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith('#')]

# Read long description from README.md
with open(os.path.join(here, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name="fluid-css",
    version="1.0.0",
    description="Fluid CSS clamp() values that scale between breakpoints",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="fluid-css contributors",
    packages=find_packages(include=["fluid_css", "fluid_css.*"]),
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "fluid-css=fluid_css.main:main",
        ],
    },
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Markup",
    ],
    keywords="css, clamp, fluid, responsive, typography",
)
