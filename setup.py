#!/usr/bin/env python3
"""Setup script for threeset package.
"""

from setuptools import find_packages, setup

setup(
    name="threeset",
    version="0.1.0",
    description="Word-order and script invariant similarity for short strings",
    author="threeset Team",
    packages=find_packages(include=["threeset*"]),
    python_requires=">=3.10",
    install_requires=[
        "pandas>=1.5.0",
        "rapidfuzz>=3.0.0",
        "pyyaml>=6.0",
        "Unidecode>=1.3.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "pandas-stubs>=2.0.0",
            "types-PyYAML>=6.0.0",
        ],
    },
)
