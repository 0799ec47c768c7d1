"""setup.py for AFC — pure-Python decoder for compressed audio fingerprints.

The only runtime dependency is numpy (bit unpacking and uint32 results).
Test tooling is installed with the ``test`` extra:

    pip install -e .[test]
    pytest tests/
"""

from setuptools import find_packages, setup


def _read_version():
    """Read __version__ from afc/__init__.py without importing the package."""
    import os
    import re

    path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                        "afc", "__init__.py")
    with open(path, encoding="utf-8") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError("Unable to find __version__ in afc/__init__.py")
    return match.group(1)


setup(
    name="afc",
    version=_read_version(),
    description="Decoder for compressed audio fingerprints",
    packages=find_packages(include=["afc", "afc.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.17",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
)
