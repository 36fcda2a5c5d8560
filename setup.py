#!/usr/bin/env python
import os
import re

from setuptools import setup

current_dir = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(current_dir, "bigfrac", "__init__.py")) as f:
    __version__ = re.search(
        r"^__version__ = \"(.*)\"", f.read(), re.MULTILINE).group(1)

setup(
    name="bigfrac",
    version=__version__,
    description="Immutable arbitrary precision fractions",
    author="Dean Shaff",
    author_email="dean.shaff@gmail.com",
    packages=["bigfrac"],
    python_requires=">=3.8",
    install_requires=[
        "numpy"
    ]
)
