#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name="eloratings",
    version="0.0.1",
    author="Various",
    description="Elo rating calculator with configurable K-factor rules.",
    long_description=__doc__,
    packages=find_packages(exclude=("analysis", "analysis.*", "unit_tests", "unit_tests.*")),
    python_requires=">=3.8",
    install_requires=[
        "filelock",
        "python-dateutil",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=True,
    license="MIT",
)
