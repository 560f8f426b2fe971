#!/usr/bin/env python3
"""
Setup script for Artist Pair Finder package.
"""

from setuptools import setup, find_packages

# Read version from package metadata without importing its dependencies
version = {}
with open("artist_pairs/__init__.py") as f:
    for line in f:
        if line.startswith("__") and "=" in line and "(" not in line:
            key, value = line.split("=", 1)
            version[key.strip()] = value.strip().strip('"')

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="artist-pairs",
    version=version["__version__"],
    author=version["__author__"],
    description="Report artist pairs that co-occur in many customers' favorite lists",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["artist_pairs", "artist_pairs.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "artist-pairs=artist_pairs.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: General",
    ],
    keywords="artists co-occurrence pairs favorites",
)
