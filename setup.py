from __future__ import annotations

import os

from setuptools import setup


def read_version() -> str:
    """Read the version, preferring the PKG_VERSION environment variable."""
    env_version = os.getenv("PKG_VERSION", "").strip()
    if env_version:
        return env_version.lstrip("v")
    return "0.1.0"


setup(
    name="bitmap-index",
    version=read_version(),
    description="In-memory inverted index from string flags to packed 32-bit bitsets.",
    long_description="In-memory inverted index from string flags to packed 32-bit bitsets.",
    long_description_content_type="text/plain",
    packages=["bitmap_index"],
    python_requires=">=3.8",
    install_requires=[
        "Levenshtein",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
