"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by host code implementing bundle locators.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "BundleSource",
    "LocaleKey",
]

LocaleKey: TypeAlias = str
"""POSIX locale key as used in bundle file names (e.g., 'de', 'pt_BR'); '' is the base bundle."""

BundleSource: TypeAlias = str
"""Raw properties-file text of one bundle."""
