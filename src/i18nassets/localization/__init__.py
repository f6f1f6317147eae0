"""Bundle location package for the i18n processor.

Submodules:
    types   - PEP 695 type aliases (LocaleKey, BundleSource)
    loading - BundleResourceLocator protocol, PathBundleLocator,
              MappingBundleLocator, BundleLoadResult

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18nassets.enums import LoadStatus
from i18nassets.localization.loading import (
    BundleLoadResult,
    BundleResourceLocator,
    MappingBundleLocator,
    PathBundleLocator,
)
from i18nassets.localization.types import BundleSource, LocaleKey

__all__ = [
    # Locator protocol and implementations
    "BundleResourceLocator",
    "PathBundleLocator",
    "MappingBundleLocator",
    # Load tracking
    "LoadStatus",
    "BundleLoadResult",
    # Type aliases for user code type annotations
    "BundleSource",
    "LocaleKey",
]
