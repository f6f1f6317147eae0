"""Core utilities shared across syntax, runtime and localization layers.

Exports:
    is_babel_available: Whether the optional Babel dependency is importable
    require_babel: Fail fast with BabelImportError when Babel is missing
    BabelImportError: ImportError subclass with installation hint

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
