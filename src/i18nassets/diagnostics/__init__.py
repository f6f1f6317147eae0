"""Diagnostic system for i18nassets errors.

Provides structured error diagnostics with codes, locations and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import BundleLoadError, I18nError, UnresolvedMessagesError
from .templates import ErrorTemplate

__all__ = [
    "BundleLoadError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "I18nError",
    "UnresolvedMessagesError",
]
