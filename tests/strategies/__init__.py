"""Hypothesis strategies for i18nassets property-based testing.

Usage:
    from tests.strategies import message_codes, placeholder_values
    from tests.strategies.bundles import bundle_texts
"""

from .bundles import (
    brace_free_text,
    bundle_texts,
    escape_properties_value,
    message_codes,
    message_values,
    placeholder_values,
)

__all__ = [
    "brace_free_text",
    "bundle_texts",
    "escape_properties_value",
    "message_codes",
    "message_values",
    "placeholder_values",
]
