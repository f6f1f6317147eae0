"""Serialize a resolved catalog to the JavaScript lookup wrapper.

Each catalog entry becomes one line of an object literal:

    "code": "plain text"
    "code": ["literal", 0, "literal", 1]

The lines are embedded in a fixed wrapper that defines ``window.$L``. The
wrapper text is a compatibility contract with existing pages and is
reproduced byte for byte from ``i18nassets.constants``.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from i18nassets.constants import (
    ARRAY_SEPARATOR,
    TABLE_INDENT,
    TABLE_LINE_SEPARATOR,
    WRAPPER_PREFIX,
    WRAPPER_SUFFIX,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from i18nassets.runtime.resolver import CatalogEntry

    from .placeholders import TokenizedValue

__all__ = ["CodeSerializer", "escape_string", "serialize"]

# Only these three characters are escaped. The bundle parser never produces
# a carriage return: raw CR ends a line and \u000d stays undecoded.
_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n"})


def escape_string(text: str) -> str:
    """Escape text for a double-quoted JavaScript string literal.

    Example:
        >>> escape_string('This is a "test".')
        'This is a \\\\"test\\\\".'
    """
    return text.translate(_ESCAPES)


def _quote(text: str) -> str:
    return f'"{escape_string(text)}"'


class CodeSerializer:
    """Converts a catalog into the JavaScript lookup wrapper.

    Thread-safe serializer with no mutable instance state.

    Usage:
        >>> from i18nassets.runtime.resolver import resolve
        >>> from i18nassets.syntax import parse_bundle
        >>> catalog = resolve(["foo.foo"], parse_bundle("foo.foo = Test"))
        >>> CodeSerializer().render_table(catalog)
        '        "foo.foo": "Test"'
    """

    def serialize(self, catalog: Iterable[CatalogEntry]) -> str:
        """Render the complete wrapper around the catalog's lookup table.

        Args:
            catalog: Entries in output order

        Returns:
            JavaScript source text
        """
        return f"{WRAPPER_PREFIX}{self.render_table(catalog)}{WRAPPER_SUFFIX}"

    def render_table(self, catalog: Iterable[CatalogEntry]) -> str:
        """Render the object literal body (no wrapper, no trailing newline)."""
        return TABLE_LINE_SEPARATOR.join(self.render_entry(entry) for entry in catalog)

    def render_entry(self, entry: CatalogEntry) -> str:
        """Render one indented ``"code": value`` line."""
        return f"{TABLE_INDENT}{_quote(entry.code)}: {self.render_value(entry.value)}"

    @staticmethod
    def render_value(value: TokenizedValue) -> str:
        """Render a value as a quoted string or an element array.

        Example:
            >>> from i18nassets.syntax.placeholders import tokenize
            >>> CodeSerializer.render_value(tokenize("{2} {1} {0}"))
            '[2, " ", 1, " ", 0]'
            >>> CodeSerializer.render_value(tokenize("{}"))
            '"{}"'
        """
        if value.is_plain:
            return _quote(value.segments[0].text)
        elements = (
            _quote(segment.text) if segment.is_literal else str(segment.index)
            for segment in value.segments
        )
        return f"[{ARRAY_SEPARATOR.join(elements)}]"


def serialize(catalog: Iterable[CatalogEntry]) -> str:
    """Serialize a catalog to the JavaScript lookup wrapper.

    Convenience function for CodeSerializer().serialize().

    Args:
        catalog: Resolved entries in output order

    Returns:
        JavaScript source text
    """
    return CodeSerializer().serialize(catalog)
