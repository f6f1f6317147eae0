r"""Properties-file parser for message bundles.

Parses Java-properties-style bundle text into an insertion-ordered,
immutable mapping from message code to unescaped value.

Syntax handled:
    - ``#`` and ``!`` comment lines, blank lines
    - ``key = value`` (first unescaped ``=`` wins; ``:`` is ordinary key text)
    - Line continuation with a trailing unescaped backslash
    - Escapes ``\\ \n \t \f \uXXXX`` plus escaped separators and spaces

Unrecognized escapes (``\{``, ``\r``, malformed ``\u``) and ``\u000d`` are
kept verbatim, backslash included, so the placeholder tokenizer sees them as
literal text.

Parsing never raises. Malformed lines are skipped and their line numbers
recorded on the resulting bundle.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
import string
from collections.abc import Iterable, Iterator, Mapping

from i18nassets.diagnostics import ErrorTemplate

from .cursor import Cursor

__all__ = ["BundleParser", "RawBundle", "parse_bundle", "unescape"]

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_COMMENT_CHARS = "#!"
_SEPARATOR = "="
_BOM = "\ufeff"

_SIMPLE_ESCAPES: dict[str, str] = {
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "f": "\f",
    "=": "=",
    ":": ":",
    "#": "#",
    "!": "!",
    " ": " ",
}

# A carriage return is never decoded; raw CR is a line break in bundle text.
_UNDECODED_CHARS = "\r"

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


class RawBundle(Mapping[str, str]):
    """Immutable, insertion-ordered mapping of message code to raw value.

    Values are fully unescaped. Built once per locale per processing pass.

    Attributes:
        skipped_lines: 1-indexed line numbers of malformed lines
    """

    __slots__ = ("_entries", "skipped_lines")

    def __init__(
        self,
        entries: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        *,
        skipped_lines: tuple[int, ...] = (),
    ) -> None:
        self._entries: dict[str, str] = dict(entries)
        self.skipped_lines = skipped_lines

    @classmethod
    def layered(cls, bundles: Iterable[RawBundle]) -> RawBundle:
        """Merge bundles ordered from least to most specific.

        Later bundles override earlier ones per key, the way a Java
        ResourceBundle consults its parent for keys it does not define.

        Example:
            >>> base = RawBundle({"a": "A", "b": "B"})
            >>> de = RawBundle({"b": "Be"})
            >>> dict(RawBundle.layered([base, de]))
            {'a': 'A', 'b': 'Be'}
        """
        entries: dict[str, str] = {}
        for bundle in bundles:
            entries.update(bundle)
        return cls(entries)

    def __getitem__(self, code: str) -> str:
        return self._entries[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __repr__(self) -> str:
        return f"RawBundle({self._entries!r}, skipped_lines={self.skipped_lines!r})"


def _odd_trailing_backslashes(text: str) -> bool:
    """Check whether text ends in an unescaped backslash."""
    count = len(text) - len(text.rstrip("\\"))
    return count % 2 == 1


def _rstrip_unescaped(text: str) -> str:
    """Strip trailing whitespace unless the last whitespace char is escaped."""
    stripped = text.rstrip(_WHITESPACE)
    if len(stripped) < len(text) and _odd_trailing_backslashes(stripped):
        return text[: len(stripped) + 1]
    return stripped


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (first physical line number, joined logical line) pairs.

    Comment and blank lines are dropped here; they never continue.
    """
    lines = _LINE_BREAK.split(text.removeprefix(_BOM))
    index = 0
    while index < len(lines):
        line_number = index + 1
        line = lines[index].lstrip(_WHITESPACE)
        index += 1
        if not line or line[0] in _COMMENT_CHARS:
            continue

        parts: list[str] = []
        while _odd_trailing_backslashes(line):
            parts.append(line[:-1])
            if index >= len(lines):
                line = ""
                break
            line = lines[index].lstrip(_WHITESPACE)
            index += 1
        parts.append(line)
        yield line_number, "".join(parts)


def _find_separator(line: str) -> int:
    """Return index of the first unescaped separator, or -1."""
    cursor = Cursor(line, 0)
    while not cursor.is_eof:
        char = cursor.current
        if char == "\\":
            cursor = cursor.advance(2)
        elif char == _SEPARATOR:
            return cursor.pos
        else:
            cursor = cursor.advance()
    return -1


def _has_unescaped_whitespace(raw_key: str) -> bool:
    cursor = Cursor(raw_key, 0)
    while not cursor.is_eof:
        char = cursor.current
        if char == "\\":
            cursor = cursor.advance(2)
        elif char in _WHITESPACE:
            return True
        else:
            cursor = cursor.advance()
    return False


def _read_unicode_escape(cursor: Cursor) -> tuple[str, Cursor] | None:
    """Decode a unicode escape at cursor (pointing at the backslash).

    A high surrogate followed by an escaped low surrogate is combined into
    one code point.

    Returns:
        Decoded text and the cursor past it, or None if malformed
    """
    digits = cursor.advance(2).slice_ahead(4)
    if len(digits) != 4 or any(digit not in string.hexdigits for digit in digits):
        return None
    code_point = int(digits, 16)
    after = cursor.advance(6)

    if code_point in _HIGH_SURROGATES and after.slice_ahead(2) == "\\u":
        low = _read_unicode_escape(after)
        if low is not None and ord(low[0][0]) in _LOW_SURROGATES:
            combined = 0x10000 + ((code_point - 0xD800) << 10) + (ord(low[0][0]) - 0xDC00)
            return chr(combined), low[1]

    return chr(code_point), after


def unescape(text: str) -> str:
    r"""Resolve properties-style backslash escapes.

    Args:
        text: Raw key or value text (continuations already joined)

    Returns:
        Unescaped text

    Example:
        >>> unescape(r"Test \\{0\\}")
        'Test \\{0\\}'
        >>> unescape(r"keep \{") == r"keep \{"
        True
    """
    if "\\" not in text:
        return text

    buffer: list[str] = []
    cursor = Cursor(text, 0)
    while not cursor.is_eof:
        char = cursor.current
        if char != "\\":
            buffer.append(char)
            cursor = cursor.advance()
            continue

        escaped = cursor.peek(1)
        if escaped is None:
            buffer.append(char)
            cursor = cursor.advance()
        elif escaped in _SIMPLE_ESCAPES:
            buffer.append(_SIMPLE_ESCAPES[escaped])
            cursor = cursor.advance(2)
        elif (
            escaped == "u"
            and (decoded := _read_unicode_escape(cursor)) is not None
            and decoded[0] not in _UNDECODED_CHARS
        ):
            buffer.append(decoded[0])
            cursor = decoded[1]
        else:
            buffer.append(char)
            buffer.append(escaped)
            cursor = cursor.advance(2)

    return "".join(buffer)


class BundleParser:
    """Properties-file parser producing a RawBundle.

    Thread-safe parser with no mutable instance state.

    Usage:
        >>> parser = BundleParser()
        >>> bundle = parser.parse("foo.foo = Test\\nfoo.bar = Another test")
        >>> list(bundle.items())
        [('foo.foo', 'Test'), ('foo.bar', 'Another test')]
    """

    def parse(self, text: str) -> RawBundle:
        """Parse bundle text.

        Args:
            text: Raw bundle contents

        Returns:
            RawBundle in definition order, last duplicate winning
        """
        entries: dict[str, str] = {}
        skipped: list[int] = []

        for line_number, line in _logical_lines(text):
            entry = self._parse_entry(line)
            if entry is None:
                skipped.append(line_number)
                logger.debug(ErrorTemplate.malformed_line(line_number, line).format_error())
                continue
            key, value = entry
            if key in entries:
                logger.debug("Duplicate bundle key '%s' on line %d overrides earlier value",
                             key, line_number)
            entries[key] = value

        logger.debug("Parsed %d bundle entries (%d skipped lines)", len(entries), len(skipped))
        return RawBundle(entries, skipped_lines=tuple(skipped))

    @staticmethod
    def _parse_entry(line: str) -> tuple[str, str] | None:
        """Split a logical line into unescaped key and value.

        Returns:
            (key, value), or None if the line is malformed
        """
        separator = _find_separator(line)
        if separator < 0:
            return None

        raw_key = _rstrip_unescaped(line[:separator])
        if not raw_key or _has_unescaped_whitespace(raw_key):
            return None

        raw_value = _rstrip_unescaped(line[separator + 1 :].lstrip(_WHITESPACE))
        return unescape(raw_key), unescape(raw_value)


def parse_bundle(text: str) -> RawBundle:
    """Parse bundle text into a RawBundle.

    Convenience function for BundleParser().parse().

    Example:
        >>> parse_bundle("special.empty =")["special.empty"]
        ''
    """
    return BundleParser().parse(text)
