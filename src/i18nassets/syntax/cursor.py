"""Immutable cursor infrastructure for character scanning.

Implements the immutable cursor pattern shared by the properties unescaper
and the placeholder tokenizer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
"""

from dataclasses import dataclass

from i18nassets.diagnostics import ErrorTemplate

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("{0}", 0)
        >>> cursor.current
        '{'
        >>> cursor.advance().current
        '0'
        >>> cursor.peek(2)
        '}'
        >>> cursor.peek(3) is None
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_ahead(self, count: int) -> str:
        """Return up to count characters starting at the current position."""
        return self.source[self.pos : self.pos + count]

    def skip_while(self, predicate: str) -> "Cursor":
        """Return new cursor past every leading character contained in predicate."""
        pos = self.pos
        source = self.source
        while pos < len(source) and source[pos] in predicate:
            pos += 1
        return Cursor(source, pos)
