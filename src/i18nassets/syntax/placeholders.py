"""Positional placeholder tokenizer.

Splits a message value into literal text runs and ``{N}`` parameter
references with a single left-to-right scan over one accumulation buffer.
Because literal text only ever leaves the buffer when a parameter is found
or the input ends, two literal segments can never be adjacent.

Placeholder grammar: ``{`` followed by one or more ASCII digits followed by
``}``. Everything else, including ``{}`` and ``{0\\}``, is literal text.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from i18nassets.constants import UNDEFINED_PARAM
from i18nassets.enums import SegmentKind

from .cursor import Cursor

__all__ = ["Segment", "TokenizedValue", "tokenize"]

_ASCII_DIGITS = "0123456789"


@dataclass(frozen=True, slots=True)
class Segment:
    """One unit of a tokenized value: literal text or a parameter index.

    Tagged variant discriminated by ``kind``. Only the field matching the
    kind is meaningful; use the ``literal`` / ``param`` constructors.

    Attributes:
        kind: Segment discriminator
        text: Literal text (LITERAL segments)
        index: Positional parameter index (PARAM segments)
    """

    kind: SegmentKind
    text: str = ""
    index: int = 0

    def __post_init__(self) -> None:
        """Validate segment invariants."""
        if self.kind is SegmentKind.PARAM and self.index < 0:
            msg = f"Parameter index must be >= 0, got {self.index}"
            raise ValueError(msg)
        if self.kind is SegmentKind.PARAM and self.text:
            msg = "Parameter segments carry no text"
            raise ValueError(msg)

    @classmethod
    def literal(cls, text: str) -> Segment:
        """Create a literal text segment."""
        return cls(SegmentKind.LITERAL, text=text)

    @classmethod
    def param(cls, index: int) -> Segment:
        """Create a positional parameter segment."""
        return cls(SegmentKind.PARAM, index=index)

    @property
    def is_literal(self) -> bool:
        return self.kind is SegmentKind.LITERAL

    @property
    def is_param(self) -> bool:
        return self.kind is SegmentKind.PARAM


@dataclass(frozen=True, slots=True)
class TokenizedValue:
    """Ordered segments of one message value.

    Invariants:
        - No two consecutive literal segments
        - Without parameters there is exactly one literal (possibly empty)

    Attributes:
        segments: Segments in source order
    """

    segments: tuple[Segment, ...]

    def __post_init__(self) -> None:
        """Validate segment list invariants."""
        if not self.segments:
            msg = "TokenizedValue needs at least one segment"
            raise ValueError(msg)
        for previous, current in zip(self.segments, self.segments[1:], strict=False):
            if previous.is_literal and current.is_literal:
                msg = "Adjacent literal segments must be merged"
                raise ValueError(msg)

    @classmethod
    def plain(cls, text: str) -> TokenizedValue:
        """Create a value consisting of a single literal."""
        return cls((Segment.literal(text),))

    @property
    def is_plain(self) -> bool:
        """True if the value is exactly one literal segment."""
        return len(self.segments) == 1 and self.segments[0].is_literal

    @property
    def params(self) -> tuple[int, ...]:
        """Parameter indices in segment order (duplicates kept)."""
        return tuple(segment.index for segment in self.segments if segment.is_param)

    def to_source(self) -> str:
        """Rebuild the value text, reinserting ``{N}`` placeholders.

        Example:
            >>> tokenize("{2} {1} {0}").to_source()
            '{2} {1} {0}'
        """
        return "".join(
            segment.text if segment.is_literal else f"{{{segment.index}}}"
            for segment in self.segments
        )

    def format(self, *args: object) -> str:
        """Substitute positional arguments like the generated ``$L`` function.

        A single list or tuple argument is used as the parameter array;
        otherwise the arguments themselves are the parameters. Missing
        parameters render as ``undefined``, as they do in the browser.

        Example:
            >>> tokenize("{0} of {1}").format(3, 7)
            '3 of 7'
            >>> tokenize("{0} of {1}").format([3, 7])
            '3 of 7'
        """
        params: Sequence[object] = args
        if len(args) == 1 and isinstance(args[0], (list, tuple)):
            params = args[0]

        parts: list[str] = []
        for segment in self.segments:
            if segment.is_literal:
                parts.append(segment.text)
            elif segment.index < len(params):
                parts.append(str(params[segment.index]))
            else:
                parts.append(UNDEFINED_PARAM)
        return "".join(parts)


def _match_placeholder(cursor: Cursor) -> tuple[int, Cursor] | None:
    """Match ``{digits}`` at cursor (pointing at ``{``).

    Returns:
        Parameter index and the cursor past ``}``, or None if no match
    """
    digits_end = cursor.advance().skip_while(_ASCII_DIGITS)
    if digits_end.pos == cursor.pos + 1 or digits_end.peek() != "}":
        return None
    try:
        index = int(cursor.source[cursor.pos + 1 : digits_end.pos])
    except ValueError:
        # Digit run longer than sys.get_int_max_str_digits()
        return None
    return index, digits_end.advance()


def tokenize(value: str) -> TokenizedValue:
    """Tokenize a message value into literal and parameter segments.

    Args:
        value: Fully unescaped message value

    Returns:
        TokenizedValue; never raises

    Example:
        >>> [s.index if s.is_param else s.text for s in tokenize("0 {0}").segments]
        ['0 ', 0]
        >>> tokenize("{}").is_plain
        True
    """
    segments: list[Segment] = []
    buffer: list[str] = []
    cursor = Cursor(value, 0)

    while not cursor.is_eof:
        char = cursor.current
        if char == "{" and (match := _match_placeholder(cursor)) is not None:
            if buffer:
                segments.append(Segment.literal("".join(buffer)))
                buffer.clear()
            index, cursor = match
            segments.append(Segment.param(index))
            continue
        buffer.append(char)
        cursor = cursor.advance()

    if buffer or not segments:
        segments.append(Segment.literal("".join(buffer)))

    return TokenizedValue(tuple(segments))
