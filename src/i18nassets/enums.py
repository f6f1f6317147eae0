"""Enumerations for i18nassets type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SegmentKind(StrEnum):
    """Discriminator of a tokenized message segment.

    StrEnum provides automatic string conversion: str(SegmentKind.PARAM) == "param"
    """

    LITERAL = "literal"
    """Literal text run: Hello, """

    PARAM = "param"
    """Positional parameter reference: {0}"""


class LoadStatus(StrEnum):
    """Outcome of a single bundle load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.FOUND) == "found"
    """

    FOUND = "found"
    """Bundle text was returned by the locator"""

    NOT_FOUND = "not_found"
    """Locator reported the bundle as absent"""


__all__ = [
    "LoadStatus",
    "SegmentKind",
]
