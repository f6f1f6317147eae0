"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Message errors (unresolved codes)
        2000-2999: Bundle errors (locating and reading bundle files)
        3000-3999: Syntax errors (bundle and placeholder scanning)
    """

    # Message errors (1000-1999)
    MESSAGE_NOT_FOUND = 1001
    UNRESOLVED_MESSAGES = 1002

    # Bundle errors (2000-2999)
    BUNDLE_NOT_FOUND = 2001
    BUNDLE_READ_FAILED = 2002
    BUNDLE_DECODE_FAILED = 2003
    BUNDLE_TOO_LARGE = 2004
    LOCALE_UNKNOWN = 2005
    LOCALE_UNSAFE = 2006

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    MALFORMED_LINE = 3002


def _escape_control(text: str) -> str:
    """Escape control characters so a diagnostic always stays on its lines."""
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        location: Bundle path or asset path the diagnostic refers to
        line: Line number in ``location`` (1-indexed)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    line: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            warning[MESSAGE_NOT_FOUND]: Message code 'foo.whee' not found
              --> grails-app/i18n/messages_de.properties
              = help: Add the code to the bundle or remove it from the asset

        Returns:
            Formatted error message
        """
        parts = [f"{self.severity}[{self.code.name}]: {_escape_control(self.message)}"]

        if self.location and self.line is not None:
            parts.append(f"  --> {self.location}:{self.line}")
        elif self.location:
            parts.append(f"  --> {self.location}")
        elif self.line is not None:
            parts.append(f"  --> line {self.line}")

        if self.hint:
            parts.append(f"  = help: {_escape_control(self.hint)}")

        return "\n".join(parts)
