"""i18nassets exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Nothing in the parse/tokenize/resolve/serialize core raises these; they
belong to the host layer (bundle files, strict mode).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class I18nError(Exception):
    """Base exception for all i18nassets errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class BundleLoadError(I18nError):
    """Bundle file exists but cannot be used.

    Raised for permission problems, undecodable content or oversized files.
    A missing bundle is not an error; locators return None for it.

    Attributes:
        path: Path of the offending bundle file
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize BundleLoadError.

        Args:
            message: Error message string OR Diagnostic object
            path: Path of the offending bundle file
        """
        super().__init__(message)
        self.path = path


class UnresolvedMessagesError(I18nError):
    """Strict mode found codes without a translation.

    Attributes:
        codes: Unresolved codes in request order, without duplicates
        output: The JavaScript that non-strict mode would have returned
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        codes: tuple[str, ...] = (),
        output: str = "",
    ) -> None:
        """Initialize UnresolvedMessagesError.

        Args:
            message: Error message string OR Diagnostic object
            codes: Unresolved codes in request order
            output: Fallback output produced before raising
        """
        super().__init__(message)
        self.codes = codes
        self.output = output
