"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def message_not_found(code: str, location: str | None = None) -> Diagnostic:
        """Message code not found in the bundle.

        Args:
            code: The message code that was not found
            location: Description of the bundle that was searched

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Message code '{code}' not found"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Add the code to the bundle or remove it from the asset",
            location=location,
            severity="warning",
        )

    @staticmethod
    def unresolved_messages(codes: Sequence[str], location: str | None = None) -> Diagnostic:
        """One or more codes fell back to themselves in strict mode.

        Args:
            codes: Unresolved message codes in request order
            location: Asset path being processed

        Returns:
            Diagnostic for UNRESOLVED_MESSAGES
        """
        listed = ", ".join(f"'{code}'" for code in codes)
        msg = f"{len(codes)} unresolved message code(s): {listed}"
        return Diagnostic(
            code=DiagnosticCode.UNRESOLVED_MESSAGES,
            message=msg,
            hint="Disable strict mode to fall back to the codes themselves",
            location=location,
        )

    @staticmethod
    def bundle_not_found(locale: str, location: str) -> Diagnostic:
        """No bundle exists for a locale.

        Args:
            locale: Locale key that was requested ("" for the base bundle)
            location: Path that was looked up

        Returns:
            Diagnostic for BUNDLE_NOT_FOUND
        """
        msg = f"No message bundle for locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.BUNDLE_NOT_FOUND,
            message=msg,
            hint="All codes of this locale fall back to the parent bundle or to themselves",
            location=location,
            severity="warning",
        )

    @staticmethod
    def bundle_read_failed(location: str, reason: str) -> Diagnostic:
        """Bundle file exists but could not be read.

        Args:
            location: Path of the bundle file
            reason: Underlying OS error text

        Returns:
            Diagnostic for BUNDLE_READ_FAILED
        """
        msg = f"Cannot read message bundle: {reason}"
        return Diagnostic(
            code=DiagnosticCode.BUNDLE_READ_FAILED,
            message=msg,
            hint="Check file permissions",
            location=location,
        )

    @staticmethod
    def bundle_decode_failed(location: str, encoding: str) -> Diagnostic:
        """Bundle file is not valid text in the configured encoding.

        Args:
            location: Path of the bundle file
            encoding: Encoding used for decoding

        Returns:
            Diagnostic for BUNDLE_DECODE_FAILED
        """
        msg = f"Message bundle is not valid {encoding}"
        return Diagnostic(
            code=DiagnosticCode.BUNDLE_DECODE_FAILED,
            message=msg,
            hint="Re-save the bundle in the configured encoding or change the encoding setting",
            location=location,
        )

    @staticmethod
    def bundle_too_large(location: str, size: int, limit: int) -> Diagnostic:
        """Bundle file exceeds the size limit.

        Args:
            location: Path of the bundle file
            size: Actual size in bytes
            limit: Maximum accepted size in bytes

        Returns:
            Diagnostic for BUNDLE_TOO_LARGE
        """
        msg = f"Message bundle is {size} bytes, limit is {limit} bytes"
        return Diagnostic(
            code=DiagnosticCode.BUNDLE_TOO_LARGE,
            message=msg,
            hint="Split the bundle or raise PathBundleLocator.max_size",
            location=location,
        )

    @staticmethod
    def locale_unknown(locale: str, reason: str) -> Diagnostic:
        """Locale derived from an asset name is not known to CLDR.

        Args:
            locale: Locale key
            reason: Babel error text

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Check the locale suffix of the asset file name",
            severity="warning",
        )

    @staticmethod
    def locale_unsafe(locale: str) -> Diagnostic:
        """Locale key would escape the bundle directory.

        Args:
            locale: Rejected locale key

        Returns:
            Diagnostic for LOCALE_UNSAFE
        """
        msg = f"Path separators or traversal sequences not allowed in locale: '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNSAFE,
            message=msg,
            hint="Locale keys look like 'de' or 'pt_BR'",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check for an incomplete escape sequence",
        )

    @staticmethod
    def malformed_line(line: int, content: str) -> Diagnostic:
        """Bundle line is neither a comment nor a key/value pair.

        Args:
            line: Line number (1-indexed)
            content: Logical line content

        Returns:
            Diagnostic for MALFORMED_LINE
        """
        msg = f"Skipped malformed bundle line: {content!r}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_LINE,
            message=msg,
            hint="Entries look like 'key = value'",
            line=line,
            severity="warning",
        )
