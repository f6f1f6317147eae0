"""Bundle loading infrastructure for the i18n processor.

Provides the protocol for bundle locators, a filesystem implementation
following the Grails ``messages[_locale].properties`` convention, an
in-memory implementation, and the result record for load attempts.

Components:
    BundleResourceLocator - Protocol for locating bundle text (structural typing)
    PathBundleLocator - Disk-based locator with path-traversal prevention
    MappingBundleLocator - In-memory locator backed by a mapping
    BundleLoadResult - Immutable result of a single bundle load attempt

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from i18nassets.constants import (
    DEFAULT_BUNDLE_BASENAME,
    DEFAULT_BUNDLE_DIR,
    DEFAULT_BUNDLE_EXTENSION,
    DEFAULT_ENCODING,
    MAX_BUNDLE_SIZE,
)
from i18nassets.diagnostics import BundleLoadError, ErrorTemplate
from i18nassets.enums import LoadStatus
from i18nassets.localization.types import BundleSource, LocaleKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "BundleResourceLocator",
    # Concrete locators
    "PathBundleLocator",
    "MappingBundleLocator",
    # Load result type
    "BundleLoadResult",
]

logger = logging.getLogger(__name__)


class BundleResourceLocator(Protocol):
    """Protocol for retrieving raw bundle text for a locale.

    This is a Protocol (structural typing) rather than ABC so hosts can
    plug in any object with a matching ``get_bundle`` method. Locators may
    be called concurrently and must not mutate shared state.

    Example:
        >>> class DictLocator:
        ...     def get_bundle(self, locale_key: str) -> str | None:
        ...         return {"": "foo.foo = Test"}.get(locale_key)
        ...     def describe_path(self, locale_key: str) -> str:
        ...         return f"memory:{locale_key or 'base'}"
    """

    def get_bundle(self, locale_key: LocaleKey) -> BundleSource | None:
        """Return the raw bundle text for a locale.

        Args:
            locale_key: POSIX locale key, "" for the base bundle

        Returns:
            Bundle text, or None if no bundle exists for the locale

        Raises:
            BundleLoadError: If a bundle exists but cannot be read
        """

    def describe_path(self, locale_key: LocaleKey) -> str:
        """Return human-readable location for diagnostics.

        Optional: the processor uses "bundle[<locale>]" for locators that
        only define get_bundle.
        """
        return f"bundle[{locale_key}]"


@dataclass(frozen=True, slots=True)
class PathBundleLocator:
    """File system locator for ``<base_dir>/<basename>[_<locale>]<extension>``.

    Implements BundleResourceLocator for the Grails layout, where the asset
    ``mymessages_de.i18n`` reads ``grails-app/i18n/messages_de.properties``.

    Security:
        Locale keys containing path separators or ".." are rejected, and
        every resolved path is validated against the base directory.

    Example:
        >>> locator = PathBundleLocator("grails-app/i18n")
        >>> locator.describe_path("de")
        'grails-app/i18n/messages_de.properties'

    Attributes:
        base_dir: Directory holding the bundle files
        basename: Bundle file stem without locale suffix
        extension: Bundle file extension including the dot
        encoding: Text encoding of bundle files
        max_size: Maximum accepted file size in bytes
    """

    base_dir: str = DEFAULT_BUNDLE_DIR
    basename: str = DEFAULT_BUNDLE_BASENAME
    extension: str = DEFAULT_BUNDLE_EXTENSION
    encoding: str = DEFAULT_ENCODING
    max_size: int = MAX_BUNDLE_SIZE
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved base directory and validate naming at initialization.

        Raises:
            ValueError: If basename is empty or contains path separators,
                or max_size is not positive
        """
        if not self.basename or any(sep in self.basename for sep in ("/", "\\")):
            msg = f"basename must be a plain file stem, got: '{self.basename}'"
            raise ValueError(msg)
        if self.max_size <= 0:
            msg = "max_size must be positive"
            raise ValueError(msg)
        object.__setattr__(self, "_resolved_root", Path(self.base_dir).resolve())

    @staticmethod
    def _validate_locale(locale_key: LocaleKey) -> None:
        """Validate locale key for path traversal attacks.

        Raises:
            ValueError: If locale contains unsafe path components
        """
        if ".." in locale_key or "/" in locale_key or "\\" in locale_key:
            raise ValueError(ErrorTemplate.locale_unsafe(locale_key).message)

    def file_name(self, locale_key: LocaleKey) -> str:
        """Return the bundle file name for a locale.

        Example:
            >>> PathBundleLocator().file_name("pt_BR")
            'messages_pt_BR.properties'
            >>> PathBundleLocator().file_name("")
            'messages.properties'
        """
        suffix = f"_{locale_key}" if locale_key else ""
        return f"{self.basename}{suffix}{self.extension}"

    def describe_path(self, locale_key: LocaleKey) -> str:
        """Return the bundle path for diagnostics."""
        return f"{self.base_dir.rstrip('/')}/{self.file_name(locale_key)}"

    def get_bundle(self, locale_key: LocaleKey) -> BundleSource | None:
        """Read the bundle file for a locale.

        Args:
            locale_key: POSIX locale key, "" for the base bundle

        Returns:
            Decoded bundle text, or None if the file does not exist

        Raises:
            ValueError: If the locale key is unsafe
            BundleLoadError: If the file is unreadable, too large or undecodable
        """
        self._validate_locale(locale_key)

        path = (self._resolved_root / self.file_name(locale_key)).resolve()
        try:
            path.relative_to(self._resolved_root)
        except ValueError as e:
            raise ValueError(ErrorTemplate.locale_unsafe(locale_key).message) from e

        location = self.describe_path(locale_key)
        try:
            size = path.stat().st_size
            if size > self.max_size:
                diagnostic = ErrorTemplate.bundle_too_large(location, size, self.max_size)
                raise BundleLoadError(diagnostic, path=str(path))
            data = path.read_bytes()
        except FileNotFoundError:
            logger.debug("Bundle file not found: %s", location)
            return None
        except OSError as e:
            diagnostic = ErrorTemplate.bundle_read_failed(location, str(e))
            raise BundleLoadError(diagnostic, path=str(path)) from e

        try:
            return data.decode(self.encoding)
        except UnicodeDecodeError as e:
            diagnostic = ErrorTemplate.bundle_decode_failed(location, self.encoding)
            raise BundleLoadError(diagnostic, path=str(path)) from e


@dataclass(frozen=True, slots=True)
class MappingBundleLocator:
    """In-memory locator backed by a locale -> bundle text mapping.

    Example:
        >>> locator = MappingBundleLocator({"de": "foo.foo = Test"})
        >>> locator.get_bundle("de")
        'foo.foo = Test'
        >>> locator.get_bundle("fr") is None
        True
    """

    bundles: Mapping[LocaleKey, BundleSource] = field(default_factory=dict)

    def get_bundle(self, locale_key: LocaleKey) -> BundleSource | None:
        """Return the bundle text for a locale, or None."""
        return self.bundles.get(locale_key)

    def describe_path(self, locale_key: LocaleKey) -> str:
        """Return a pseudo location for diagnostics."""
        return f"memory:{locale_key or '<base>'}"


@dataclass(frozen=True, slots=True)
class BundleLoadResult:
    """Immutable result of a single bundle load attempt.

    Attributes:
        locale: Locale key that was requested ("" for the base bundle)
        status: Whether the locator returned a bundle
        source_path: Human-readable location of the bundle
        entry_count: Number of parsed entries (0 if not found)
        skipped_lines: Malformed line numbers in the bundle
    """

    locale: LocaleKey
    status: LoadStatus
    source_path: str
    entry_count: int = 0
    skipped_lines: tuple[int, ...] = ()

    @property
    def is_found(self) -> bool:
        """Check if the bundle was found."""
        return self.status == LoadStatus.FOUND
