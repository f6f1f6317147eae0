"""Processor configuration.

Provides a single frozen dataclass that encapsulates the naming conventions
and behavior switches of I18nProcessor.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nassets.constants import (
    DEFAULT_ASSET_EXTENSION,
    DEFAULT_BUNDLE_BASENAME,
    DEFAULT_BUNDLE_DIR,
    DEFAULT_BUNDLE_EXTENSION,
    DEFAULT_ENCODING,
)

__all__ = ["ProcessorConfig"]


@dataclass(frozen=True, slots=True)
class ProcessorConfig:
    """Immutable configuration for I18nProcessor.

    All fields have sensible defaults; ``ProcessorConfig()`` reproduces the
    Grails asset-pipeline behavior.

    Attributes:
        bundle_dir: Directory of bundle files (default: "grails-app/i18n").
            Only used when the processor builds its own PathBundleLocator.
        bundle_basename: Bundle file stem (default: "messages").
        bundle_extension: Bundle file extension (default: ".properties").
        encoding: Bundle file encoding (default: "utf-8").
        asset_extension: Extension of i18n assets, stripped before the
            locale suffix is read (default: ".i18n").
        merge_parent_bundles: Consult the parent chain per key, e.g.
            ``de_AT`` then ``de`` then the base bundle (default: True).
            If False only the exact locale bundle is loaded.
        strict: Raise UnresolvedMessagesError when a code is missing
            instead of falling back silently (default: False).
        validate_locales: Log a warning for locale suffixes unknown to
            CLDR; requires Babel, ignored without it (default: True).

    Example:
        >>> config = ProcessorConfig(bundle_dir="i18n", strict=True)
        >>> config.bundle_basename
        'messages'
    """

    bundle_dir: str = DEFAULT_BUNDLE_DIR
    bundle_basename: str = DEFAULT_BUNDLE_BASENAME
    bundle_extension: str = DEFAULT_BUNDLE_EXTENSION
    encoding: str = DEFAULT_ENCODING
    asset_extension: str = DEFAULT_ASSET_EXTENSION
    merge_parent_bundles: bool = True
    strict: bool = False
    validate_locales: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If the basename is empty, an extension lacks its
                leading dot, or the encoding is unknown.
        """
        if not self.bundle_basename:
            msg = "bundle_basename must not be empty"
            raise ValueError(msg)
        for name, extension in (
            ("bundle_extension", self.bundle_extension),
            ("asset_extension", self.asset_extension),
        ):
            if not extension.startswith("."):
                msg = f"{name} must start with '.', got: '{extension}'"
                raise ValueError(msg)
        try:
            "".encode(self.encoding)
        except LookupError as e:
            msg = f"Unknown encoding: '{self.encoding}'"
            raise ValueError(msg) from e
