"""I18nProcessor - asset pipeline entry point.

Runs the full pipeline for one ``.i18n`` asset: derive the locale from the
asset name, load and parse the bundle chain, resolve the requested codes
and serialize the JavaScript lookup table.

Missing bundles and missing codes are recoverable: the output is always
valid JavaScript. Only host-level problems raise (unreadable bundle files,
strict mode).

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from i18nassets.config import ProcessorConfig
from i18nassets.diagnostics import ErrorTemplate, UnresolvedMessagesError
from i18nassets.enums import LoadStatus
from i18nassets.locale_utils import (
    is_known_locale,
    locale_fallback_chain,
    locale_from_asset_path,
    normalize_locale,
)
from i18nassets.localization.loading import (
    BundleLoadResult,
    BundleResourceLocator,
    PathBundleLocator,
)
from i18nassets.runtime.resolver import Catalog, MessageResolver, parse_request_list
from i18nassets.syntax.properties import BundleParser, RawBundle
from i18nassets.syntax.serializer import CodeSerializer

__all__ = [
    "I18nProcessor",
    "MissingMessageInfo",
    "ProcessResult",
    "compile_messages",
]

logger = logging.getLogger(__name__)


def _describe_path(locator: BundleResourceLocator, locale_key: str) -> str:
    """Location text for diagnostics; locators need not define describe_path."""
    describe = getattr(locator, "describe_path", None)
    if describe is None:
        return f"bundle[{locale_key}]"
    return str(describe(locale_key))


@dataclass(frozen=True, slots=True)
class MissingMessageInfo:
    """Record of a code that fell back to itself.

    Passed to the processor's ``on_missing`` callback once per distinct
    unresolved code.

    Attributes:
        code: Message code that was not found
        locale: Locale key of the asset ("" for the base bundle)
        asset_path: Asset being processed
    """

    code: str
    locale: str
    asset_path: str


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Immutable result of processing one asset.

    Attributes:
        output: Generated JavaScript
        catalog: Resolved entries in request order
        locale: Locale key derived from the asset name
        load_results: One result per bundle looked up, most specific first
    """

    output: str
    catalog: Catalog
    locale: str
    load_results: tuple[BundleLoadResult, ...] = ()

    @property
    def unresolved_codes(self) -> tuple[str, ...]:
        """Codes that fell back to themselves."""
        return self.catalog.unresolved_codes

    @property
    def bundle_found(self) -> bool:
        """True if at least one bundle of the chain was found."""
        return any(result.is_found for result in self.load_results)


class I18nProcessor:
    """Compiles i18n assets into JavaScript lookup tables.

    Holds only immutable configuration and a locator, so one instance can
    serve concurrent ``process()`` calls.

    Example:
        >>> from i18nassets.localization import MappingBundleLocator
        >>> locator = MappingBundleLocator({"de": "foo.foo = Test"})
        >>> processor = I18nProcessor(locator)
        >>> result = processor.process_with_result("foo.foo", "/js/app_de.i18n")
        >>> result.locale, result.unresolved_codes
        ('de', ())
    """

    __slots__ = ("_config", "_locator", "_on_missing", "_parser", "_resolver", "_serializer")

    def __init__(
        self,
        locator: BundleResourceLocator | None = None,
        config: ProcessorConfig | None = None,
        *,
        on_missing: Callable[[MissingMessageInfo], None] | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            locator: Bundle source. Defaults to a PathBundleLocator built
                from the configuration's bundle naming fields.
            config: Processor configuration (default: ProcessorConfig())
            on_missing: Optional callback invoked for each distinct code
                that was not found. Useful for collecting translation gaps.
        """
        self._config = config if config is not None else ProcessorConfig()
        if locator is None:
            locator = PathBundleLocator(
                base_dir=self._config.bundle_dir,
                basename=self._config.bundle_basename,
                extension=self._config.bundle_extension,
                encoding=self._config.encoding,
            )
        self._locator = locator
        self._on_missing = on_missing
        self._parser = BundleParser()
        self._resolver = MessageResolver()
        self._serializer = CodeSerializer()

    @property
    def config(self) -> ProcessorConfig:
        """Get processor configuration."""
        return self._config

    @property
    def locator(self) -> BundleResourceLocator:
        """Get the bundle locator."""
        return self._locator

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"I18nProcessor(locator={self._locator!r}, strict={self._config.strict})"

    def locale_for(self, asset_path: str) -> str:
        """Derive the locale key from an asset path.

        Logs a warning if Babel is installed and does not know the locale;
        the key is still used, since a matching bundle may exist anyway.
        """
        locale = locale_from_asset_path(asset_path, self._config.asset_extension)
        if self._config.validate_locales and not is_known_locale(locale):
            diagnostic = ErrorTemplate.locale_unknown(locale, "not found in CLDR data")
            logger.warning(diagnostic.format_error())
        return locale

    def load_bundle(self, locale: str) -> tuple[RawBundle, tuple[BundleLoadResult, ...]]:
        """Load and merge the bundle chain for a locale.

        Args:
            locale: Locale key ("" for the base bundle)

        Returns:
            Merged bundle and one load result per locale key looked up.
            An empty bundle if nothing was found.

        Raises:
            BundleLoadError: If a bundle exists but cannot be read
            ValueError: If the locale key is unsafe for a path locator
        """
        if self._config.merge_parent_bundles:
            chain = locale_fallback_chain(locale)
        else:
            chain = (normalize_locale(locale),)

        found: list[RawBundle] = []
        results: list[BundleLoadResult] = []
        for locale_key in chain:
            source_path = _describe_path(self._locator, locale_key)
            text = self._locator.get_bundle(locale_key)
            if text is None:
                logger.info(ErrorTemplate.bundle_not_found(locale_key, source_path).format_error())
                results.append(BundleLoadResult(locale_key, LoadStatus.NOT_FOUND, source_path))
                continue

            bundle = self._parser.parse(text)
            found.append(bundle)
            results.append(
                BundleLoadResult(
                    locale_key,
                    LoadStatus.FOUND,
                    source_path,
                    entry_count=len(bundle),
                    skipped_lines=bundle.skipped_lines,
                )
            )
            logger.info("Loaded bundle %s (%d entries)", source_path, len(bundle))
            if bundle.skipped_lines:
                logger.info(
                    "Bundle %s: skipped malformed lines %s",
                    source_path,
                    ", ".join(str(line) for line in bundle.skipped_lines),
                )

        if not found:
            logger.info("No bundle for locale '%s'; all codes fall back to themselves", locale)
            return RawBundle(), tuple(results)
        if len(found) == 1:
            return found[0], tuple(results)
        return RawBundle.layered(reversed(found)), tuple(results)

    def process_with_result(self, content: str, asset_path: str) -> ProcessResult:
        """Process one asset and return the output with resolution details.

        Args:
            content: Asset content, one message code per line
            asset_path: Asset path; its file name selects the locale

        Returns:
            ProcessResult with the generated JavaScript

        Raises:
            UnresolvedMessagesError: In strict mode, if any code is missing
            BundleLoadError: If a bundle exists but cannot be read
        """
        locale = self.locale_for(asset_path)
        requests = parse_request_list(content)
        bundle, load_results = self.load_bundle(locale)
        catalog = self._resolver.resolve(requests, bundle)
        output = self._serializer.serialize(catalog)

        unresolved = catalog.unresolved_codes
        for code in unresolved:
            logger.warning(ErrorTemplate.message_not_found(code, asset_path).format_error())
            if self._on_missing is not None:
                self._on_missing(MissingMessageInfo(code, locale, asset_path))

        logger.debug(
            "Processed %s: %d codes, %d unresolved", asset_path, len(catalog), len(unresolved)
        )

        if self._config.strict and unresolved:
            diagnostic = ErrorTemplate.unresolved_messages(unresolved, asset_path)
            raise UnresolvedMessagesError(diagnostic, codes=unresolved, output=output)

        return ProcessResult(output, catalog, locale, load_results)

    def process(self, content: str, asset_path: str) -> str:
        """Process one asset into JavaScript.

        Args:
            content: Asset content, one message code per line
            asset_path: Asset path; its file name selects the locale

        Returns:
            Generated JavaScript
        """
        return self.process_with_result(content, asset_path).output


def compile_messages(content: str, bundle_text: str | None) -> str:
    """Compile asset content against bundle text already in memory.

    Bypasses locale derivation and bundle location. ``None`` means no
    bundle, so every code falls back to itself.

    Example:
        >>> js = compile_messages("foo.foo", "foo.foo = Test")
        >>> '"foo.foo": "Test"' in js
        True
    """
    bundle = BundleParser().parse(bundle_text) if bundle_text is not None else RawBundle()
    catalog = MessageResolver().resolve(parse_request_list(content), bundle)
    return CodeSerializer().serialize(catalog)
