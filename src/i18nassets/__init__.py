"""i18nassets - properties message bundles compiled to JavaScript lookup tables.

Turns an ``.i18n`` asset (a list of message codes) plus a Java-properties
message bundle into a compact ``$L(code, ...)`` lookup function for the
browser, with ``{0}``-style positional placeholders.

Public API:
    I18nProcessor - Asset processor (locale from file name, bundle chain)
    ProcessorConfig - Immutable processor configuration
    compile_messages - One-shot compile from in-memory bundle text
    parse_bundle - Parse properties text to a RawBundle
    tokenize - Split a message value into literal/parameter segments
    resolve - Resolve codes against a bundle into a Catalog
    serialize - Render a Catalog as the JavaScript wrapper

Exceptions:
    I18nError - Base exception class
    BundleLoadError - Bundle exists but cannot be read
    UnresolvedMessagesError - Missing codes in strict mode

Submodules:
    i18nassets.syntax - Properties parser, tokenizer, serializer
    i18nassets.runtime - Resolver and processor
    i18nassets.localization - Bundle locators and load results
    i18nassets.diagnostics - Error types and diagnostics
"""

from .config import ProcessorConfig
from .diagnostics import BundleLoadError, I18nError, UnresolvedMessagesError
from .localization import MappingBundleLocator, PathBundleLocator
from .runtime import I18nProcessor, compile_messages, resolve
from .syntax import parse_bundle, serialize, tokenize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("i18nassets")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BundleLoadError",
    "I18nError",
    "I18nProcessor",
    "MappingBundleLocator",
    "PathBundleLocator",
    "ProcessorConfig",
    "UnresolvedMessagesError",
    "__version__",
    "compile_messages",
    "parse_bundle",
    "resolve",
    "serialize",
    "tokenize",
]
