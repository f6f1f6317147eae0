"""Locale utilities for asset names and bundle fallback chains.

Centralizes locale handling used by the processor and the bundle locators:
deriving the locale key from an asset file name, normalizing BCP-47 codes to
the POSIX form used in bundle file names, and building the parent chain that
Java-style resource bundles fall back through.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re
from pathlib import PurePath

from i18nassets.constants import DEFAULT_ASSET_EXTENSION
from i18nassets.core.babel_compat import (
    get_locale_class,
    get_unknown_locale_error,
    is_babel_available,
)

__all__ = [
    "is_known_locale",
    "locale_fallback_chain",
    "locale_from_asset_path",
    "normalize_locale",
]

logger = logging.getLogger(__name__)

# _<language>[_<TERRITORY>[_<variant>]] at the end of the file stem.
_LOCALE_SUFFIX = re.compile(
    r"_(?P<locale>[a-z]{2,3}(?:_(?:[A-Z]{2}|[0-9]{3})(?:_[A-Za-z0-9]+)?)?)$"
)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to the POSIX form used in bundle names.

    BCP-47 uses hyphens (en-US), while Java bundles and Babel use
    underscores (messages_en_US.properties).

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "pt_BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de")
        'de'
    """
    return locale_code.strip().replace("-", "_")


def locale_from_asset_path(path: str, asset_extension: str = DEFAULT_ASSET_EXTENSION) -> str:
    """Derive the locale key from an asset file name.

    The locale is the trailing ``_<lang>[_<TERRITORY>[_<variant>]]`` suffix
    of the file stem. Assets without such a suffix use the base bundle,
    signalled by the empty string.

    Args:
        path: Asset path (directories are ignored)
        asset_extension: Extension stripped before matching

    Returns:
        Locale key, or "" for the base bundle

    Example:
        >>> locale_from_asset_path("/foo/bar/mymessages_de.i18n")
        'de'
        >>> locale_from_asset_path("js/app_pt_BR.i18n")
        'pt_BR'
        >>> locale_from_asset_path("/foo/bar/mymessages.i18n")
        ''
    """
    name = PurePath(path).name
    if asset_extension and name.endswith(asset_extension):
        name = name[: -len(asset_extension)]
    match = _LOCALE_SUFFIX.search(name)
    if match is None:
        return ""
    return match.group("locale")


def locale_fallback_chain(locale_code: str) -> tuple[str, ...]:
    """Build the bundle lookup chain from most to least specific.

    Args:
        locale_code: Locale key ("" for the base bundle)

    Returns:
        Chain ending with "" (the base bundle)

    Example:
        >>> locale_fallback_chain("de_AT")
        ('de_AT', 'de', '')
        >>> locale_fallback_chain("")
        ('',)
    """
    normalized = normalize_locale(locale_code)
    if not normalized:
        return ("",)
    parts = [part for part in normalized.split("_") if part]
    chain = ["_".join(parts[:size]) for size in range(len(parts), 0, -1)]
    chain.append("")
    return tuple(chain)


@functools.lru_cache(maxsize=128)
def is_known_locale(locale_code: str) -> bool:
    """Check a locale key against CLDR data.

    The base bundle ("") is always known. Without Babel installed every
    locale is accepted, since there is nothing to check against.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale key (BCP-47 or POSIX format accepted)

    Returns:
        False only if Babel is installed and rejects the locale
    """
    if not locale_code or not is_babel_available():
        return True
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    try:
        locale_class.parse(normalize_locale(locale_code))
    except (unknown_locale_error, ValueError) as e:
        logger.debug("Babel rejected locale '%s': %s", locale_code, e)
        return False
    return True
