"""Message resolution against a parsed bundle.

Turns the ordered list of requested codes into a catalog: one entry per
request, tokenized when the bundle defines the code and falling back to the
code itself otherwise. Resolution never raises; an unresolved code is
reported through ``CatalogEntry.resolved``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from i18nassets.syntax.placeholders import TokenizedValue, tokenize

__all__ = [
    "Catalog",
    "CatalogEntry",
    "MessageResolver",
    "parse_request_list",
    "resolve",
]

logger = logging.getLogger(__name__)


def parse_request_list(content: str) -> tuple[str, ...]:
    """Split asset content into requested codes.

    One code per line. Lines are stripped and blank lines dropped; every
    other line is a code, even one starting with ``#``. Order and duplicates
    are preserved.

    Example:
        >>> parse_request_list("foo.bar\\n\\n  foo.foo\\r\\nfoo.bar")
        ('foo.bar', 'foo.foo', 'foo.bar')
    """
    codes: list[str] = []
    for line in content.splitlines():
        code = line.strip()
        if code:
            codes.append(code)
    return tuple(codes)


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Resolution result for one requested code.

    Attributes:
        code: Requested message code
        value: Tokenized translation, or the code itself as a literal
        resolved: False if the bundle did not define the code
    """

    code: str
    value: TokenizedValue
    resolved: bool


@dataclass(frozen=True, slots=True)
class Catalog:
    """Ordered resolution results, one per requested code.

    Attributes:
        entries: Entries in request order (duplicates kept)
    """

    entries: tuple[CatalogEntry, ...] = ()

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def unresolved_codes(self) -> tuple[str, ...]:
        """Codes that fell back to themselves, in order, without duplicates."""
        return tuple(dict.fromkeys(entry.code for entry in self.entries if not entry.resolved))

    @property
    def is_complete(self) -> bool:
        """True if every requested code was found in the bundle."""
        return all(entry.resolved for entry in self.entries)


class MessageResolver:
    """Resolves requested codes against a bundle.

    Thread-safe resolver with no mutable instance state. Each distinct
    value is tokenized once per ``resolve()`` call even if requested
    repeatedly.
    """

    def resolve(self, requests: Iterable[str], bundle: Mapping[str, str]) -> Catalog:
        """Build the catalog for the requested codes.

        Args:
            requests: Requested codes in output order
            bundle: Parsed bundle (code -> unescaped value)

        Returns:
            Catalog with one entry per request
        """
        tokenized: dict[str, TokenizedValue] = {}
        entries: list[CatalogEntry] = []

        for code in requests:
            if code in bundle:
                value = tokenized.get(code)
                if value is None:
                    value = tokenize(bundle[code])
                    tokenized[code] = value
                entries.append(CatalogEntry(code, value, resolved=True))
            else:
                logger.debug("Message code '%s' not in bundle, using code as value", code)
                entries.append(CatalogEntry(code, TokenizedValue.plain(code), resolved=False))

        return Catalog(tuple(entries))


def resolve(requests: Iterable[str], bundle: Mapping[str, str]) -> Catalog:
    """Resolve requested codes against a bundle.

    Convenience function for MessageResolver().resolve().

    Example:
        >>> catalog = resolve(["foo.bar", "foo.whee"], {"foo.bar": "Another test"})
        >>> [(entry.code, entry.resolved) for entry in catalog]
        [('foo.bar', True), ('foo.whee', False)]
    """
    return MessageResolver().resolve(requests, bundle)
