"""Runtime package: message resolution and the asset processor.

Python 3.13+.
"""

from .processor import I18nProcessor, MissingMessageInfo, ProcessResult, compile_messages
from .resolver import Catalog, CatalogEntry, MessageResolver, parse_request_list, resolve

__all__ = [
    "Catalog",
    "CatalogEntry",
    "I18nProcessor",
    "MessageResolver",
    "MissingMessageInfo",
    "ProcessResult",
    "compile_messages",
    "parse_request_list",
    "resolve",
]
