"""Bundle syntax package.

Provides the properties-file parser, the placeholder tokenizer and the
JavaScript serializer. Separate from runtime so tooling can parse and
inspect bundles without the processor.

Python 3.13+.
"""

from .cursor import Cursor
from .placeholders import Segment, TokenizedValue, tokenize
from .properties import BundleParser, RawBundle, parse_bundle, unescape
from .serializer import CodeSerializer, escape_string, serialize

__all__ = [
    "BundleParser",
    "CodeSerializer",
    "Cursor",
    "RawBundle",
    "Segment",
    "TokenizedValue",
    "escape_string",
    "parse_bundle",
    "serialize",
    "tokenize",
    "unescape",
]
