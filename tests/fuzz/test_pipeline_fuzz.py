"""Fuzz tests for the bundle parser, tokenizer and full compile pipeline.

Arbitrary bundle text and asset content must always compile to a wrapped
table without raising, and nothing the parser decodes may reintroduce a
raw carriage return into the generated JavaScript.

Run with:
    pytest -m fuzz tests/fuzz/test_pipeline_fuzz.py -v

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from i18nassets import compile_messages
from i18nassets.runtime import parse_request_list
from i18nassets.syntax import parse_bundle, tokenize
from tests.strategies import brace_free_text, message_codes

pytestmark = pytest.mark.fuzz

_WRAPPER_START = "(function (win) {\n    var messages = {\n"
_WRAPPER_END = "}(this));\n"

# Bundle-ish text: escapes, separators, continuations and comment markers.
_BUNDLE_CHARS = st.sampled_from(
    ["\\", "u", "0", "d", "D", "=", ":", "#", "!", " ", "\t", "\n", "\r", "{", "}", "1", "a"]
)
_bundle_soup = st.lists(_BUNDLE_CHARS, max_size=80).map("".join)


class TestParserFuzz:
    """The properties parser on arbitrary input."""

    @given(st.one_of(st.text(max_size=200), _bundle_soup))
    @settings(max_examples=1000)
    def test_never_raises_and_never_yields_carriage_return(self, text: str) -> None:
        """PROPERTY: Parsing accepts any text and decodes no raw CR."""
        bundle = parse_bundle(text)
        event(f"entries={'0' if len(bundle) == 0 else 'some'}")
        for key, value in bundle.items():
            assert "\r" not in key
            assert "\r" not in value

    @given(message_codes(), message_codes())
    @settings(max_examples=300)
    def test_colon_stays_in_key(self, left: str, right: str) -> None:
        """PROPERTY: Only '=' separates; a ':' belongs to the key."""
        bundle = parse_bundle(f"{left}:{right} = x")
        assert dict(bundle) == {f"{left}:{right}": "x"}


class TestTokenizerFuzz:
    """Placeholder scanning on extreme digit runs."""

    @given(
        st.integers(min_value=4301, max_value=6000),
        brace_free_text(max_size=10),
        brace_free_text(max_size=10),
    )
    @settings(max_examples=50, deadline=None)
    def test_oversized_index_is_literal(self, length: int, before: str, after: str) -> None:
        """PROPERTY: An index too long to convert leaves the value plain."""
        value = before + "{" + "7" * length + "}" + after
        result = tokenize(value)
        assert result.is_plain
        assert result.segments[0].text == value


class TestPipelineFuzz:
    """compile_messages end to end."""

    @given(
        st.one_of(st.text(max_size=120), _bundle_soup),
        st.one_of(st.text(max_size=200), _bundle_soup),
    )
    @settings(max_examples=1000)
    def test_always_wrapped_without_carriage_return(self, content: str, bundle_text: str) -> None:
        """PROPERTY: Any asset and bundle compile to a wrapped, CR-free table."""
        output = compile_messages(content, bundle_text)
        assert output.startswith(_WRAPPER_START)
        assert output.endswith(_WRAPPER_END)
        assert "\r" not in output

    @given(st.lists(st.tuples(st.booleans(), message_codes()), max_size=10))
    @settings(max_examples=300)
    def test_hash_prefixed_codes_requested(self, lines: list[tuple[bool, str]]) -> None:
        """PROPERTY: A leading '#' is part of the requested code."""
        codes = [f"#{code}" if hashed else code for hashed, code in lines]
        event(f"hashed={any(hashed for hashed, _ in lines)}")
        assert parse_request_list("\n".join(codes)) == tuple(codes)
        output = compile_messages("\n".join(codes), None)
        for code in codes:
            assert f'"{code}": "{code}"' in output
