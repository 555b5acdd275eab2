"""Hypothesis property-based tests for the tag parser and serializer.

Properties:
- Every generated well-formed tag parses
- Serialization is canonical: reparsing reproduces the Tag, and serializing
  is idempotent
- Parsing is case-insensitive
- base_name reparses to the same base subtags
- The -u-ca- keyword is extracted verbatim
- Arbitrary text never raises anything but MalformedTagError
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localetag import Locale
from localetag.diagnostics import MalformedTagError
from localetag.syntax import base_name, is_valid_tag, parse_tag, serialize_tag
from tests.strategies import base_tags, tag_strings, unicode_extension_tags


class TestParseProperties:
    """Well-formed input."""

    @given(text=tag_strings())
    def test_generated_tags_parse(self, text: str) -> None:
        assert is_valid_tag(text)

    @given(text=tag_strings())
    def test_reparse_serialized(self, text: str) -> None:
        tag = parse_tag(text)
        assert parse_tag(serialize_tag(tag)) == tag

    @given(text=tag_strings())
    def test_serialize_idempotent(self, text: str) -> None:
        once = serialize_tag(parse_tag(text))
        assert serialize_tag(parse_tag(once)) == once

    @given(text=tag_strings())
    def test_case_insensitive(self, text: str) -> None:
        assert parse_tag(text.upper()) == parse_tag(text.lower())

    @given(text=base_tags())
    def test_base_name_reparses(self, text: str) -> None:
        tag = parse_tag(text)
        name = base_name(tag)
        assert name is not None
        reparsed = parse_tag(name)
        assert reparsed == tag
        event(f"subtags={name.count('-') + 1}")

    @given(case=unicode_extension_tags())
    def test_calendar_extracted(self, case: tuple[str, str]) -> None:
        text, expected = case
        assert Locale.parse(text).calendar == expected


class TestMalformedProperties:
    """Arbitrary input fails only with MalformedTagError."""

    @given(text=st.text(max_size=40))
    def test_only_malformed_error(self, text: str) -> None:
        try:
            parse_tag(text)
        except MalformedTagError as e:
            assert e.diagnostic is not None
            event(f"code={e.diagnostic.code.name}")
        else:
            event("valid")

    @given(text=tag_strings())
    def test_underscore_separator_rejected(self, text: str) -> None:
        if "-" in text:
            assert not is_valid_tag(text.replace("-", "_", 1))

    @pytest.mark.fuzz
    @given(text=st.text(alphabet="abcdefxuXU0123456789-", max_size=60))
    def test_validity_agrees_with_parse(self, text: str) -> None:
        valid = is_valid_tag(text)
        try:
            parse_tag(text)
        except MalformedTagError:
            assert not valid
        else:
            assert valid
