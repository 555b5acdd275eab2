"""Tests for base-name and full canonical serialization.

Python 3.13+.
"""

import pytest

from localetag.syntax import Tag, base_name, parse_tag, serialize_tag


class TestBaseName:
    """language-script-region-variants only."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("en", "en"),
            ("EN-us", "en-US"),
            ("zh-hant-tw", "zh-Hant-TW"),
            ("de-CH-1996-fonipa", "de-CH-1996-fonipa"),
            ("es-419", "es-419"),
        ],
    )
    def test_base_subtags(self, text: str, expected: str) -> None:
        assert base_name(parse_tag(text)) == expected

    def test_extensions_excluded(self) -> None:
        tag = parse_tag("de-Latn-DE-u-co-phonebk-t-und-cyrl-x-private")
        assert base_name(tag) == "de-Latn-DE"

    def test_no_language_is_none(self) -> None:
        assert base_name(parse_tag("und")) is None
        assert base_name(parse_tag("und-Latn-t-und-cyrl")) is None
        assert base_name(parse_tag("x-private")) is None

    def test_reparse_reproduces_base(self) -> None:
        tag = parse_tag("sl-Latn-IT-rozaj-nedis-u-nu-arab")
        reparsed = parse_tag(base_name(tag) or "")
        assert (reparsed.language, reparsed.script, reparsed.region, reparsed.variants) == (
            tag.language,
            tag.script,
            tag.region,
            tag.variants,
        )
        assert reparsed.extensions == ()


class TestSerializeTag:
    """Full canonical form."""

    def test_extensions_sorted_by_singleton(self) -> None:
        tag = parse_tag("de-Latn-u-co-phonebk-ka-shifted-t-und-cyrl")
        assert serialize_tag(tag) == "de-Latn-t-und-cyrl-u-co-phonebk-ka-shifted"

    def test_undetermined(self) -> None:
        assert serialize_tag(Tag.UNDETERMINED) == "und"

    def test_absent_language_written_as_und(self) -> None:
        assert serialize_tag(parse_tag("UND-latn")) == "und-Latn"

    def test_private_use_only(self) -> None:
        assert serialize_tag(parse_tag("X-Foo-BAR")) == "x-foo-bar"

    def test_und_with_private_use_drops_und(self) -> None:
        assert serialize_tag(parse_tag("und-x-foo")) == "x-foo"

    def test_private_use_last(self) -> None:
        assert serialize_tag(parse_tag("en-x-foo")) == "en-x-foo"

    def test_str_of_tag(self) -> None:
        assert str(parse_tag("EN-latn-us-U-CA-Gregory")) == "en-Latn-US-u-ca-gregory"

    @pytest.mark.parametrize(
        "text",
        [
            "en",
            "und",
            "x-foo",
            "und-x-foo",
            "en-u-kn",
            "und-Latn-t-und-cyrl",
            "de-Latn-u-co-phonebk-ka-shifted-t-und-cyrl",
            "sl-rozaj-biske-1994-x-a-b-c",
        ],
    )
    def test_reparse_is_identity(self, text: str) -> None:
        tag = parse_tag(text)
        assert parse_tag(serialize_tag(tag)) == tag
