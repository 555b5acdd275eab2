"""Locale facade over a validated Tag.

Locale is an immutable wrapper exposing absence-aware accessors for the base
identity and the formatting preferences carried in the -u- extension.

Architecture:
    - Locale owns exactly one Tag; equality and hashing are the Tag's
    - Base identity comes from syntax.serializer
    - Preferences come from syntax.keywords (raw keyword values)
    - Accessors that would need CLDR data raise UnsupportedAccessorError

Replacing "the" locale means building a new Locale and handing it to the
registry; Locale itself is never mutated.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn

from localetag.diagnostics import ErrorTemplate, UnsupportedAccessorError
from localetag.syntax import keywords
from localetag.syntax.keywords import UnicodeKeywords
from localetag.syntax.parser import parse_tag
from localetag.syntax.serializer import base_name, serialize_tag
from localetag.syntax.tag import Tag

__all__ = ["Locale"]


def _unsupported(accessor: str) -> NoReturn:
    raise UnsupportedAccessorError(
        ErrorTemplate.unsupported_accessor(accessor), accessor=accessor
    )


@dataclass(frozen=True, slots=True)
class Locale:
    """Immutable locale built from a successfully parsed Tag.

    Use Locale.parse() for strings; Locale(tag) wraps an existing Tag.

    Examples:
        >>> loc = Locale.parse("de-Latn-DE-u-co-phonebk-ka-shifted")
        >>> loc.language, loc.script, loc.region
        ('de', 'Latn', 'DE')
        >>> loc.base_name
        'de-Latn-DE'
        >>> loc.collation
        'phonebk'
        >>> loc.calendar is None
        True
        >>> Locale.parse("DE-de") == Locale.parse("de-DE")
        True

    Thread Safety:
        Locale is immutable and may be shared freely between threads.
    """

    tag: Tag

    def __post_init__(self) -> None:
        if not isinstance(self.tag, Tag):
            msg = f"Expected Tag, got {type(self.tag).__name__}; use Locale.parse() for strings"
            raise TypeError(msg)

    @classmethod
    def parse(cls, text: str) -> Locale:
        """Build a Locale from a raw tag string.

        Raises:
            MalformedTagError: Exactly when parse_tag() fails.
        """
        return cls(parse_tag(text))

    @classmethod
    def undetermined(cls) -> Locale:
        """The sentinel 'und' locale (no language)."""
        return cls(Tag.UNDETERMINED)

    def __str__(self) -> str:
        return serialize_tag(self.tag)

    # ------------------------------------------------------------------
    # Base identity
    # ------------------------------------------------------------------

    @property
    def language(self) -> str | None:
        return self.tag.language

    @property
    def script(self) -> str | None:
        return self.tag.script

    @property
    def region(self) -> str | None:
        return self.tag.region

    @property
    def variants(self) -> tuple[str, ...]:
        return self.tag.variants

    @property
    def private_use(self) -> tuple[str, ...]:
        return self.tag.private_use

    @property
    def is_undetermined(self) -> bool:
        return self.tag.is_undetermined

    @property
    def base_name(self) -> str | None:
        """language-script-region-variants, or None without a language."""
        return base_name(self.tag)

    def extension(self, singleton: str) -> tuple[str, ...] | None:
        """Subtags of an extension block (e.g. 't'), or None if absent."""
        return self.tag.extension(singleton)

    # ------------------------------------------------------------------
    # Unicode extension preferences
    # ------------------------------------------------------------------

    @property
    def keywords(self) -> UnicodeKeywords:
        """All -u- keywords, recomputed from the tag on each access."""
        return keywords.unicode_keywords(self.tag)

    def keyword(self, key: str) -> str | None:
        """Raw value of any -u- keyword, including unnamed ones like 'ka'."""
        return keywords.keyword_value(self.tag, key)

    @property
    def calendar(self) -> str | None:
        return keywords.calendar(self.tag)

    @property
    def collation(self) -> str | None:
        return keywords.collation(self.tag)

    @property
    def hour_cycle(self) -> str | None:
        return keywords.hour_cycle(self.tag)

    @property
    def case_first(self) -> str | None:
        return keywords.case_first(self.tag)

    @property
    def numeric(self) -> str | None:
        return keywords.numeric(self.tag)

    @property
    def numbering_system(self) -> str | None:
        return keywords.numbering_system(self.tag)

    # ------------------------------------------------------------------
    # Locale-data accessors (not provided)
    # ------------------------------------------------------------------
    # These answer "what does this locale support", which needs CLDR data.
    # They raise instead of returning None so callers can tell
    # "not implemented" apart from "not requested in the tag".

    def available_calendars(self) -> tuple[str, ...]:
        _unsupported("available_calendars")

    def available_collations(self) -> tuple[str, ...]:
        _unsupported("available_collations")

    def available_hour_cycles(self) -> tuple[str, ...]:
        _unsupported("available_hour_cycles")

    def available_numbering_systems(self) -> tuple[str, ...]:
        _unsupported("available_numbering_systems")

    def time_zones(self) -> tuple[str, ...]:
        _unsupported("time_zones")

    def text_info(self) -> dict[str, str]:
        _unsupported("text_info")

    def week_info(self) -> dict[str, int | tuple[int, ...]]:
        _unsupported("week_info")
