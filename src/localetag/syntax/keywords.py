"""Unicode locale extension (-u-) keyword extraction.

The subtags of the 'u' block are re-segmented into keywords:

    u-attr1-attr2-ca-buddhist-co-phonebk-kn
      ^^^^^^^^^^^ attributes (before the first key)
                  ^^ key    ^^ key      ^^ key with an empty value

A key is exactly two alphanumerics; its value is the maximal run of following
subtags that are not keys. The keyword map is derived on demand from the Tag
and never stored or mutated independently. Values are extracted verbatim;
whether 'buddhist' is a real calendar is locale data and out of scope.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from localetag.constants import (
    KEY_CALENDAR,
    KEY_CASE_FIRST,
    KEY_COLLATION,
    KEY_HOUR_CYCLE,
    KEY_NUMBERING_SYSTEM,
    KEY_NUMERIC,
    SUBTAG_SEPARATOR,
    UNICODE_EXTENSION_SINGLETON,
)

from .subtags import is_unicode_key

if TYPE_CHECKING:
    from .tag import Tag

__all__ = [
    "UnicodeKeywords",
    "calendar",
    "case_first",
    "collation",
    "hour_cycle",
    "keyword_value",
    "numbering_system",
    "numeric",
    "unicode_keywords",
]


class UnicodeKeywords(Mapping[str, tuple[str, ...]]):
    """Read-only key -> value-subtags view of a -u- extension block.

    If a key repeats, the first occurrence wins.

    Attributes:
        attributes: Subtags preceding the first key

    Example:
        >>> kw = UnicodeKeywords(("co", "phonebk", "ka", "shifted", "kn"))
        >>> kw["co"], kw["kn"]
        (('phonebk',), ())
        >>> kw.value("co"), kw.value("kn"), kw.value("ca")
        ('phonebk', '', None)
    """

    __slots__ = ("_attributes", "_keywords")

    def __init__(self, subtags: tuple[str, ...] = ()) -> None:
        """Segment the subtags of a 'u' block.

        Args:
            subtags: Lowercased subtags following the 'u' singleton
        """
        attributes: list[str] = []
        keywords: dict[str, tuple[str, ...]] = {}
        key: str | None = None
        run: list[str] = []
        for subtag in subtags:
            if is_unicode_key(subtag):
                if key is not None:
                    keywords.setdefault(key, tuple(run))
                key, run = subtag, []
            elif key is None:
                attributes.append(subtag)
            else:
                run.append(subtag)
        if key is not None:
            keywords.setdefault(key, tuple(run))
        self._attributes = tuple(attributes)
        self._keywords = keywords

    @property
    def attributes(self) -> tuple[str, ...]:
        return self._attributes

    def __getitem__(self, key: object) -> tuple[str, ...]:
        if not isinstance(key, str):
            raise KeyError(key)
        return self._keywords[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keywords)

    def __len__(self) -> int:
        return len(self._keywords)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._keywords

    def __repr__(self) -> str:
        return f"UnicodeKeywords({self._keywords!r}, attributes={self._attributes!r})"

    def value(self, key: object) -> str | None:
        """Return the value run joined with '-', or None if the key is absent.

        A key present with no value yields the empty string.
        """
        if not isinstance(key, str):
            return None
        subtags = self._keywords.get(key.lower())
        if subtags is None:
            return None
        return SUBTAG_SEPARATOR.join(subtags)


def unicode_keywords(tag: Tag) -> UnicodeKeywords:
    """Derive the keyword map of a tag's 'u' block (empty when absent)."""
    return UnicodeKeywords(tag.extension(UNICODE_EXTENSION_SINGLETON) or ())


def keyword_value(tag: Tag, key: str) -> str | None:
    """Look up any -u- keyword by its two-character key.

    Args:
        tag: Parsed tag
        key: Keyword key, case-insensitive (e.g. "ka")

    Returns:
        Value subtags joined with '-', "" for a key without value, None when
        the key or the whole 'u' block is absent.

    Example:
        >>> from localetag.syntax import parse_tag
        >>> keyword_value(parse_tag("de-u-co-phonebk-ka-shifted"), "ka")
        'shifted'
    """
    return unicode_keywords(tag).value(key)


def calendar(tag: Tag) -> str | None:
    """Calendar preference ('ca'), e.g. 'buddhist', 'islamic-civil'."""
    return keyword_value(tag, KEY_CALENDAR)


def collation(tag: Tag) -> str | None:
    """Collation preference ('co'), e.g. 'phonebk'."""
    return keyword_value(tag, KEY_COLLATION)


def hour_cycle(tag: Tag) -> str | None:
    """Hour cycle preference ('hc'), e.g. 'h12'."""
    return keyword_value(tag, KEY_HOUR_CYCLE)


def case_first(tag: Tag) -> str | None:
    """Case-first ordering preference ('kf'), e.g. 'upper'."""
    return keyword_value(tag, KEY_CASE_FIRST)


def numeric(tag: Tag) -> str | None:
    """Numeric collation flag ('kn'); "" when given without a value."""
    return keyword_value(tag, KEY_NUMERIC)


def numbering_system(tag: Tag) -> str | None:
    """Numbering system preference ('nu'), e.g. 'arab'."""
    return keyword_value(tag, KEY_NUMBERING_SYSTEM)
