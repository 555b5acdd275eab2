"""Canonical serialization of Tag values.

Two views of a Tag:
    base_name()      language-script-region-variants, None without a language
    serialize_tag()  full canonical tag including extensions and private use

Both are inverses of the parser on the subset they emit: reparsing the output
reproduces the same fields.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from localetag.constants import PRIVATE_USE_SINGLETON, SUBTAG_SEPARATOR, UNDETERMINED

if TYPE_CHECKING:
    from .tag import Tag

__all__ = ["base_name", "serialize_tag"]


def _base_subtags(tag: Tag, language: str) -> list[str]:
    parts = [language]
    if tag.script is not None:
        parts.append(tag.script)
    if tag.region is not None:
        parts.append(tag.region)
    parts.extend(tag.variants)
    return parts


def base_name(tag: Tag) -> str | None:
    """Return the base identity string of a tag.

    Extensions and private use are excluded; query them separately.

    Args:
        tag: Parsed tag

    Returns:
        "language[-script][-region][-variant...]", or None when the tag has
        no language (undetermined or private-use only).

    Example:
        >>> from localetag.syntax import parse_tag
        >>> base_name(parse_tag("de-Latn-DE-1901-u-co-phonebk"))
        'de-Latn-DE-1901'
        >>> base_name(parse_tag("und-Latn")) is None
        True
    """
    if tag.language is None:
        return None
    return SUBTAG_SEPARATOR.join(_base_subtags(tag, tag.language))


def serialize_tag(tag: Tag) -> str:
    """Return the full canonical string of a tag.

    Extension blocks are emitted in singleton order. An absent language is
    written as 'und' unless the tag is private-use only.

    Example:
        >>> from localetag.syntax import parse_tag
        >>> serialize_tag(parse_tag("EN-x-Foo-U-ca-buddhist"))
        'en-x-foo-u-ca-buddhist'
        >>> serialize_tag(parse_tag("en-t-und-cyrl-u-ca-buddhist"))
        'en-t-und-cyrl-u-ca-buddhist'
        >>> serialize_tag(parse_tag("x-private"))
        'x-private'
    """
    has_base = (
        tag.language is not None
        or tag.script is not None
        or tag.region is not None
        or bool(tag.variants)
        or bool(tag.extensions)
    )
    parts: list[str] = []
    if has_base or not tag.private_use:
        parts.extend(_base_subtags(tag, tag.language or UNDETERMINED))
    for singleton, subtags in tag.extensions:
        parts.append(singleton)
        parts.extend(subtags)
    if tag.private_use:
        parts.append(PRIVATE_USE_SINGLETON)
        parts.extend(tag.private_use)
    return SUBTAG_SEPARATOR.join(parts)
