"""Language tag syntax: data model, parser, serializer, keyword extraction.

Pure string processing with no locale data, I/O, or shared mutable state.

Exports:
    Tag: Case-normalized structural identity of a language tag
    parse_tag: String -> Tag, raising MalformedTagError
    is_valid_tag: Grammar check without raising
    base_name: Tag -> "language-script-region-variants" (or None)
    serialize_tag: Tag -> full canonical string
    UnicodeKeywords: Key -> value view of the -u- extension
    unicode_keywords / keyword_value: Keyword lookup on a Tag

Python 3.13+.
"""

from .keywords import UnicodeKeywords, keyword_value, unicode_keywords
from .parser import is_valid_tag, parse_tag
from .serializer import base_name, serialize_tag
from .tag import ExtensionBlock, Tag

__all__ = [
    "ExtensionBlock",
    "Tag",
    "UnicodeKeywords",
    "base_name",
    "is_valid_tag",
    "keyword_value",
    "parse_tag",
    "serialize_tag",
    "unicode_keywords",
]
