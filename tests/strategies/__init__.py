"""Hypothesis strategies for localetag property-based testing.

Usage:
    from tests.strategies import base_tags, tag_strings
"""

from .tags import (
    base_tags,
    calendars,
    extension_blocks,
    extension_singletons,
    extension_subtags,
    languages,
    private_use_subtags,
    regions,
    scripts,
    tag_strings,
    unicode_extension_tags,
    variants,
)

__all__ = [
    "base_tags",
    "calendars",
    "extension_blocks",
    "extension_singletons",
    "extension_subtags",
    "languages",
    "private_use_subtags",
    "regions",
    "scripts",
    "tag_strings",
    "unicode_extension_tags",
    "variants",
]
