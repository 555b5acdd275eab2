"""Subtag classification for the language tag grammar.

Single source of truth for what each position of a tag accepts. The parser
uses these predicates to decide which slot a subtag fills; Tag construction
uses them to reject programmatically built values.

Grammar (case-insensitive, ASCII only):
    language   2-3, 4 or 5-8 letters
    script     exactly 4 letters
    region     2 letters or 3 digits
    variant    4 alphanumerics starting with a digit, or 5-8 alphanumerics
    singleton  1 alphanumeric (x introduces private use, others extensions)
    other      1-8 alphanumerics (extension and private-use subtags)

Thread Safety:
    All functions in this module are pure functions with no shared state.

Python 3.13+.
"""

from __future__ import annotations

import re

from localetag.constants import MAX_SUBTAG_LENGTH, PRIVATE_USE_SINGLETON

__all__ = [
    "is_alphanumeric",
    "is_extension_subtag",
    "is_language",
    "is_private_use_singleton",
    "is_region",
    "is_script",
    "is_singleton",
    "is_unicode_key",
    "is_variant",
]

_ALPHANUMERIC: re.Pattern[str] = re.compile(r"[a-zA-Z0-9]+")
_LANGUAGE: re.Pattern[str] = re.compile(r"[a-zA-Z]{2,8}")
_SCRIPT: re.Pattern[str] = re.compile(r"[a-zA-Z]{4}")
_REGION: re.Pattern[str] = re.compile(r"[a-zA-Z]{2}|[0-9]{3}")
_VARIANT: re.Pattern[str] = re.compile(r"[0-9][a-zA-Z0-9]{3}|[a-zA-Z0-9]{5,8}")
_UNICODE_KEY: re.Pattern[str] = re.compile(r"[a-zA-Z0-9]{2}")


def is_alphanumeric(subtag: str) -> bool:
    """Check that a subtag is non-empty and ASCII letters/digits only.

    Example:
        >>> is_alphanumeric("Latn")
        True
        >>> is_alphanumeric("de_DE")
        False
        >>> is_alphanumeric("ñ")
        False
    """
    return _ALPHANUMERIC.fullmatch(subtag) is not None


def is_language(subtag: str) -> bool:
    """Check the primary language slot: 2-3, 4 (reserved) or 5-8 letters."""
    return _LANGUAGE.fullmatch(subtag) is not None


def is_script(subtag: str) -> bool:
    """Check the script slot: exactly 4 letters."""
    return _SCRIPT.fullmatch(subtag) is not None


def is_region(subtag: str) -> bool:
    """Check the region slot: 2 letters or 3 digits.

    Example:
        >>> is_region("DE"), is_region("419"), is_region("4a9")
        (True, True, False)
    """
    return _REGION.fullmatch(subtag) is not None


def is_variant(subtag: str) -> bool:
    """Check the variant slot: digit + 3 alphanumerics, or 5-8 alphanumerics.

    Example:
        >>> is_variant("1996"), is_variant("fonipa"), is_variant("abcd")
        (True, True, False)
    """
    return _VARIANT.fullmatch(subtag) is not None


def is_singleton(subtag: str) -> bool:
    """Check for a single alphanumeric character (extension or private use)."""
    return len(subtag) == 1 and is_alphanumeric(subtag)


def is_extension_subtag(subtag: str) -> bool:
    """Check a subtag inside an extension or private-use block: 1-8 alphanumerics."""
    return len(subtag) <= MAX_SUBTAG_LENGTH and is_alphanumeric(subtag)


def is_unicode_key(subtag: str) -> bool:
    """Check for a -u- keyword key: exactly 2 alphanumerics."""
    return _UNICODE_KEY.fullmatch(subtag) is not None


def is_private_use_singleton(subtag: str) -> bool:
    """Check for the private-use singleton, case-insensitively."""
    return subtag.lower() == PRIVATE_USE_SINGLETON
