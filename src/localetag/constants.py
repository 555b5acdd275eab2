"""Shared constants for localetag.

Centralized configuration constants used across the syntax and runtime
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Grammar: subtag separator, singletons, reserved codes
- Input limits: DoS prevention via size constraints
- Cache limits: Memory bounds for parse memoization
- Unicode extension keys: the locale preferences exposed by name

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar
    "SUBTAG_SEPARATOR",
    "PRIVATE_USE_SINGLETON",
    "UNICODE_EXTENSION_SINGLETON",
    "UNDETERMINED",
    # Input limits
    "MAX_SUBTAG_LENGTH",
    "MAX_TAG_LENGTH",
    # Cache limits
    "PARSE_CACHE_SIZE",
    # Unicode extension keys
    "KEY_CALENDAR",
    "KEY_CASE_FIRST",
    "KEY_COLLATION",
    "KEY_HOUR_CYCLE",
    "KEY_NUMBERING_SYSTEM",
    "KEY_NUMERIC",
]

# ============================================================================
# GRAMMAR
# ============================================================================

SUBTAG_SEPARATOR: str = "-"

# Introduces the private-use block; absorbs every remaining subtag.
PRIVATE_USE_SINGLETON: str = "x"

# Introduces the Unicode locale extension carrying formatting preferences.
UNICODE_EXTENSION_SINGLETON: str = "u"

# Reserved language code for the undetermined locale.
# Parses to an absent language; serializes back as "und".
UNDETERMINED: str = "und"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Every subtag other than a singleton is 1-8 characters.
MAX_SUBTAG_LENGTH: int = 8

# Maximum accepted length of a raw tag string.
# Real tags are well under 100 characters; anything near this limit is
# adversarial input and is rejected before splitting.
MAX_TAG_LENGTH: int = 1024

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Memoized parse results (parse_tag is pure).
# 256 covers every locale a typical multi-region application touches.
PARSE_CACHE_SIZE: int = 256

# ============================================================================
# UNICODE EXTENSION KEYS
# ============================================================================

KEY_CALENDAR: str = "ca"
KEY_COLLATION: str = "co"
KEY_HOUR_CYCLE: str = "hc"
KEY_CASE_FIRST: str = "kf"
KEY_NUMERIC: str = "kn"
KEY_NUMBERING_SYSTEM: str = "nu"
