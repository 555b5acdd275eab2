"""localetag - BCP 47 language tags and a per-thread current locale.

Parses, validates and canonicalizes language tags, and exposes them through an
immutable Locale that reports its base identity and the formatting preferences
carried in the Unicode (-u-) extension.

Public API:
    Locale - Immutable locale facade (Locale.parse("de-DE-u-co-phonebk"))
    LocaleRegistry - Injectable per-thread current-locale registry
    CurrentLocaleCell - Live handle on a thread's current Locale
    current_locale / live_current_locale / set_current_locale - Default registry
    Tag - Structural tag value
    parse_tag - Parse a string to a Tag
    base_name / serialize_tag - Canonical serialization
    get_system_locale - Platform default-locale lookup

Exceptions:
    LocaleTagError - Base exception class
    MalformedTagError - Grammar violations
    PlatformLookupError - Default locale unavailable
    UnsupportedAccessorError - Locale-data accessor not provided

Submodules:
    localetag.syntax - Tag model, parser, serializer, keyword extraction
    localetag.runtime - Locale facade, registry, RWLock
    localetag.diagnostics - Diagnostic codes, templates and formatter
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    LocaleTagError,
    MalformedTagError,
    PlatformLookupError,
    UnsupportedAccessorError,
)
from .locale_utils import get_system_locale
from .runtime import (
    CurrentLocaleCell,
    Locale,
    LocaleRegistry,
    current_locale,
    live_current_locale,
    set_current_locale,
)
from .syntax import Tag, base_name, is_valid_tag, parse_tag, serialize_tag

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("localetag")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrentLocaleCell",
    "Locale",
    "LocaleRegistry",
    "LocaleTagError",
    "MalformedTagError",
    "PlatformLookupError",
    "Tag",
    "UnsupportedAccessorError",
    "__version__",
    "base_name",
    "current_locale",
    "get_system_locale",
    "is_valid_tag",
    "live_current_locale",
    "parse_tag",
    "serialize_tag",
    "set_current_locale",
]
