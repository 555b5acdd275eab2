"""Platform default-locale lookup.

Turns the POSIX locale of the running process into a language tag string.
This is the external collaborator of the current-locale registry: it either
returns a raw identifier ready for parse_tag() or raises PlatformLookupError.

Python 3.13+. Uses Babel to read and parse the environment.
"""

from __future__ import annotations

from localetag.constants import SUBTAG_SEPARATOR
from localetag.diagnostics import ErrorTemplate, PlatformLookupError

__all__ = [
    "get_system_locale",
    "posix_to_tag",
]


def posix_to_tag(posix_locale: str) -> str:
    """Convert a POSIX locale identifier to a '-' separated tag string.

    Encoding and modifier suffixes are dropped.

    Args:
        posix_locale: Identifier such as "de_DE.UTF-8" or "zh_Hans_CN"

    Returns:
        Tag string such as "de-DE" or "zh-Hans-CN"

    Raises:
        PlatformLookupError: If Babel cannot parse the identifier.

    Example:
        >>> posix_to_tag("pt_BR.UTF-8")
        'pt-BR'
        >>> posix_to_tag("sr_RS@latin")
        'sr-RS'
    """
    from babel.core import get_locale_identifier, parse_locale  # noqa: PLC0415

    try:
        parts = parse_locale(posix_locale)
    except ValueError as e:
        raise PlatformLookupError(
            ErrorTemplate.platform_locale_invalid(posix_locale, str(e))
        ) from e
    # parse_locale may append a modifier as a fifth element; tags have no slot for it.
    language, territory, script, variant = parts[:4]
    return get_locale_identifier((language, territory, script, variant), sep=SUBTAG_SEPARATOR)


def get_system_locale() -> str:
    """Detect the platform default locale as a tag string.

    Reads LANGUAGE, LC_ALL, LC_CTYPE and LANG (in that order) through
    babel.default_locale(), which also maps the "C" and "POSIX" pseudo-locales
    to en_US_POSIX.

    Returns:
        Tag string such as "de-DE"

    Raises:
        PlatformLookupError: If no locale is configured or it cannot be parsed.

    Example:
        >>> get_system_locale()  # doctest: +SKIP
        'de-DE'
    """
    # Lazy import: Babel loads CLDR metadata at import time; defer until needed
    from babel import default_locale  # noqa: PLC0415

    detected = default_locale()
    if not detected:
        raise PlatformLookupError(ErrorTemplate.platform_locale_unset())
    return posix_to_tag(detected)
