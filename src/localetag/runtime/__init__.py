"""Runtime layer: Locale facade and the per-thread current-locale registry.

Exports:
    Locale: Immutable facade over a validated Tag
    CurrentLocaleCell: Live handle on one thread's current Locale
    LocaleRegistry: Injectable per-thread registry of current Locales
    RWLock: Shared-read / exclusive-write guard used by the cell

Python 3.13+.
"""

from .locale import Locale
from .registry import (
    CurrentLocaleCell,
    LocaleRegistry,
    current_locale,
    default_registry,
    live_current_locale,
    set_current_locale,
)
from .rwlock import RWLock

__all__ = [
    "CurrentLocaleCell",
    "Locale",
    "LocaleRegistry",
    "RWLock",
    "current_locale",
    "default_registry",
    "live_current_locale",
    "set_current_locale",
]
