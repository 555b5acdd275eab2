"""Per-thread current-locale registry.

LocaleRegistry is an explicit, injectable context object holding one
CurrentLocaleCell per thread. Cells are created lazily on a thread's first
access by asking the platform lookup for the default locale; any failure
falls back to the 'und' sentinel and is never surfaced to callers.

Two ways to read:
    get_snapshot()     the Locale stored right now; later replacements do
                       not affect it
    get_live_handle()  the cell itself; replacements on this thread are
                       visible through it without another lookup

Module-level convenience functions operate on a process-wide default
registry for callers that do not inject their own.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from contextlib import contextmanager, suppress
from typing import TYPE_CHECKING, TypeAlias

from localetag.diagnostics import LocaleTagError
from localetag.locale_utils import get_system_locale

from .locale import Locale
from .rwlock import RWLock

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = [
    "CurrentLocaleCell",
    "LocaleRegistry",
    "current_locale",
    "default_registry",
    "live_current_locale",
    "set_current_locale",
]

logger = logging.getLogger(__name__)

LocaleLookup: TypeAlias = Callable[[], str]


class CurrentLocaleCell:
    """Holder of the active Locale for one thread.

    Reads take the shared guard and replacements take the exclusive guard,
    so no reader can observe a half-replaced value.

    Attributes:
        is_fallback: True when initialization fell back to 'und'

    Example:
        >>> cell = CurrentLocaleCell(Locale.parse("en-US"))
        >>> with cell.borrow() as loc:
        ...     loc.region
        'US'
        >>> cell.replace(Locale.parse("fr-FR"))
        >>> cell.locale.language
        'fr'
    """

    __slots__ = ("_lock", "_locale", "is_fallback")

    def __init__(self, locale: Locale, *, is_fallback: bool = False) -> None:
        self._lock = RWLock()
        self._locale = locale
        self.is_fallback = is_fallback

    @property
    def locale(self) -> Locale:
        """The Locale stored at the moment of the call."""
        with self._lock.read():
            return self._locale

    @contextmanager
    def borrow(self, timeout: float | None = None) -> Generator[Locale]:
        """Hold a read guard and yield the stored Locale.

        Calling replace() on this cell from inside the block raises
        RuntimeError.
        """
        with self._lock.read(timeout):
            yield self._locale

    def replace(self, locale: Locale, timeout: float | None = None) -> None:
        """Atomically substitute the stored Locale.

        Args:
            locale: New Locale
            timeout: Seconds to wait for outstanding readers; None waits forever

        Raises:
            TypeError: If locale is not a Locale.
            RuntimeError: If this thread currently borrows the cell.
            TimeoutError: If readers do not leave within timeout.
        """
        if not isinstance(locale, Locale):
            msg = f"Expected Locale, got {type(locale).__name__}"
            raise TypeError(msg)
        with self._lock.write(timeout):
            self._locale = locale
            self.is_fallback = False

    def __repr__(self) -> str:
        return f"CurrentLocaleCell({str(self.locale)!r}, is_fallback={self.is_fallback})"


class LocaleRegistry:
    """Per-thread store of the current Locale.

    Args:
        lookup: Platform collaborator returning a raw tag string. Defaults to
            get_system_locale. Called at most once per thread (until reset()).

    Example:
        >>> registry = LocaleRegistry(lookup=lambda: "de-DE")
        >>> handle = registry.get_live_handle()
        >>> snapshot = registry.get_snapshot()
        >>> registry.replace(Locale.parse("ja-JP"))
        >>> handle.locale.language, snapshot.language
        ('ja', 'de')
    """

    __slots__ = ("_local", "_lookup")

    def __init__(self, lookup: LocaleLookup = get_system_locale) -> None:
        self._lookup = lookup
        self._local = threading.local()

    def _initial_cell(self) -> CurrentLocaleCell:
        try:
            raw = self._lookup()
        except Exception:  # noqa: BLE001 - any lookup failure means 'und'
            logger.debug("Default locale lookup failed, using 'und'", exc_info=True)
            return self._fallback_cell()
        if not isinstance(raw, str):
            logger.debug("Default locale lookup returned %r, using 'und'", raw)
            return self._fallback_cell()
        try:
            locale = Locale.parse(raw)
        except LocaleTagError as e:
            logger.debug("Default locale %r unusable, using 'und': %s", raw, e)
            return self._fallback_cell()
        logger.debug("Default locale for thread %s: %s", threading.get_ident(), locale)
        return CurrentLocaleCell(locale)

    @staticmethod
    def _fallback_cell() -> CurrentLocaleCell:
        return CurrentLocaleCell(Locale.undetermined(), is_fallback=True)

    def _cell(self) -> CurrentLocaleCell:
        cell: CurrentLocaleCell | None = getattr(self._local, "cell", None)
        if cell is None:
            cell = self._initial_cell()
            self._local.cell = cell
        return cell

    def get_snapshot(self) -> Locale:
        """Return this thread's current Locale, decoupled from later updates."""
        return self._cell().locale

    def get_live_handle(self) -> CurrentLocaleCell:
        """Return this thread's cell; replacements show through it."""
        return self._cell()

    def replace(self, locale: Locale) -> None:
        """Substitute this thread's current Locale.

        Visible to every live handle of this thread once the call returns.
        Other threads are unaffected.
        """
        self._cell().replace(locale)

    def reset(self) -> None:
        """Forget this thread's cell; the next access repeats the lookup.

        Handles obtained earlier keep working but are detached.
        """
        with suppress(AttributeError):
            del self._local.cell

    @property
    def is_initialized(self) -> bool:
        """True once this thread's cell exists."""
        return getattr(self._local, "cell", None) is not None


default_registry = LocaleRegistry()


def current_locale() -> Locale:
    """Snapshot of the calling thread's current Locale (default registry)."""
    return default_registry.get_snapshot()


def live_current_locale() -> CurrentLocaleCell:
    """Live handle on the calling thread's cell (default registry)."""
    return default_registry.get_live_handle()


def set_current_locale(locale: Locale) -> None:
    """Replace the calling thread's current Locale (default registry)."""
    default_registry.replace(locale)
