"""Language tag parser and validator.

Splits a raw string on '-' and consumes the subtags against the grammar in
strict order:

    language? script? region? variant* extension* privateuse?

The first subtag must be a language or the private-use singleton 'x'.
Extension blocks run until the next singleton or end of input and must carry
at least one subtag. The private-use block absorbs every remaining subtag.

Failures raise MalformedTagError whose Diagnostic points at the offending
subtag. No registry lookup is performed: anything matching the grammar is
accepted.

Thread Safety:
    parse_tag() is a pure function. Results are memoized with lru_cache,
    which is internally locked.

Python 3.13+.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass

from localetag.constants import (
    MAX_SUBTAG_LENGTH,
    MAX_TAG_LENGTH,
    PARSE_CACHE_SIZE,
    PRIVATE_USE_SINGLETON,
    SUBTAG_SEPARATOR,
)
from localetag.diagnostics import Diagnostic, ErrorTemplate, MalformedTagError

from .subtags import (
    is_alphanumeric,
    is_language,
    is_private_use_singleton,
    is_region,
    is_script,
    is_singleton,
    is_variant,
)
from .tag import ExtensionBlock, Tag

__all__ = ["is_valid_tag", "parse_tag"]


@dataclass(frozen=True, slots=True)
class _Subtag:
    """One subtag with its position in the raw input."""

    text: str
    index: int
    offset: int

    @property
    def lower(self) -> str:
        return self.text.lower()


class _TagParser:
    """Single-use cursor over the subtags of one input string."""

    __slots__ = ("_input", "_pos", "_subtags")

    def __init__(self, text: str) -> None:
        self._input = text
        self._subtags = self._split(text)
        self._pos = 0

    def _fail(self, diagnostic: Diagnostic) -> MalformedTagError:
        return MalformedTagError(diagnostic, input_value=self._input)

    def _split(self, text: str) -> list[_Subtag]:
        subtags: list[_Subtag] = []
        offset = 0
        for index, part in enumerate(text.split(SUBTAG_SEPARATOR)):
            if not part:
                raise self._fail(ErrorTemplate.empty_subtag(index, offset))
            if not is_alphanumeric(part):
                raise self._fail(ErrorTemplate.invalid_character(part, index, offset))
            if len(part) > MAX_SUBTAG_LENGTH:
                raise self._fail(ErrorTemplate.subtag_too_long(part, index, offset))
            subtags.append(_Subtag(part, index, offset))
            offset += len(part) + len(SUBTAG_SEPARATOR)
        return subtags

    def _peek(self) -> _Subtag | None:
        if self._pos < len(self._subtags):
            return self._subtags[self._pos]
        return None

    def _take_if(self, predicate: Callable[[str], bool]) -> str | None:
        current = self._peek()
        if current is not None and predicate(current.text):
            self._pos += 1
            return current.text
        return None

    def parse(self) -> Tag:
        first = self._subtags[0]
        language: str | None = None
        script: str | None = None
        region: str | None = None
        variants: list[str] = []
        extensions: list[ExtensionBlock] = []

        if not is_private_use_singleton(first.text):
            if not is_language(first.text):
                raise self._fail(
                    ErrorTemplate.invalid_language(first.text, first.index, first.offset)
                )
            language = first.text
            self._pos = 1
            script = self._take_if(is_script)
            region = self._take_if(is_region)
            self._parse_variants(variants)
            self._parse_extensions(extensions)

        private_use = self._parse_private_use()

        leftover = self._peek()
        if leftover is not None:
            raise self._fail(
                ErrorTemplate.subtag_out_of_place(leftover.text, leftover.index, leftover.offset)
            )

        return Tag(
            language=language,
            script=script,
            region=region,
            variants=tuple(variants),
            extensions=tuple(extensions),
            private_use=private_use,
        )

    def _parse_variants(self, variants: list[str]) -> None:
        while (current := self._peek()) is not None and is_variant(current.text):
            if current.lower in variants:
                raise self._fail(
                    ErrorTemplate.duplicate_variant(current.text, current.index, current.offset)
                )
            variants.append(current.lower)
            self._pos += 1

    def _parse_extensions(self, extensions: list[ExtensionBlock]) -> None:
        seen: set[str] = set()
        while (
            (current := self._peek()) is not None
            and is_singleton(current.text)
            and not is_private_use_singleton(current.text)
        ):
            singleton = current.lower
            if singleton in seen:
                raise self._fail(
                    ErrorTemplate.duplicate_singleton(singleton, current.index, current.offset)
                )
            seen.add(singleton)
            self._pos += 1
            body = self._take_block()
            if not body:
                raise self._fail(
                    ErrorTemplate.empty_extension(singleton, current.index, current.offset)
                )
            extensions.append((singleton, body))

    def _take_block(self) -> tuple[str, ...]:
        """Consume subtags up to the next singleton or end of input."""
        body: list[str] = []
        while (current := self._peek()) is not None and not is_singleton(current.text):
            body.append(current.lower)
            self._pos += 1
        return tuple(body)

    def _parse_private_use(self) -> tuple[str, ...]:
        current = self._peek()
        if current is None or not is_private_use_singleton(current.text):
            return ()
        self._pos += 1
        rest = self._subtags[self._pos :]
        if not rest:
            raise self._fail(
                ErrorTemplate.empty_extension(PRIVATE_USE_SINGLETON, current.index, current.offset)
            )
        self._pos = len(self._subtags)
        return tuple(s.lower for s in rest)


@functools.lru_cache(maxsize=PARSE_CACHE_SIZE)
def parse_tag(text: str) -> Tag:
    """Parse and validate a language tag string.

    Parsing is case-insensitive; the returned Tag is case-normalized.
    The reserved code 'und' yields a Tag with no language.

    Args:
        text: Raw tag string (e.g. "de-Latn-DE-u-co-phonebk")

    Returns:
        Canonicalized Tag

    Raises:
        MalformedTagError: If the string is empty, too long, or violates the
            grammar at any subtag position.

    Example:
        >>> tag = parse_tag("DE-LATN-de")
        >>> tag.language, tag.script, tag.region
        ('de', 'Latn', 'DE')
        >>> parse_tag("en-1996-1996")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        localetag.diagnostics.errors.MalformedTagError: Variant subtag '1996' appears more than once
    """
    if not text:
        raise MalformedTagError(ErrorTemplate.empty_tag(), input_value=text)
    if len(text) > MAX_TAG_LENGTH:
        raise MalformedTagError(
            ErrorTemplate.tag_too_long(len(text), MAX_TAG_LENGTH),
            input_value=text[:MAX_TAG_LENGTH],
        )
    return _TagParser(text).parse()


def is_valid_tag(text: str) -> bool:
    """Check whether a string is a grammatically valid language tag.

    Example:
        >>> is_valid_tag("en-US"), is_valid_tag("en_US")
        (True, False)
    """
    try:
        parse_tag(text)
    except MalformedTagError:
        return False
    return True
