"""Structural identity of a language tag.

Tag is the immutable value produced by the parser. Case is normalized on
construction, so two tags that are grammatically equal after normalization
are also equal as values:

    language   lowercase ("und" becomes None)
    script     title case
    region     uppercase letters or digits
    everything else lowercase

Extension blocks are kept sorted by singleton. The tag holds a set of
blocks, so the order they appeared in the input does not affect equality.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from localetag.constants import PRIVATE_USE_SINGLETON, UNDETERMINED
from localetag.diagnostics import MalformedTagError

from .subtags import (
    is_extension_subtag,
    is_language,
    is_region,
    is_script,
    is_singleton,
    is_variant,
)

__all__ = ["ExtensionBlock", "Tag"]

ExtensionBlock: TypeAlias = tuple[str, tuple[str, ...]]


def _invalid(field_name: str, value: object) -> MalformedTagError:
    msg = f"Invalid {field_name} for Tag: {value!r}"
    return MalformedTagError(msg, input_value=str(value))


def _normalize_extensions(blocks: Iterable[ExtensionBlock]) -> tuple[ExtensionBlock, ...]:
    normalized: dict[str, tuple[str, ...]] = {}
    for singleton, subtags in blocks:
        key = singleton.lower()
        if not is_singleton(key) or key == PRIVATE_USE_SINGLETON:
            raise _invalid("extension singleton", singleton)
        if key in normalized:
            msg = f"Extension singleton '{key}' appears more than once"
            raise MalformedTagError(msg, input_value=key)
        values = tuple(s.lower() for s in subtags)
        if not values or not all(
            is_extension_subtag(s) and not is_singleton(s) for s in values
        ):
            raise _invalid(f"'{key}' extension subtags", subtags)
        normalized[key] = values
    return tuple(sorted(normalized.items()))


@dataclass(frozen=True, slots=True)
class Tag:
    """Parsed, case-normalized language tag.

    Prefer parse_tag() for strings. Direct construction validates each field
    and raises MalformedTagError (without a span) on invalid values.

    Attributes:
        language: Primary language subtag, None when undetermined
        script: 4-letter script subtag
        region: 2-letter or 3-digit region subtag
        variants: Distinct variant subtags in input order
        extensions: (singleton, subtags) blocks sorted by singleton
        private_use: Subtags following the 'x' singleton

    Example:
        >>> tag = Tag(language="DE", script="latn", region="de")
        >>> tag.language, tag.script, tag.region
        ('de', 'Latn', 'DE')
        >>> Tag(language="und").is_undetermined
        True
    """

    UNDETERMINED: ClassVar[Tag]

    language: str | None = None
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()
    extensions: tuple[ExtensionBlock, ...] = ()
    private_use: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate fields and apply case normalization.

        Raises:
            MalformedTagError: If a field violates the grammar, a variant
                repeats, or a singleton repeats.
        """
        language = self.language
        if language is not None:
            if not is_language(language):
                raise _invalid("language", language)
            language = language.lower()
            if language == UNDETERMINED:
                language = None
        object.__setattr__(self, "language", language)

        if self.script is not None:
            if not is_script(self.script):
                raise _invalid("script", self.script)
            object.__setattr__(self, "script", self.script.title())

        if self.region is not None:
            if not is_region(self.region):
                raise _invalid("region", self.region)
            object.__setattr__(self, "region", self.region.upper())

        variants = tuple(v.lower() for v in self.variants)
        for variant in variants:
            if not is_variant(variant):
                raise _invalid("variant", variant)
        if len(set(variants)) != len(variants):
            msg = f"Duplicate variant subtags: {variants!r}"
            raise MalformedTagError(msg, input_value="-".join(variants))
        object.__setattr__(self, "variants", variants)

        object.__setattr__(self, "extensions", _normalize_extensions(self.extensions))

        private_use = tuple(s.lower() for s in self.private_use)
        if not all(is_extension_subtag(s) for s in private_use):
            raise _invalid("private-use subtags", self.private_use)
        object.__setattr__(self, "private_use", private_use)

    @property
    def is_undetermined(self) -> bool:
        """True when the tag carries neither a language nor private use."""
        return self.language is None and not self.private_use

    @property
    def singletons(self) -> tuple[str, ...]:
        """Extension singletons present, in canonical order."""
        return tuple(singleton for singleton, _ in self.extensions)

    def extension(self, singleton: str) -> tuple[str, ...] | None:
        """Return the subtags of one extension block, or None if absent.

        Args:
            singleton: Extension singleton, case-insensitive (e.g. 'u', 'T')
        """
        key = singleton.lower()
        for name, subtags in self.extensions:
            if name == key:
                return subtags
        return None

    def __str__(self) -> str:
        """Full canonical tag string."""
        from .serializer import serialize_tag  # noqa: PLC0415 - circular

        return serialize_tag(self)


Tag.UNDETERMINED = Tag()
