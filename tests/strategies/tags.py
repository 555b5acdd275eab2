"""Hypothesis strategies for language tag testing.

Generates well-formed subtags for every grammar position, whole tag strings,
and their expected structure, with random letter case so normalization is
exercised on every example.

Usage:
    from hypothesis import given
    from tests.strategies.tags import base_tags, tag_strings

    @given(text=tag_strings())
    def test_parse(text):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGITS = "0123456789"
_ALNUM = _LETTERS + _DIGITS


def _text(alphabet: str, min_size: int, max_size: int) -> SearchStrategy[str]:
    return st.text(alphabet=alphabet, min_size=min_size, max_size=max_size)


# ============================================================================
# SUBTAGS BY POSITION
# ============================================================================

# 2-3 or 5-8 letters; 4-letter languages are reserved and would be read back
# as a language only in first position, which these strategies always use.
languages: SearchStrategy[str] = st.one_of(
    _text(_LETTERS, 2, 3), _text(_LETTERS, 5, 8)
).filter(lambda s: s.lower() != "und")

scripts: SearchStrategy[str] = _text(_LETTERS, 4, 4)

regions: SearchStrategy[str] = st.one_of(_text(_LETTERS, 2, 2), _text(_DIGITS, 3, 3))

variants: SearchStrategy[str] = st.one_of(
    st.builds(lambda d, rest: d + rest, _text(_DIGITS, 1, 1), _text(_ALNUM, 3, 3)),
    _text(_ALNUM, 5, 8),
)

extension_subtags: SearchStrategy[str] = _text(_ALNUM, 2, 8)

private_use_subtags: SearchStrategy[str] = _text(_ALNUM, 1, 8)

extension_singletons: SearchStrategy[str] = st.sampled_from(
    [c for c in "0123456789abcdefghijklmnopqrstuvwyz"]
)

calendars: SearchStrategy[str] = st.sampled_from(
    ["buddhist", "chinese", "gregory", "hebrew", "islamic-civil", "japanese"]
)


# ============================================================================
# WHOLE TAGS
# ============================================================================


@composite
def base_tags(draw: DrawFn) -> str:
    """Language, optional script and region, distinct variants (no extensions)."""
    parts = [draw(languages)]
    if draw(st.booleans()):
        parts.append(draw(scripts))
        event("base=script")
    if draw(st.booleans()):
        parts.append(draw(regions))
        event("base=region")
    chosen = draw(st.lists(variants, max_size=3, unique_by=str.lower))
    if chosen:
        event(f"base=variants:{len(chosen)}")
    parts.extend(chosen)
    return "-".join(parts)


@composite
def extension_blocks(draw: DrawFn) -> list[tuple[str, list[str]]]:
    """Zero to three extension blocks with distinct singletons."""
    singletons = draw(st.lists(extension_singletons, max_size=3, unique=True))
    return [
        (s, draw(st.lists(extension_subtags, min_size=1, max_size=4)))
        for s in singletons
    ]


@composite
def tag_strings(draw: DrawFn) -> str:
    """Full well-formed tags: base, extensions and optional private use."""
    parts = [draw(base_tags())]
    for singleton, subtags in draw(extension_blocks()):
        parts.append(draw(st.sampled_from([singleton, singleton.upper()])))
        parts.extend(subtags)
    if draw(st.booleans()):
        event("tag=private_use")
        parts.append("x")
        parts.extend(draw(st.lists(private_use_subtags, min_size=1, max_size=3)))
    return "-".join(parts)


@composite
def unicode_extension_tags(draw: DrawFn) -> tuple[str, str]:
    """Tag with a -u-ca-<calendar> keyword, plus the expected calendar value."""
    base = draw(base_tags())
    value = draw(calendars)
    event(f"calendar={value}")
    return f"{base}-u-ca-{value}", value
