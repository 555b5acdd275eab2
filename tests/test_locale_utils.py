"""Tests for platform default-locale detection.

Python 3.13+.
"""

import pytest

from localetag import PlatformLookupError, get_system_locale
from localetag.diagnostics import DiagnosticCode
from localetag.locale_utils import posix_to_tag

_LOCALE_VARS = ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LANG")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _LOCALE_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestPosixToTag:
    """POSIX identifiers become '-' separated tags."""

    @pytest.mark.parametrize(
        ("posix", "expected"),
        [
            ("en_US", "en-US"),
            ("pt_BR.UTF-8", "pt-BR"),
            ("de_DE.ISO8859-1", "de-DE"),
            ("sr_RS@latin", "sr-RS"),
            ("zh_Hans_CN", "zh-Hans-CN"),
            ("fr", "fr"),
        ],
    )
    def test_conversion(self, posix: str, expected: str) -> None:
        assert posix_to_tag(posix) == expected

    def test_invalid(self) -> None:
        with pytest.raises(PlatformLookupError) as exc_info:
            posix_to_tag("12_34")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PLATFORM_LOCALE_INVALID


class TestGetSystemLocale:
    """Environment lookup through Babel."""

    def test_lang(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LANG", "pt_BR.UTF-8")
        assert get_system_locale() == "pt-BR"

    def test_lc_all_overrides_lang(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("LANG", "pt_BR.UTF-8")
        clean_env.setenv("LC_ALL", "de_AT.UTF-8")
        assert get_system_locale() == "de-AT"

    def test_unset(self, clean_env: pytest.MonkeyPatch) -> None:
        with pytest.raises(PlatformLookupError) as exc_info:
            get_system_locale()
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.PLATFORM_LOCALE_UNSET

    def test_result_parses(self, clean_env: pytest.MonkeyPatch) -> None:
        from localetag import parse_tag  # noqa: PLC0415

        clean_env.setenv("LANG", "sr_RS.UTF-8@latin")
        assert parse_tag(get_system_locale()).region == "RS"
