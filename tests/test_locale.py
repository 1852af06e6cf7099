"""Tests for Locale parsing and the ambient default locale."""

from __future__ import annotations

import pytest

from translatica.exceptions import InvalidLocale
from translatica.locale import FALLBACK_LOCALE, Locale, current_locale, fixed_locale


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("pt-BR", Locale("pt", "BR")),
        ("pt_br", Locale("pt", "BR")),
        ("en_US.UTF-8", Locale("en", "US")),
        ("de_DE@euro", Locale("de", "DE")),
        ("es-419", Locale("es", "419")),
        ("fr", Locale("fr")),
    ],
)
def test_parse_accepts_common_spellings(raw, expected):
    assert Locale.parse(raw) == expected


def test_locale_normalizes_case_and_renders():
    locale = Locale("PT", "br")
    assert locale == Locale("pt", "BR")
    assert str(locale) == "pt_BR"
    assert locale.tag == "pt-BR"
    assert str(Locale("fr")) == "fr"


def test_locales_are_hashable_keys():
    table = {Locale("pt", "BR"): 1}
    assert table[Locale.parse("pt-BR")] == 1
    assert Locale("pt") not in table


@pytest.mark.parametrize("raw", ["", "not a locale", "p", "pt_BRA_X", "12_BR"])
def test_parse_rejects_garbage(raw):
    with pytest.raises(InvalidLocale):
        Locale.parse(raw)


def test_coerce_passes_locales_through():
    locale = Locale("en", "US")
    assert Locale.coerce(locale) is locale
    assert Locale.coerce("en-US") == locale


def _clear_locale_env(monkeypatch):
    for name in ("LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(name, raising=False)


def test_current_locale_reads_environment(monkeypatch):
    _clear_locale_env(monkeypatch)
    monkeypatch.setenv("LANG", "pt_BR.UTF-8")
    assert current_locale() == Locale("pt", "BR")

    monkeypatch.setenv("LC_ALL", "fr_FR.UTF-8")
    assert current_locale() == Locale("fr", "FR")


def test_current_locale_skips_posix_and_invalid_values(monkeypatch):
    _clear_locale_env(monkeypatch)
    monkeypatch.setenv("LC_ALL", "C.UTF-8")
    monkeypatch.setenv("LC_MESSAGES", "garbage value")
    monkeypatch.setenv("LANG", "en_GB")
    assert current_locale() == Locale("en", "GB")


def test_current_locale_falls_back(monkeypatch):
    _clear_locale_env(monkeypatch)
    assert current_locale() == FALLBACK_LOCALE == Locale("en", "US")


def test_fixed_locale_ignores_environment(monkeypatch):
    monkeypatch.setenv("LC_ALL", "fr_FR")
    provider = fixed_locale("pt-BR")
    assert provider() == Locale("pt", "BR")
