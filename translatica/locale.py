"""Locale value type and the ambient default-locale provider."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Callable

from translatica.exceptions import InvalidLocale

_LOCALE_RE = re.compile(r"^(?P<language>[A-Za-z]{2,3})(?:[-_](?P<country>[A-Za-z]{2}|[0-9]{3}))?$")
_ENVIRONMENT_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG")
_POSIX_LOCALES = {"C", "POSIX"}


@dataclass(frozen=True, slots=True)
class Locale:
    """Language plus optional region, e.g. ``Locale("pt", "BR")``.

    Equality is exact, so ``pt`` and ``pt_BR`` are different locales.
    """

    language: str
    country: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "country", self.country.upper())

    def __str__(self) -> str:
        return f"{self.language}_{self.country}" if self.country else self.language

    @property
    def tag(self) -> str:
        """BCP 47 style tag (``pt-BR``)."""

        return f"{self.language}-{self.country}" if self.country else self.language

    @classmethod
    def parse(cls, value: str) -> Locale:
        """Parse ``pt-BR``, ``pt_BR``, ``pt_BR.UTF-8`` or ``pt_BR@euro`` style strings."""

        text = value.strip().split(".", 1)[0].split("@", 1)[0]
        match = _LOCALE_RE.match(text)
        if match is None:
            raise InvalidLocale(f"Invalid locale identifier: {value!r}")
        return cls(match["language"], match["country"] or "")

    @classmethod
    def coerce(cls, value: Locale | str) -> Locale:
        if isinstance(value, Locale):
            return value
        return cls.parse(value)


FALLBACK_LOCALE = Locale("en", "US")

LocaleProvider = Callable[[], Locale]


def current_locale() -> Locale:
    """Return the process default locale, read from the environment on every call."""

    for name in _ENVIRONMENT_VARIABLES:
        value = os.environ.get(name, "").strip()
        if not value or value.split(".", 1)[0] in _POSIX_LOCALES:
            continue
        try:
            return Locale.parse(value)
        except InvalidLocale:
            continue
    return FALLBACK_LOCALE


def fixed_locale(locale: Locale | str) -> LocaleProvider:
    """Build a provider that always returns ``locale``."""

    resolved = Locale.coerce(locale)

    def provider() -> Locale:
        return resolved

    return provider


__all__ = ["FALLBACK_LOCALE", "Locale", "LocaleProvider", "current_locale", "fixed_locale"]
