"""Locale-keyed registry of message sources."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterable

from translatica.exceptions import MessageNotFound
from translatica.formatting import MessageArgument, format_indexed, format_printf
from translatica.locale import Locale, LocaleProvider, current_locale
from translatica.logging import logger
from translatica.section import MessageSection
from translatica.sources import MessageSource, discover_sources


class MessageRegistry:
    """Maps a locale to an ordered sequence of message sources.

    Only the first source registered for a locale answers lookups; later ones
    are kept in order and take over once the earlier ones are unregistered.
    Per-locale sequences are immutable tuples swapped under a lock, so
    lookups never need the lock and never see a partial sequence.
    """

    def __init__(
        self,
        sources: Iterable[MessageSource] = (),
        *,
        default_locale: LocaleProvider = current_locale,
    ) -> None:
        self._default_locale = default_locale
        self._sources: dict[Locale, tuple[MessageSource, ...]] = {}
        self._lock = threading.Lock()
        for source in sources:
            self.register_source(source)

    @classmethod
    def from_bundle(
        cls,
        base_name: str = "messages",
        *,
        directory: str | Path,
        default_locale: LocaleProvider = current_locale,
    ) -> MessageRegistry:
        """Build a registry from every ``<base_name>_<locale>.json`` file in ``directory``."""

        return cls(discover_sources(base_name, directory), default_locale=default_locale)

    @property
    def default_locale(self) -> Locale:
        return self._default_locale()

    def register_source(self, source: MessageSource) -> None:
        locale = source.locale
        with self._lock:
            current = self._sources.get(locale, ())
            self._sources[locale] = current + (source,)
            total = len(current) + 1
        logger.debug("message_source_registered", locale=str(locale), source=repr(source), total=total)

    def unregister_source(self, source: MessageSource) -> int:
        """Remove every registration of this exact source and return how many were dropped."""

        locale = source.locale
        with self._lock:
            current = self._sources.get(locale)
            if current is None:
                return 0
            remaining = tuple(item for item in current if item is not source)
            removed = len(current) - len(remaining)
            if remaining:
                self._sources[locale] = remaining
            else:
                del self._sources[locale]
        if removed:
            logger.debug("message_source_unregistered", locale=str(locale), source=repr(source), removed=removed)
        return removed

    def clear_locale(self, locale: Locale | str) -> int:
        """Drop all sources registered for ``locale``."""

        locale = Locale.coerce(locale)
        with self._lock:
            removed = len(self._sources.pop(locale, ()))
        if removed:
            logger.debug("message_locale_cleared", locale=str(locale), removed=removed)
        return removed

    def sources(self, locale: Locale | str) -> tuple[MessageSource, ...]:
        return self._sources.get(Locale.coerce(locale), ())

    def locales(self) -> list[Locale]:
        return list(self._sources)

    def _resolve_locale(self, locale: Locale | str | None) -> Locale:
        return self._default_locale() if locale is None else Locale.coerce(locale)

    def resolve(self, key: str, *, locale: Locale | str | None = None) -> str:
        """Return the raw template for ``key``.

        ``locale`` defaults to the ambient default locale at call time.

        Raises:
            MessageNotFound: the locale has no sources or the first one lacks ``key``.
        """

        resolved = self._resolve_locale(locale)
        sources = self._sources.get(resolved)
        if not sources:
            raise MessageNotFound(
                f"No message sources registered for locale {resolved}", locale=resolved, key=key
            )
        value = sources[0].lookup(key)
        if value is None:
            raise MessageNotFound(
                f"Cannot find message keyed with {key!r} on locale {resolved}", locale=resolved, key=key
            )
        return value

    def resolve_with_args(
        self, key: str, *args: MessageArgument, locale: Locale | str | None = None
    ) -> str:
        """Resolve ``key`` and fill printf-style placeholders (``%s``, ``%d``) from ``args``."""

        return format_printf(self.resolve(key, locale=locale), args)

    def resolve_formatted(
        self, key: str, *args: MessageArgument, locale: Locale | str | None = None
    ) -> str:
        """Resolve ``key`` and fill indexed placeholders (``{0}``, ``{1}``) from ``args``."""

        return format_indexed(self.resolve(key, locale=locale), args)

    def get_message(self, key: str, *args: MessageArgument, locale: Locale | str | None = None) -> str:
        if args:
            return self.resolve_with_args(key, *args, locale=locale)
        return self.resolve(key, locale=locale)

    def has_message(self, key: str, *, locale: Locale | str | None = None) -> bool:
        try:
            self.resolve(key, locale=locale)
        except MessageNotFound:
            return False
        return True

    def section(self, name: str) -> MessageSection:
        return MessageSection(name, self)

    def __repr__(self) -> str:
        return f"MessageRegistry(locales={[str(locale) for locale in self._sources]})"


__all__ = ["MessageRegistry"]
