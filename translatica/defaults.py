"""Process-wide default registry and static-style shortcuts.

Library code should receive a ``MessageRegistry`` explicitly; these helpers
are meant for application entry points and scripts.
"""

from __future__ import annotations

import threading

from translatica.config import get_settings
from translatica.formatting import MessageArgument
from translatica.locale import Locale, current_locale, fixed_locale
from translatica.logging import logger
from translatica.registry import MessageRegistry
from translatica.section import MessageSection

_registry: MessageRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> MessageRegistry:
    """Return the shared registry, building it from settings on first use."""

    global _registry
    registry = _registry
    if registry is not None:
        return registry
    with _registry_lock:
        if _registry is None:
            settings = get_settings()
            provider = fixed_locale(settings.default_locale) if settings.default_locale else current_locale
            _registry = MessageRegistry.from_bundle(
                settings.default_source_name,
                directory=settings.locales_path,
                default_locale=provider,
            )
            logger.info(
                "default_registry_created",
                base_name=settings.default_source_name,
                path=str(settings.locales_path),
                locales=[str(locale) for locale in _registry.locales()],
            )
        return _registry


def reset_registry() -> None:
    """Forget the shared registry so the next access rebuilds it."""

    global _registry
    with _registry_lock:
        _registry = None


def get_message(key: str, *args: MessageArgument, locale: Locale | str | None = None) -> str:
    return get_registry().get_message(key, *args, locale=locale)


def get_formatted_message(key: str, *args: MessageArgument, locale: Locale | str | None = None) -> str:
    return get_registry().resolve_formatted(key, *args, locale=locale)


def get_section(name: str) -> MessageSection:
    return get_registry().section(name)


__all__ = [
    "get_formatted_message",
    "get_message",
    "get_registry",
    "get_section",
    "reset_registry",
]
