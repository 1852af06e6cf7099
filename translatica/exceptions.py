"""Domain-specific exceptions."""

from __future__ import annotations


class TranslaticaError(Exception):
    pass


class MessageNotFound(TranslaticaError, LookupError):
    """No message for a key, either because the locale has no sources or the key is absent."""

    def __init__(self, message: str, *, locale: object = None, key: str | None = None) -> None:
        super().__init__(message)
        self.locale = locale
        self.key = key


class MessageFormatError(TranslaticaError, ValueError):
    """Template placeholders and supplied arguments disagree."""

    def __init__(self, message: str, *, template: str | None = None) -> None:
        super().__init__(message)
        self.template = template


class InvalidKey(TranslaticaError, ValueError):
    pass


class InvalidLocale(TranslaticaError, ValueError):
    pass


__all__ = [
    "TranslaticaError",
    "MessageNotFound",
    "MessageFormatError",
    "InvalidKey",
    "InvalidLocale",
]
