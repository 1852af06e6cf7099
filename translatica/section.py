"""Dot-delimited key namespaces over a registry.

Example::

    errors = registry.section("errors")
    errors.get_message("notfound")                  # errors.notfound
    errors.sub_section("http").get_message("404")   # errors.http.404
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from translatica.exceptions import InvalidKey
from translatica.formatting import MessageArgument
from translatica.locale import Locale

if TYPE_CHECKING:
    from translatica.registry import MessageRegistry


@dataclass(frozen=True, slots=True)
class MessageSection:
    name: str
    registry: MessageRegistry

    def qualify(self, key: str) -> str:
        if not key:
            raise InvalidKey("Key cannot be empty.")
        return f"{self.name}.{key}"

    def get_message(self, key: str, *args: MessageArgument, locale: Locale | str | None = None) -> str:
        return self.registry.get_message(self.qualify(key), *args, locale=locale)

    def get_formatted_message(
        self, key: str, *args: MessageArgument, locale: Locale | str | None = None
    ) -> str:
        return self.registry.resolve_formatted(self.qualify(key), *args, locale=locale)

    def sub_section(self, name: str) -> MessageSection:
        return MessageSection(self.qualify(name), self.registry)


__all__ = ["MessageSection"]
