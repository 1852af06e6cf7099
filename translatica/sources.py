"""Message sources: the per-locale key/value providers consulted by the registry."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable

from translatica.exceptions import InvalidLocale
from translatica.locale import Locale
from translatica.logging import logger


@runtime_checkable
class MessageSource(Protocol):
    locale: Locale

    def lookup(self, key: str) -> str | None:
        ...


def _flatten(data: Mapping[str, Any], prefix: str, result: dict[str, str]) -> None:
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            _flatten(value, full_key, result)
        elif isinstance(value, bool):
            result[full_key] = "true" if value else "false"
        elif isinstance(value, (str, int, float, Decimal)):
            result[full_key] = str(value)
        else:
            raise ValueError(
                f"Message {full_key!r} must be a string or number, got {type(value).__name__}"
            )


class MappingMessageSource:
    """In-memory source; nested mappings become dot-joined keys."""

    def __init__(self, locale: Locale | str, messages: Mapping[str, Any], *, name: str | None = None) -> None:
        self.locale = Locale.coerce(locale)
        self.name = name or f"mapping:{self.locale}"
        self._messages: dict[str, str] = {}
        _flatten(messages, "", self._messages)

    def lookup(self, key: str) -> str | None:
        return self._messages.get(key)

    def keys(self) -> list[str]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"MappingMessageSource(name={self.name!r}, locale={str(self.locale)!r}, size={len(self)})"


def _locale_from_stem(stem: str) -> Locale | None:
    _, sep, suffix = stem.partition("_")
    if not sep or not suffix:
        return None
    return Locale.parse(suffix)


def load_json_source(path: str | Path, locale: Locale | str | None = None) -> MappingMessageSource:
    """Load a JSON object file as a source.

    The locale defaults to the suffix of the file stem, so ``messages_pt_BR.json``
    becomes ``pt_BR``.
    """

    file_path = Path(path)
    resolved = Locale.coerce(locale) if locale is not None else _locale_from_stem(file_path.stem)
    if resolved is None:
        raise ValueError(f"Cannot infer locale from bundle file name: {file_path.name}")
    with file_path.open("r", encoding="utf-8") as fp:
        try:
            data = json.load(fp)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {file_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Bundle {file_path} must contain a JSON object")
    try:
        source = MappingMessageSource(resolved, data, name=file_path.stem)
    except ValueError as exc:
        raise ValueError(f"Invalid message in {file_path}: {exc}") from exc
    logger.debug("message_bundle_loaded", path=str(file_path), locale=str(resolved), keys=len(source))
    return source


def discover_sources(base_name: str, directory: str | Path) -> list[MappingMessageSource]:
    """Load every ``<base_name>_<locale>.json`` bundle in ``directory``, sorted by file name."""

    root = Path(directory)
    if not root.is_dir():
        logger.warning("message_bundle_directory_missing", path=str(root), base_name=base_name)
        return []
    sources = []
    for file_path in sorted(root.glob(f"{base_name}_*.json")):
        if not file_path.is_file():
            continue
        try:
            locale = Locale.parse(file_path.stem[len(base_name) + 1 :])
        except InvalidLocale:
            # another bundle family sharing the prefix, e.g. messages_admin_en.json
            continue
        sources.append(load_json_source(file_path, locale))
    return sources


__all__ = ["MessageSource", "MappingMessageSource", "load_json_source", "discover_sources"]
