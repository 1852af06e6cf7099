"""Tests for the process-wide default registry and its shortcuts."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

import translatica
from translatica.defaults import (
    get_formatted_message,
    get_message,
    get_registry,
    get_section,
    reset_registry,
)
from translatica.exceptions import MessageNotFound
from translatica.locale import Locale


@pytest.fixture
def bundle_dir(tmp_path: Path, monkeypatch) -> Path:
    (tmp_path / "messages_pt_BR.json").write_text(
        '{"welcome": {"message": "Bem-vindo", "user": "Bem-vindo, %s", "named": "Bem-vindo, {0}"}}',
        encoding="utf-8",
    )
    (tmp_path / "messages_en_US.json").write_text('{"welcome.message": "Welcome"}', encoding="utf-8")
    monkeypatch.setenv("TRANSLATICA_LOCALES_PATH", str(tmp_path))
    monkeypatch.setenv("TRANSLATICA_DEFAULT_LOCALE", "pt_BR")
    monkeypatch.delenv("TRANSLATICA_DEFAULT_SOURCE_NAME", raising=False)
    return tmp_path


def test_get_registry_is_lazy_singleton(bundle_dir):
    first = get_registry()
    assert get_registry() is first
    assert set(first.locales()) == {Locale("pt", "BR"), Locale("en", "US")}

    reset_registry()
    assert get_registry() is not first


def test_get_registry_concurrent_first_access(bundle_dir):
    with ThreadPoolExecutor(max_workers=8) as pool:
        registries = list(pool.map(lambda _: get_registry(), range(32)))
    assert len({id(registry) for registry in registries}) == 1


def test_static_shortcuts(bundle_dir):
    assert get_message("welcome.message") == "Bem-vindo"
    assert get_message("welcome.user", "Carlos") == "Bem-vindo, Carlos"
    assert get_message("welcome.message", locale="en_US") == "Welcome"
    assert get_formatted_message("welcome.named", "Carlos") == "Bem-vindo, Carlos"
    assert get_section("welcome").get_message("user", "Carlos") == "Bem-vindo, Carlos"

    with pytest.raises(MessageNotFound):
        get_message("unknown.key")
    with pytest.raises(MessageNotFound):
        get_message("welcome.message", locale="fr_FR")


def test_package_exports_shortcuts(bundle_dir):
    assert translatica.get_message("welcome.message") == "Bem-vindo"
    assert translatica.get_registry() is get_registry()


def test_missing_directory_yields_empty_registry(tmp_path, monkeypatch):
    monkeypatch.setenv("TRANSLATICA_LOCALES_PATH", str(tmp_path / "absent"))

    registry = get_registry()

    assert registry.locales() == []
    with pytest.raises(MessageNotFound):
        registry.resolve("welcome.message", locale="pt_BR")
