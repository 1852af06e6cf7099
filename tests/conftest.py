"""Shared pytest fixtures for registry and section tests."""

from __future__ import annotations

import pytest
import structlog

from translatica.config import get_settings
from translatica.defaults import reset_registry
from translatica.locale import fixed_locale
from translatica.registry import MessageRegistry
from translatica.sources import MappingMessageSource


@pytest.fixture(autouse=True)
def _reset_process_state():
    get_settings.cache_clear()
    reset_registry()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()
    reset_registry()


@pytest.fixture
def pt_br_source() -> MappingMessageSource:
    return MappingMessageSource(
        "pt-BR",
        {"welcome.message": "Bem-vindo", "welcome.user": "Bem-vindo, %s"},
        name="messages_pt_BR",
    )


@pytest.fixture
def en_us_source() -> MappingMessageSource:
    return MappingMessageSource("en-US", {"welcome.message": "Welcome"}, name="messages_en_US")


@pytest.fixture
def registry(pt_br_source, en_us_source) -> MessageRegistry:
    return MessageRegistry([pt_br_source, en_us_source], default_locale=fixed_locale("pt_BR"))
