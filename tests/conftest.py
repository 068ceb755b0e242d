"""Shared fixtures for the shapeguard test-suite."""
from __future__ import annotations

import logging

import pytest
import structlog

from shapeguard.config import get_settings
from shapeguard.logging import LoggerRegistry
from shapeguard.validation import (
    a_boolean,
    a_number,
    a_string,
    an_object,
)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Each test sees settings built from its own environment."""
    for name in ("SHAPEGUARD_ALLOW_EXTRA_PROPERTIES", "SHAPEGUARD_LOG_LEVEL", "SHAPEGUARD_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_logging():
    """Undo ``configure_logging`` side effects."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    LoggerRegistry._loggers.clear()
    root.handlers, root.level = handlers, level


@pytest.fixture
def an_item():
    """Item with nullable, optional and nested array properties."""
    return an_object({
        "name": a_string,
        "value": a_string.or_null,
        "enabled": a_boolean,
        "maybeUndefined": a_string.or_undefined,
        "subItems": an_object({
            "name": a_string,
            "value": a_string,
            "meta": a_string.or_null.or_undefined,
        }).array.or_undefined,
    })


@pytest.fixture
def a_linked_list():
    """Self-referential list node schema."""
    a_list = an_object({
        "value": a_number,
        "next": lambda: a_list.or_null,
    })
    return a_list
