from __future__ import annotations

import logging
from typing import Iterator

import pytest

import logging_config
from settings import get_settings


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch) -> Iterator[None]:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("READING_OUTPUT_FORMAT", raising=False)
    get_settings.cache_clear()
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
        logging_config._configured = False
        get_settings.cache_clear()
