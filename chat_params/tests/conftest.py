"""Pytest configuration for the chat_params test suite.

Provides ready-made request configurations and a fixture that captures the
shared ``chat_params`` logger output in memory, restoring the logger's
handlers and level afterwards so tests stay independent.
"""

from __future__ import annotations

import io
import logging
from typing import Iterator

import pytest

from chat_params import Message, RequestConfiguration
from chat_params.base.logging import BASE_LOGGER_NAME, LOG_LEVEL_ENV, get_logger


@pytest.fixture()
def minimal_config() -> RequestConfiguration:
    """A configuration holding only the required fields."""

    return RequestConfiguration(model="gpt-x", messages=[Message(role="user", content="hi")])


@pytest.fixture()
def full_config() -> RequestConfiguration:
    """A valid configuration with every non-alternate optional field set."""

    return RequestConfiguration(
        model="gpt-x",
        messages=[
            Message(role="system", content="You are terse."),
            Message(role="user", content="hi", name="alice"),
        ],
        top_p=0.9,
        n=2,
        stream=False,
        max_tokens=256,
        presence_penalty=0.5,
        frequency_penalty=-0.5,
        logit_bias={"50256": -100},
        function_call="auto",
        seed=42,
        temperature=0.7,
        user="user-123",
    )


@pytest.fixture()
def log_stream(monkeypatch: pytest.MonkeyPatch) -> Iterator[io.StringIO]:
    """Route the shared logger into a StringIO with plain ``%(message)s`` lines."""

    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    base_logger = get_logger(BASE_LOGGER_NAME)
    saved_handlers = list(base_logger.handlers)
    saved_level = base_logger.level

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(logging.DEBUG)
    base_logger.handlers[:] = [handler]
    base_logger.setLevel(logging.INFO)
    yield stream

    base_logger.handlers[:] = saved_handlers
    base_logger.setLevel(saved_level)
