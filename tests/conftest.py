"""Shared pytest fixtures for all tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

CONFIG_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "MODEL_NAME",
    "MODEL_TEMPERATURE",
    "MAX_TOOL_ROUNDS",
    "TOOL_TIMEOUT",
    "MODEL_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Keep the developer's own model configuration out of tests."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def scripted_model():
    """Factory for a fake chat model replying with the given messages in order.

    Items may also be exceptions, which are raised from ``ainvoke``.
    """

    def factory(*responses):
        model = MagicMock()
        model.ainvoke = AsyncMock(side_effect=list(responses))
        return model

    return factory
