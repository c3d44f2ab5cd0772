"""Configuration validation for the model endpoint."""

from __future__ import annotations

import os


def validate_or_raise(model: str | None, api_key: str | None) -> None:
    """Validate that a model name and an API key are configured.

    Model names are not checked against any catalog; any model served by an
    OpenAI-compatible endpoint is accepted.
    """
    if not model:
        raise ValueError(
            "Model name is required. Set MODEL_NAME in the environment or .env file."
        )

    key = api_key or os.getenv("OPENAI_API_KEY")
    if not key:
        raise ValueError(
            "OPENAI_API_KEY is required. Set it in the environment or in a .env "
            "file in the working directory."
        )
