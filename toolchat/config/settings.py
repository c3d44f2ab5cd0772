"""Configuration settings for toolchat.

Values come from environment variables, optionally populated from a ``.env``
file via :func:`load_env_file`. Properties are read on access so changes to
the environment are picked up without rebuilding the object.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from toolchat.config.constants import (
    DEFAULT_MODEL_NAME,
    DEFAULT_MODEL_TEMPERATURE,
    DOTENV_FILENAME,
)


def load_env_file(workdir: str | Path | None = None, override: bool = False) -> bool:
    """Load ``.env`` from ``workdir`` (or the current directory).

    Existing environment variables win unless ``override`` is set. Returns
    True when a file was found and loaded.
    """
    base = Path(workdir) if workdir else Path.cwd()
    env_file = base / DOTENV_FILENAME
    if not env_file.is_file():
        return False
    return load_dotenv(dotenv_path=env_file, override=override)


class Settings:
    """Application settings backed by environment variables."""

    def __init__(self, overrides: dict[str, Any] | None = None):
        self._overrides = dict(overrides or {})

    def validate_or_raise(self) -> None:
        from toolchat.config.validation import validate_or_raise as _v

        _v(self.model_name, self.openai_api_key)

    def validation_status(self) -> tuple[bool, list[str]]:
        """Return (is_valid, errors) without raising."""
        try:
            self.validate_or_raise()
            return True, []
        except ValueError as exc:
            return False, [str(exc)]

    def _get(self, key: str, default: Any) -> Any:
        """Get config value from overrides, then env, then default.

        Env values are converted to the type of ``default``. A default of
        ``None`` means the raw string is returned.
        """
        if key in self._overrides:
            return self._overrides[key]
        env_val = os.getenv(key)
        if env_val is None or env_val == "":
            return default
        if isinstance(default, bool):
            return env_val.lower() in ("true", "1", "yes", "on")
        elif isinstance(default, int):
            return int(env_val)
        elif isinstance(default, float):
            return float(env_val)
        return env_val

    def _get_optional_number(self, key: str, kind: type) -> Any:
        value = self._get(key, None)
        if value is None:
            return None
        try:
            return kind(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{key} must be a {kind.__name__}, got {value!r}") from e

    # Model endpoint
    @property
    def openai_api_key(self) -> str | None:
        return self._get("OPENAI_API_KEY", None)

    @property
    def openai_base_url(self) -> str | None:
        return self._get("OPENAI_BASE_URL", None)

    @property
    def model_name(self) -> str:
        return self._get("MODEL_NAME", DEFAULT_MODEL_NAME)

    @property
    def model_temperature(self) -> float:
        return self._get("MODEL_TEMPERATURE", DEFAULT_MODEL_TEMPERATURE)

    # Loop bounds and timeouts; unset means unbounded
    @property
    def max_tool_rounds(self) -> int | None:
        return self._get_optional_number("MAX_TOOL_ROUNDS", int)

    @property
    def tool_timeout(self) -> float | None:
        return self._get_optional_number("TOOL_TIMEOUT", float)

    @property
    def model_timeout(self) -> float | None:
        return self._get_optional_number("MODEL_TIMEOUT", float)


# Global settings instance
settings = Settings()
