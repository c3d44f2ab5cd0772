"""Configuration module for toolchat."""

from .settings import Settings, load_env_file, settings
from .validation import validate_or_raise

__all__ = [
    "settings",
    "Settings",
    "load_env_file",
    "validate_or_raise",
]
