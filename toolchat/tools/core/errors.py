from __future__ import annotations

__all__ = [
    "DuplicateToolNameError",
    "ToolConfigurationError",
    "UnknownToolError",
]


class ToolConfigurationError(Exception):
    """Raised when the tool set is misconfigured. Never recovered."""


class DuplicateToolNameError(ToolConfigurationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Tool already registered: {name}")
        self.name = name


class UnknownToolError(LookupError):
    """Raised by registry lookup; turned into failure text during dispatch."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown tool: {name}")
        self.name = name
