from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

__all__ = [
    "ERROR_LABEL",
    "ToolError",
    "ToolOutcome",
    "ToolSuccess",
]

# Prefix of every failure text the model sees; success text never starts with it.
ERROR_LABEL = "Error: "


class ToolSuccess(BaseModel):
    """Successful tool output. ``content`` is passed to the model verbatim."""

    type: Literal["tool_success"] = "tool_success"
    name: str
    content: str

    @property
    def is_error(self) -> bool:
        return False

    def to_text(self) -> str:
        return self.content


class ToolError(BaseModel):
    """Standard error result for all tools.

    Use isinstance(result, ToolError) to check for errors.
    """

    type: Literal["tool_error"] = "tool_error"
    name: str
    code: str
    error: str
    error_type: str | None = None

    @property
    def is_error(self) -> bool:
        return True

    def to_text(self) -> str:
        return f"{ERROR_LABEL}{self.error}"


ToolOutcome = ToolSuccess | ToolError
