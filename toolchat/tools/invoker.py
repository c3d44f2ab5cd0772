from __future__ import annotations

import asyncio
from typing import Any

from pydantic import ValidationError

from toolchat.utils.logger import tool_logger, tool_result_log

from .base_tool import BaseTool
from .core.types import ToolError, ToolOutcome, ToolSuccess


def _format_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or str(exc)


class ToolInvoker:
    """Validates arguments, runs a tool handler and captures its failures.

    ``invoke`` never raises for a tool failure: invalid arguments, handler
    exceptions, ``ToolError`` returns and timeouts all come back as a
    ``ToolError`` so the conversation can carry on.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def _execution_failed(self, name: str, e: Exception) -> ToolError:
        tool_logger.error(
            "Tool execution failed (recoverable)",
            tool=name,
            error=str(e),
            error_type=type(e).__name__,
        )
        return ToolError(
            name=name,
            code="execution_failed",
            error=f"{type(e).__name__}: {e}" if str(e) else type(e).__name__,
            error_type=type(e).__name__,
        )

    async def invoke(self, tool: BaseTool, raw_args: Any) -> ToolOutcome:
        name = tool.name
        tool_logger.info("Tool call", tool=name, args=raw_args)

        try:
            args = tool.validate_args(raw_args)
        except (ValidationError, TypeError) as ve:
            reason = (
                _format_validation_error(ve)
                if isinstance(ve, ValidationError)
                else str(ve)
            )
            tool_logger.error(
                "Tool arguments rejected (recoverable)", tool=name, reason=reason
            )
            return ToolError(
                name=name,
                code="invalid_arguments",
                error=f"invalid arguments: {reason}",
                error_type=type(ve).__name__,
            )

        deadline = asyncio.timeout(self.timeout)
        try:
            async with deadline:
                result = await tool.handle(args)
        except TimeoutError as e:
            if not deadline.expired():
                return self._execution_failed(name, e)
            tool_logger.error(
                "Tool execution timed out (recoverable)",
                tool=name,
                timeout=self.timeout,
            )
            return ToolError(
                name=name,
                code="timeout",
                error=f"tool {name} timed out after {self.timeout}s",
                error_type="TimeoutError",
            )
        except Exception as e:
            return self._execution_failed(name, e)

        if isinstance(result, ToolError):
            tool_logger.error(
                "Tool reported failure (recoverable)",
                tool=name,
                error_code=result.code,
                error=result.error,
            )
            return result

        content = result if isinstance(result, str) else str(result)
        tool_result_log(tool_logger, name, content)
        return ToolSuccess(name=name, content=content)
