from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from langchain_core.messages import ToolMessage
from langchain_core.messages.tool import InvalidToolCall, ToolCall

from toolchat.utils.logger import tool_logger

from .core.errors import UnknownToolError
from .core.types import ToolError, ToolOutcome
from .invoker import ToolInvoker
from .registry import ToolRegistry


class ToolExecutor:
    """Resolves one assistant turn's batch of tool calls.

    All calls of a batch run concurrently; the returned messages follow the
    order in which the model issued the calls, whatever order they finish in.
    """

    def __init__(
        self, registry: ToolRegistry, invoker: ToolInvoker | None = None
    ) -> None:
        self.registry = registry
        self.invoker = invoker or ToolInvoker()

    async def resolve(self, name: str, args: Any) -> ToolOutcome:
        """Look up ``name`` and invoke it. Never raises for tool failures."""
        try:
            tool = self.registry.get(name)
        except UnknownToolError as e:
            tool_logger.error("Unknown tool requested (recoverable)", tool=name)
            return ToolError(
                name=name,
                code="unknown_tool",
                error=str(e),
                error_type="UnknownToolError",
            )
        return await self.invoker.invoke(tool, args)

    async def run_batch(
        self,
        tool_calls: Sequence[ToolCall],
        invalid_tool_calls: Sequence[InvalidToolCall] = (),
    ) -> list[ToolMessage]:
        """Run every call of the batch and join on all of them.

        Calls whose arguments the model client could not parse are answered
        with an ``invalid arguments`` failure after the valid calls.
        """
        tool_logger.info(
            "Tool batch",
            calls=len(tool_calls),
            invalid_calls=len(invalid_tool_calls),
            tools=[call["name"] for call in tool_calls],
        )

        outcomes = await asyncio.gather(
            *(self.resolve(call["name"], call.get("args")) for call in tool_calls)
        )

        messages = [
            self._to_message(call["id"], outcome)
            for call, outcome in zip(tool_calls, outcomes, strict=True)
        ]
        # AIMessage keeps unparseable calls in a separate list without their
        # original position, so they are answered after the valid ones.
        for bad_call in invalid_tool_calls:
            name = bad_call.get("name") or ""
            reason = bad_call.get("error") or "could not parse arguments"
            outcome = ToolError(
                name=name,
                code="invalid_arguments",
                error=f"invalid arguments: {reason}",
            )
            messages.append(self._to_message(bad_call.get("id"), outcome))
        return messages

    @staticmethod
    def _to_message(call_id: str | None, outcome: ToolOutcome) -> ToolMessage:
        return ToolMessage(
            content=outcome.to_text(),
            tool_call_id=call_id or "",
            name=outcome.name,
            status="error" if outcome.is_error else "success",
        )
