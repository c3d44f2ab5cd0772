from __future__ import annotations

import asyncio
import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any
from uuid import UUID

from langchain_core.callbacks.base import BaseCallbackHandler
from langchain_core.callbacks.manager import BaseCallbackManager
from langchain_core.runnables import RunnableConfig
from langchain_core.tools import BaseTool as LCBaseTool
from pydantic import BaseModel

from .core.types import ToolError

HandlerResult = str | ToolError
Handler = Callable[[Any], Awaitable[HandlerResult] | HandlerResult]


class BaseTool(LCBaseTool, ABC):
    """Base class for toolchat tools.

    A tool is a definition: ``name``, ``description`` (read by the model),
    ``args_schema`` (a pydantic model) and the async ``handle`` method. The
    handler receives an already validated ``args_schema`` instance and returns
    either success text or a ``ToolError``. Raising is also allowed; the
    invoker converts exceptions into failure results.
    """

    # Tool subclasses should declare: name: str, description: str, args_schema: type[BaseModel]

    def validate_args(self, raw_args: Any) -> Any:
        """Validate raw model-supplied arguments against ``args_schema``.

        Raises pydantic ``ValidationError`` on mismatch.
        """
        schema = self.args_schema
        if isinstance(schema, type) and issubclass(schema, BaseModel):
            return schema.model_validate(raw_args if raw_args is not None else {})
        if not isinstance(raw_args, dict):
            raise TypeError(
                f"arguments must be an object, got {type(raw_args).__name__}"
            )
        return raw_args

    @abstractmethod
    async def handle(self, args: Any) -> HandlerResult:
        """Run the tool with validated arguments."""

    # Match LangChain signature for compatibility and type-checking
    async def arun(
        self,
        tool_input: str | dict[Any, Any],
        verbose: bool | None = None,
        start_color: str | None = None,
        color: str | None = None,
        callbacks: list[BaseCallbackHandler] | BaseCallbackManager | None = None,
        *,
        tags: list[str] | None = None,
        metadata: dict[str, Any] | None = None,
        run_name: str | None = None,
        run_id: UUID | None = None,
        config: RunnableConfig | None = None,
        tool_call_id: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Validate ``tool_input`` and run the handler directly.

        Unlike ``ToolInvoker.invoke`` this does not catch anything.
        """
        if not isinstance(tool_input, dict):
            raise TypeError(
                "tool_input must be a dict of arguments; callers should pass structured args via tool_input"
            )
        merged_kwargs: dict[Any, Any] = {**tool_input, **kwargs}
        return await self.handle(self.validate_args(merged_kwargs))

    # LangChain requires a sync entry point; tools here are async-only.
    def _run(self, *args: Any, **kwargs: Any) -> Any:  # pragma: no cover
        return asyncio.run(self.arun(kwargs))


class FunctionTool(BaseTool):
    """Tool definition wrapping a plain (sync or async) function."""

    handler: Handler

    async def handle(self, args: Any) -> HandlerResult:
        result = self.handler(args)
        if inspect.isawaitable(result):
            result = await result
        return result


def define_tool(
    name: str, description: str, args_schema: type[BaseModel]
) -> Callable[[Handler], FunctionTool]:
    """Decorator turning a function into a ``FunctionTool``.

    Example:
        @define_tool("echo", "Echo text back", EchoArgs)
        async def echo(args: EchoArgs) -> str:
            return args.text
    """

    def decorator(func: Handler) -> FunctionTool:
        return FunctionTool(
            name=name,
            description=description,
            args_schema=args_schema,
            handler=func,
        )

    return decorator
