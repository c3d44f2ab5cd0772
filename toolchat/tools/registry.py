"""Tool registry: binds tool names to their definitions.

The registry is populated once at startup and then only read. It holds no
per-call state, so one instance can be shared by concurrent conversations.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from toolchat.utils.logger import tool_logger

from .base_tool import BaseTool
from .core.errors import DuplicateToolNameError, UnknownToolError


class ToolRegistry:
    """Name -> tool definition lookup table."""

    def __init__(self, tools: Iterable[BaseTool] | None = None) -> None:
        self._tools: dict[str, BaseTool] = {}
        for tool in tools or ():
            self.register(tool)

    def register(self, tool: BaseTool) -> None:
        name = getattr(tool, "name", None)
        if not name or not isinstance(name, str):
            raise ValueError(f"Tool {type(tool).__name__} has no usable name")
        if name in self._tools:
            raise DuplicateToolNameError(name)
        self._tools[name] = tool
        tool_logger.debug("Registered tool", tool=name)

    def get(self, name: str) -> BaseTool:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def has_tool(self, name: str) -> bool:
        return name in self._tools

    def names(self) -> list[str]:
        return list(self._tools)

    def list_tools(self) -> list[BaseTool]:
        return list(self._tools.values())

    def as_mapping(self) -> Mapping[str, BaseTool]:
        """Read-only view of the name -> tool table."""
        return MappingProxyType(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[BaseTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
