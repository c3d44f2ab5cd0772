from .base_tool import BaseTool, FunctionTool, define_tool
from .build_registry import build_registry
from .core import (
    DuplicateToolNameError,
    ToolConfigurationError,
    ToolError,
    ToolOutcome,
    ToolSuccess,
    UnknownToolError,
)
from .invoker import ToolInvoker
from .registry import ToolRegistry
from .tool_executor import ToolExecutor

__all__ = [
    "BaseTool",
    "DuplicateToolNameError",
    "FunctionTool",
    "ToolConfigurationError",
    "ToolError",
    "ToolExecutor",
    "ToolInvoker",
    "ToolOutcome",
    "ToolRegistry",
    "ToolSuccess",
    "UnknownToolError",
    "build_registry",
    "define_tool",
]
