from .tool_agent import (
    TOOL_AGENT_SYSTEM,
    get_runtime_info,
    get_tool_agent_system_prompt,
)

__all__ = ["TOOL_AGENT_SYSTEM", "get_runtime_info", "get_tool_agent_system_prompt"]
