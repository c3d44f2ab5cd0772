from __future__ import annotations

from .registry import ToolRegistry


def build_registry(
    include: set[str] | None = None,
    exclude: set[str] | None = None,
) -> ToolRegistry:
    """Build tool registry from the builtin TOOL_CLASSES.

    ``include`` keeps only the named tools; ``exclude`` drops named tools.
    """
    registry = ToolRegistry()

    include = include or set()
    exclude = exclude or set()

    from toolchat.tools.builtin import TOOL_CLASSES as BUILTIN_TOOL_CLASSES

    for tool_cls in BUILTIN_TOOL_CLASSES:
        tool_name = tool_cls.model_fields["name"].default

        if include and tool_name not in include:
            continue
        if tool_name in exclude:
            continue
        registry.register(tool_cls())

    return registry
