"""Builtin tool package.

Static export of tool classes so the default registry does not depend on
package discovery at runtime.
"""

from __future__ import annotations

from toolchat.tools.builtin.execute_command import ExecuteCommandTool
from toolchat.tools.builtin.list_directory import ListDirectoryTool
from toolchat.tools.builtin.read_file import ReadFileTool
from toolchat.tools.builtin.write_file import WriteFileTool

TOOL_CLASSES = [
    ReadFileTool,
    WriteFileTool,
    ExecuteCommandTool,
    ListDirectoryTool,
]

__all__ = [
    "TOOL_CLASSES",
    "ExecuteCommandTool",
    "ListDirectoryTool",
    "ReadFileTool",
    "WriteFileTool",
]
