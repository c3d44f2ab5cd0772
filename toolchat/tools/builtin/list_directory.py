from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from toolchat.tools.core.types import ToolError

from ..base_tool import BaseTool


class ListDirectoryArgs(BaseModel):
    directoryPath: str = Field(..., description="Directory to list")


class ListDirectoryTool(BaseTool):
    name: str = "list_directory"
    description: str = "List all files and folders directly inside a directory."
    args_schema: type[BaseModel] | dict[str, Any] | None = ListDirectoryArgs

    async def handle(self, args: ListDirectoryArgs) -> str | ToolError:
        base = Path(args.directoryPath)

        if not base.exists():
            return ToolError(
                name=self.name,
                code="not_found",
                error=f"Path does not exist: {base}",
                error_type="FileNotFoundError",
            )
        if not base.is_dir():
            return ToolError(
                name=self.name,
                code="not_a_directory",
                error=f"Path is not a directory: {base}",
                error_type="NotADirectoryError",
            )

        entries = sorted(p.name for p in base.iterdir())
        listing = "\n".join(f"- {name}" for name in entries)
        return f"Directory contents:\n{listing}"
