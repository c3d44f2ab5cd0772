from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from toolchat.tools.core.types import ToolError

from ..base_tool import BaseTool


class ReadFileArgs(BaseModel):
    filePath: str = Field(..., description="Path of the file to read")


class ReadFileTool(BaseTool):
    name: str = "read_file"
    description: str = (
        "Read the contents of a file. Use it whenever the user asks to read, "
        "view or explain a file. Accepts relative or absolute paths."
    )
    args_schema: type[BaseModel] | dict[str, Any] | None = ReadFileArgs

    async def handle(self, args: ReadFileArgs) -> str | ToolError:
        file_path = Path(args.filePath)

        if not file_path.exists():
            return ToolError(
                name=self.name,
                code="not_found",
                error=f"File not found: {file_path}",
                error_type="FileNotFoundError",
            )
        if not file_path.is_file():
            return ToolError(
                name=self.name,
                code="not_a_file",
                error=f"Path is not a file: {file_path}",
                error_type="IsADirectoryError",
            )

        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            return ToolError(
                name=self.name,
                code="decode_error",
                error=f"File is not a valid UTF-8 text file: {file_path}",
                error_type="UnicodeDecodeError",
            )
        return f"File content:\n{content}"
