from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from ..base_tool import BaseTool


class WriteFileArgs(BaseModel):
    filePath: str = Field(..., description="Path of the file to write")
    content: str = Field(..., description="Complete file content to write")


class WriteFileTool(BaseTool):
    name: str = "write_file"
    description: str = (
        "Write content to a file (create or overwrite). Missing parent "
        "directories are created."
    )
    args_schema: type[BaseModel] | dict[str, Any] | None = WriteFileArgs

    async def handle(self, args: WriteFileArgs) -> str:
        file_path = Path(args.filePath)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(args.content, encoding="utf-8")
        return f"File written: {file_path}"
