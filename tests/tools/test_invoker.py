from __future__ import annotations

import asyncio

import pytest
from pydantic import BaseModel

from toolchat.tools import ToolError, ToolInvoker, ToolSuccess, define_tool
from toolchat.tools.core.types import ERROR_LABEL

pytestmark = pytest.mark.asyncio


class AddArgs(BaseModel):
    a: int
    b: int


@define_tool("add", "Add two integers", AddArgs)
async def add_tool(args: AddArgs) -> str:
    return f"Sum: {args.a + args.b}"


async def test_success_returns_content():
    result = await ToolInvoker().invoke(add_tool, {"a": 2, "b": 3})
    assert isinstance(result, ToolSuccess)
    assert result.to_text() == "Sum: 5"
    assert not result.is_error


async def test_handler_receives_validated_model():
    seen = []

    @define_tool("capture", "Capture args", AddArgs)
    def capture(args: AddArgs) -> str:
        seen.append(args)
        return "ok"

    result = await ToolInvoker().invoke(capture, {"a": "4", "b": 1})
    assert isinstance(result, ToolSuccess)
    assert isinstance(seen[0], AddArgs)
    assert seen[0].a == 4


async def test_invalid_arguments_become_failure_text():
    result = await ToolInvoker().invoke(add_tool, {"a": "not a number"})
    assert isinstance(result, ToolError)
    assert result.code == "invalid_arguments"
    text = result.to_text()
    assert text.startswith(ERROR_LABEL)
    assert "invalid arguments:" in text
    assert "b" in text


async def test_non_object_arguments_rejected():
    result = await ToolInvoker().invoke(add_tool, "a=1")
    assert isinstance(result, ToolError)
    assert result.code == "invalid_arguments"


async def test_handler_exception_is_captured():
    @define_tool("boom", "Always fails", AddArgs)
    async def boom(args: AddArgs) -> str:
        raise RuntimeError("disk on fire")

    result = await ToolInvoker().invoke(boom, {"a": 1, "b": 1})
    assert isinstance(result, ToolError)
    assert result.code == "execution_failed"
    assert result.error_type == "RuntimeError"
    assert "disk on fire" in result.to_text()
    assert result.to_text().startswith(ERROR_LABEL)


async def test_file_not_found_from_handler_is_captured(tmp_path):
    @define_tool("cat", "Read a file", AddArgs)
    async def cat(args: AddArgs) -> str:
        return (tmp_path / "missing.txt").read_text()

    result = await ToolInvoker().invoke(cat, {"a": 1, "b": 1})
    assert isinstance(result, ToolError)
    assert result.error_type == "FileNotFoundError"


async def test_returned_tool_error_passes_through():
    @define_tool("soft_fail", "Reports failure", AddArgs)
    async def soft_fail(args: AddArgs):
        return ToolError(name="soft_fail", code="exit_code", error="exit code 7")

    result = await ToolInvoker().invoke(soft_fail, {"a": 1, "b": 1})
    assert isinstance(result, ToolError)
    assert result.code == "exit_code"
    assert result.to_text() == "Error: exit code 7"


async def test_timeout_becomes_failure():
    @define_tool("slow", "Sleeps", AddArgs)
    async def slow(args: AddArgs) -> str:
        await asyncio.sleep(5)
        return "late"

    result = await ToolInvoker(timeout=0.05).invoke(slow, {"a": 1, "b": 1})
    assert isinstance(result, ToolError)
    assert result.code == "timeout"


async def test_timeout_raised_by_handler_is_execution_failure():
    @define_tool("fetch", "Talks to a slow upstream", AddArgs)
    async def fetch(args: AddArgs) -> str:
        raise TimeoutError("upstream socket timed out")

    for invoker in (ToolInvoker(), ToolInvoker(timeout=5)):
        result = await invoker.invoke(fetch, {"a": 1, "b": 1})
        assert isinstance(result, ToolError)
        assert result.code == "execution_failed"
        assert result.error_type == "TimeoutError"
        assert "upstream socket timed out" in result.to_text()
