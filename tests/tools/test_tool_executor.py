from __future__ import annotations

import asyncio

import pytest
from pydantic import BaseModel

from toolchat.tools import ToolExecutor, ToolRegistry, define_tool

pytestmark = pytest.mark.asyncio


class DelayArgs(BaseModel):
    label: str
    delay: float = 0.0


@define_tool("delayed_echo", "Echo a label after a delay", DelayArgs)
async def delayed_echo(args: DelayArgs) -> str:
    await asyncio.sleep(args.delay)
    return f"Echo: {args.label}"


def _call(call_id: str, name: str, **args):
    return {"id": call_id, "name": name, "args": args, "type": "tool_call"}


async def test_results_follow_request_order_not_completion_order():
    executor = ToolExecutor(ToolRegistry([delayed_echo]))
    calls = [
        _call("c1", "delayed_echo", label="slow", delay=0.2),
        _call("c2", "delayed_echo", label="fast", delay=0.0),
        _call("c3", "delayed_echo", label="medium", delay=0.1),
    ]

    messages = await executor.run_batch(calls)

    assert [m.tool_call_id for m in messages] == ["c1", "c2", "c3"]
    assert [m.content for m in messages] == [
        "Echo: slow",
        "Echo: fast",
        "Echo: medium",
    ]
    assert all(m.status == "success" for m in messages)


async def test_batch_runs_calls_concurrently():
    first_started = asyncio.Event()
    second_started = asyncio.Event()

    class WaitArgs(BaseModel):
        pass

    @define_tool("first", "Waits for second", WaitArgs)
    async def first(args: WaitArgs) -> str:
        first_started.set()
        await asyncio.wait_for(second_started.wait(), timeout=2)
        return "first done"

    @define_tool("second", "Waits for first", WaitArgs)
    async def second(args: WaitArgs) -> str:
        second_started.set()
        await asyncio.wait_for(first_started.wait(), timeout=2)
        return "second done"

    executor = ToolExecutor(ToolRegistry([first, second]))
    messages = await executor.run_batch([_call("a", "first"), _call("b", "second")])

    assert [m.content for m in messages] == ["first done", "second done"]


async def test_unknown_tool_and_failures_do_not_break_batch():
    @define_tool("broken", "Raises", DelayArgs)
    async def broken(args: DelayArgs) -> str:
        raise ValueError("nope")

    executor = ToolExecutor(ToolRegistry([delayed_echo, broken]))
    messages = await executor.run_batch(
        [
            _call("c1", "missing_tool"),
            _call("c2", "broken", label="x"),
            _call("c3", "delayed_echo", label="ok"),
        ]
    )

    assert len(messages) == 3
    assert messages[0].content == "Error: unknown tool: missing_tool"
    assert messages[0].status == "error"
    assert messages[1].content.startswith("Error: ")
    assert "nope" in messages[1].content
    assert messages[2].content == "Echo: ok"


async def test_invalid_tool_calls_get_failure_results():
    executor = ToolExecutor(ToolRegistry([delayed_echo]))
    messages = await executor.run_batch(
        [_call("c1", "delayed_echo", label="ok")],
        [
            {
                "id": "c2",
                "name": "delayed_echo",
                "args": '{"label": ',
                "error": "Malformed JSON",
                "type": "invalid_tool_call",
            }
        ],
    )

    assert [m.tool_call_id for m in messages] == ["c1", "c2"]
    assert messages[1].content == "Error: invalid arguments: Malformed JSON"
    assert messages[1].status == "error"
