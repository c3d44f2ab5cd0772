from __future__ import annotations

import asyncio
import os
import signal
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from toolchat.tools.core.types import ToolError
from toolchat.utils.logger import tool_logger

from ..base_tool import BaseTool


class ExecuteCommandArgs(BaseModel):
    command: str = Field(
        ..., description="Command to execute (interpreted by the system shell)"
    )
    workingDirectory: str | None = Field(
        default=None,
        description="Working directory to run the command in (recommended)",
    )


@dataclass
class ProcessOutcome:
    """Terminal state of one spawned command.

    Exactly one of ``exit_code`` (the process ran and exited) or ``error``
    (it never started) is set.
    """

    exit_code: int | None = None
    error: str | None = None

    @classmethod
    def exited(cls, code: int) -> ProcessOutcome:
        return cls(exit_code=code)

    @classmethod
    def spawn_error(cls, message: str) -> ProcessOutcome:
        return cls(error=message)

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


def continuity_hint(working_directory: str) -> str:
    return (
        f'\n\nImportant: the command ran successfully in "{working_directory}". '
        "To run more commands in this directory, pass "
        f'workingDirectory: "{working_directory}" again instead of using cd.'
    )


def terminate_process(proc: asyncio.subprocess.Process) -> None:
    """Kill the command's whole process group, falling back to the shell alone."""
    if proc.returncode is not None:
        return
    if os.name != "nt":
        try:
            os.killpg(proc.pid, signal.SIGKILL)
            return
        except (ProcessLookupError, PermissionError):
            pass
    try:
        proc.kill()
    except ProcessLookupError:
        pass


async def run_process(command: str, cwd: str | None = None) -> ProcessOutcome:
    """Run ``command`` through the system shell and wait for it to finish.

    The child inherits this process's stdin/stdout/stderr so its output is
    visible live. On POSIX it runs in its own session so that every program the
    shell starts can be killed together. If the awaiting task is cancelled the
    group is killed and the shell reaped before the cancellation propagates.
    """
    kwargs: dict[str, Any] = {"start_new_session": True} if os.name != "nt" else {}
    try:
        proc = await asyncio.create_subprocess_shell(
            command, stdin=None, stdout=None, stderr=None, cwd=cwd, **kwargs
        )
    except OSError as e:
        return ProcessOutcome.spawn_error(str(e))

    try:
        code = await proc.wait()
    except asyncio.CancelledError:
        terminate_process(proc)
        await proc.wait()
        raise
    return ProcessOutcome.exited(code)


class ExecuteCommandTool(BaseTool):
    name: str = "execute_command"
    description: str = (
        "Execute a system command in an optional working directory. Output is "
        "shown to the user in real time; the result reports success or the exit code."
    )
    args_schema: type[BaseModel] | dict[str, Any] | None = ExecuteCommandArgs

    async def handle(self, args: ExecuteCommandArgs) -> str | ToolError:
        cwd = args.workingDirectory or os.getcwd()
        tool_logger.info(
            "execute_command start",
            command=args.command,
            working_directory=args.workingDirectory,
        )

        outcome = await run_process(args.command, cwd=cwd)

        if outcome.error is not None:
            tool_logger.error(
                "execute_command spawn failed",
                command=args.command,
                error=outcome.error,
            )
            return ToolError(
                name=self.name,
                code="spawn_error",
                error=f"failed to start command: {outcome.error}",
                error_type="OSError",
            )

        if not outcome.succeeded:
            tool_logger.info(
                "execute_command failed",
                command=args.command,
                exit_code=outcome.exit_code,
            )
            return ToolError(
                name=self.name,
                code="exit_code",
                error=f"command failed with exit code {outcome.exit_code}",
            )

        tool_logger.info("execute_command done", command=args.command)
        hint = continuity_hint(args.workingDirectory) if args.workingDirectory else ""
        return f"Command succeeded: {args.command}{hint}"
