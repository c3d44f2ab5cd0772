"""Conversation loop that lets a chat model call tools.

The orchestrator owns one transcript per ``run``. It alternates between asking
the model for a reply and resolving the tool calls carried by that reply,
until the model answers without requesting any tool.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, cast

from langchain_core.messages import AIMessage, BaseMessage, SystemMessage

from toolchat.llm.provider import ChatModel, LLMProvider
from toolchat.tools.invoker import ToolInvoker
from toolchat.tools.registry import ToolRegistry
from toolchat.tools.tool_executor import ToolExecutor
from toolchat.utils.logger import agent_logger


class ConversationState(str, Enum):
    AWAITING_MODEL = "awaiting_model"
    MODEL_REPLIED = "model_replied"
    EXECUTING_TOOLS = "executing_tools"
    DONE = "done"
    EXHAUSTED = "exhausted"


class TranscriptError(ValueError):
    """Raised for a transcript the loop cannot start from."""


@dataclass
class ConversationResult:
    status: ConversationState
    content: str
    messages: list[BaseMessage] = field(default_factory=list)
    rounds: int = 0

    @property
    def done(self) -> bool:
        return self.status is ConversationState.DONE


def validate_transcript(messages: Sequence[BaseMessage]) -> None:
    """Check the ordering rules a transcript must follow.

    The transcript must be non-empty and may hold at most one system message,
    which has to come first.
    """
    if not messages:
        raise TranscriptError("Transcript is empty; at least one message is required")
    for index, message in enumerate(messages):
        if isinstance(message, SystemMessage) and index != 0:
            raise TranscriptError(
                f"System message must be the first message (found at index {index})"
            )


def extract_text(content: Any) -> str:
    """Flatten message content (plain string or list of content blocks) to text."""
    if isinstance(content, str):
        return content
    text_parts: list[str] = []
    for item in content or []:
        if isinstance(item, str):
            text_parts.append(item)
        elif isinstance(item, dict) and item.get("type") == "text":
            text = item.get("text")
            if text:
                text_parts.append(text)
    return "".join(text_parts)


def _has_tool_requests(message: AIMessage) -> bool:
    return bool(message.tool_calls or message.invalid_tool_calls)


class ConversationOrchestrator:
    """Drives the request / execute / continue loop.

    ``model`` is anything with ``async ainvoke(messages) -> AIMessage``,
    normally a chat model with the registry's tools bound to it. Transport
    errors raised by the model propagate to the caller unchanged.

    ``max_rounds`` caps the number of tool batches per run; ``None`` leaves
    the loop unbounded. When the cap is hit the run ends with
    ``ConversationState.EXHAUSTED`` and the unresolved assistant message stays
    last in the transcript, so running the transcript again resumes from it.
    """

    def __init__(
        self,
        model: ChatModel,
        registry: ToolRegistry,
        *,
        invoker: ToolInvoker | None = None,
        max_rounds: int | None = None,
        model_timeout: float | None = None,
    ) -> None:
        if max_rounds is not None and max_rounds < 0:
            raise ValueError("max_rounds must be >= 0 or None")
        self.model = model
        self.registry = registry
        self.executor = ToolExecutor(registry, invoker)
        self.max_rounds = max_rounds
        self.model_timeout = model_timeout

    @classmethod
    def from_provider(
        cls, provider: LLMProvider, registry: ToolRegistry, **kwargs: Any
    ) -> ConversationOrchestrator:
        """Bind the registry's tools to ``provider`` and build an orchestrator."""
        model = provider.bind_tools(registry.list_tools())
        return cls(model, registry, **kwargs)

    @staticmethod
    def initial_state(messages: Sequence[BaseMessage]) -> ConversationState:
        # A trailing assistant message is either the final answer or a batch
        # still waiting to be resolved.
        if isinstance(messages[-1], AIMessage):
            return ConversationState.MODEL_REPLIED
        return ConversationState.AWAITING_MODEL

    async def _call_model(self, transcript: list[BaseMessage]) -> AIMessage:
        snapshot = list(transcript)
        if self.model_timeout is not None:
            response = await asyncio.wait_for(
                self.model.ainvoke(snapshot), self.model_timeout
            )
        else:
            response = await self.model.ainvoke(snapshot)

        if isinstance(response, str):
            return AIMessage(content=response)
        if not isinstance(response, AIMessage):
            raise TypeError(
                f"Model returned {type(response).__name__}, expected AIMessage"
            )
        return response

    async def run(self, messages: Sequence[BaseMessage]) -> ConversationResult:
        """Run the loop until the model stops requesting tools.

        The input sequence is copied; the returned result carries the full
        transcript including every assistant and tool message appended.
        """
        transcript: list[BaseMessage] = list(messages)
        validate_transcript(transcript)

        state = self.initial_state(transcript)
        rounds = 0
        model_calls = 0

        while True:
            if state is ConversationState.AWAITING_MODEL:
                model_calls += 1
                agent_logger.info(
                    "LLM invoke", messages=len(transcript), call=model_calls
                )
                response = await self._call_model(transcript)
                transcript.append(response)
                state = ConversationState.MODEL_REPLIED

            elif state is ConversationState.MODEL_REPLIED:
                reply = cast(AIMessage, transcript[-1])
                has_calls = _has_tool_requests(reply)
                agent_logger.info("LLM response", has_tool_calls=has_calls)
                state = (
                    ConversationState.EXECUTING_TOOLS
                    if has_calls
                    else ConversationState.DONE
                )

            elif state is ConversationState.EXECUTING_TOOLS:
                if self.max_rounds is not None and rounds >= self.max_rounds:
                    agent_logger.warning(
                        "Tool round limit reached", max_rounds=self.max_rounds
                    )
                    state = ConversationState.EXHAUSTED
                    continue

                reply = cast(AIMessage, transcript[-1])
                tool_messages = await self.executor.run_batch(
                    reply.tool_calls, reply.invalid_tool_calls
                )
                transcript.extend(tool_messages)
                rounds += 1
                state = ConversationState.AWAITING_MODEL

            else:
                break

        final = transcript[-1]
        content = extract_text(final.content) if isinstance(final, AIMessage) else ""
        agent_logger.info(
            "Conversation finished",
            status=state.value,
            rounds=rounds,
            model_calls=model_calls,
        )
        return ConversationResult(
            status=state, content=content, messages=transcript, rounds=rounds
        )
