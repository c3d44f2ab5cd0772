"""LLM provider abstraction for the model client side of the loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Protocol

from langchain_core.messages import BaseMessage
from langchain_core.tools import BaseTool

from toolchat.config import Settings, settings
from toolchat.utils.logger import agent_logger


class ChatModel(Protocol):
    """What the orchestrator needs from a model: transcript in, AI message out."""

    async def ainvoke(self, input: Sequence[BaseMessage], **kwargs: Any) -> Any: ...


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def get_model_name(self) -> str:
        """Get the model name."""
        pass

    @abstractmethod
    def bind_tools(self, tools: list[BaseTool]) -> ChatModel:
        """Bind tools to the LLM for function calling."""
        pass


class OpenAIProvider(LLMProvider):
    """OpenAI-compatible chat endpoint via ``langchain_openai.ChatOpenAI``.

    Explicit constructor arguments override values from settings; any
    OpenAI-compatible base URL (OpenAI, DashScope, Ollama, ...) works.
    """

    def __init__(
        self,
        model: str | None = None,
        temperature: float | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        config: Settings | None = None,
    ):
        cfg = config or settings
        self.model: str = model or cfg.model_name
        self.temperature = (
            temperature if temperature is not None else cfg.model_temperature
        )
        self.api_key = api_key or cfg.openai_api_key
        self.base_url = base_url or cfg.openai_base_url
        self.timeout = timeout if timeout is not None else cfg.model_timeout
        self._llm: Any | None = None

    @property
    def llm(self) -> Any:
        if self._llm is None:
            from langchain_openai import ChatOpenAI

            kwargs: dict[str, Any] = {
                "model": self.model,
                "temperature": self.temperature,
            }
            if self.api_key:
                kwargs["api_key"] = self.api_key
            if self.base_url:
                kwargs["base_url"] = self.base_url
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            agent_logger.debug(
                "Creating chat model", model=self.model, base_url=self.base_url
            )
            self._llm = ChatOpenAI(**kwargs)
        return self._llm

    def get_model_name(self) -> str:
        return self.model

    def bind_tools(self, tools: list[BaseTool]) -> ChatModel:
        if not tools:
            return self.llm
        return self.llm.bind_tools(tools)
