"""Ready-made agent: builtin tools, default system prompt, configured model."""

from __future__ import annotations

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from toolchat.config import Settings, settings
from toolchat.llm.provider import LLMProvider, OpenAIProvider
from toolchat.prompts import get_tool_agent_system_prompt
from toolchat.tools.build_registry import build_registry
from toolchat.tools.invoker import ToolInvoker
from toolchat.tools.registry import ToolRegistry
from toolchat.utils.logger import agent_logger

from .orchestrator import ConversationOrchestrator, ConversationResult


class ToolAgent:
    """Answers a single query, calling tools as the model requests."""

    def __init__(
        self,
        provider: LLMProvider | None = None,
        registry: ToolRegistry | None = None,
        system_prompt: str | None = None,
        max_rounds: int | None = None,
        tool_timeout: float | None = None,
        config: Settings | None = None,
    ):
        cfg = config or settings
        self.llm_provider = provider or OpenAIProvider(config=cfg)
        self.tool_manager = registry if registry is not None else build_registry()
        self.system_prompt = (
            system_prompt
            if system_prompt is not None
            else get_tool_agent_system_prompt()
        )
        self.orchestrator = ConversationOrchestrator.from_provider(
            self.llm_provider,
            self.tool_manager,
            invoker=ToolInvoker(
                timeout=tool_timeout if tool_timeout is not None else cfg.tool_timeout
            ),
            max_rounds=max_rounds if max_rounds is not None else cfg.max_tool_rounds,
            model_timeout=cfg.model_timeout,
        )

    def get_agent_name(self) -> str:
        return "tool_agent"

    def _prepare_messages(self, query: str) -> list[BaseMessage]:
        messages: list[BaseMessage] = []
        if self.system_prompt:
            messages.append(SystemMessage(content=self.system_prompt))
        messages.append(HumanMessage(content=query))
        return messages

    async def process(self, query: str) -> ConversationResult:
        agent_logger.info(
            "Agent run",
            agent=self.get_agent_name(),
            model=self.llm_provider.get_model_name(),
            tools=self.tool_manager.names(),
        )
        return await self.orchestrator.run(self._prepare_messages(query))
