from .orchestrator import (
    ConversationOrchestrator,
    ConversationResult,
    ConversationState,
    TranscriptError,
)
from .tool_agent import ToolAgent

__all__ = [
    "ConversationOrchestrator",
    "ConversationResult",
    "ConversationState",
    "ToolAgent",
    "TranscriptError",
]
