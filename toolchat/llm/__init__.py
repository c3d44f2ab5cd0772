from .provider import ChatModel, LLMProvider, OpenAIProvider

__all__ = ["ChatModel", "LLMProvider", "OpenAIProvider"]
