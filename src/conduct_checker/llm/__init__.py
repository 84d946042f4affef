from .client import ChatCompletionClient, LLMClient

__all__ = ["ChatCompletionClient", "LLMClient"]
