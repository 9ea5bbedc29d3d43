from .base import LLMProvider
from .factory import create_llm_provider
from .models import ChatMessage, CompletionRequest, Role, StreamChunk, StreamingResponse
from .providers import AzureOpenAIProvider, OpenAIProvider

__all__ = [
    "LLMProvider",
    "create_llm_provider",
    "ChatMessage",
    "CompletionRequest",
    "Role",
    "StreamChunk",
    "StreamingResponse",
    "AzureOpenAIProvider",
    "OpenAIProvider",
]
