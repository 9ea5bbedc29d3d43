from abc import ABC, abstractmethod
from typing import Any

from .models import CompletionRequest, StreamingResponse


class LLMProvider(ABC):
    """Abstract base class for chat completion services.

    This module hides the design decision of which hosted endpoint answers
    the conversation. Implementations must handle provider-specific details:
    - API client setup and authentication
    - Request/response format conversion
    - Turning the service's chunk format into StreamChunk objects

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            stream = await provider.stream_chat(request)
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Get the default model name."""

    @abstractmethod
    async def stream_chat(self, request: CompletionRequest) -> StreamingResponse:
        """Open a streaming chat completion.

        Args:
            request: Model, full transcript and sampling parameters

        Returns:
            StreamingResponse yielding StreamChunk objects. The stream is
            lazy, finite and can only be consumed once. After iteration,
            token usage is available via ``stream.usage`` when reported.

        Raises:
            openai.OpenAIError: If the request cannot be sent or the service
                rejects it. The same errors can surface mid-iteration.
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
