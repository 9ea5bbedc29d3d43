import logging
from collections.abc import AsyncIterator, Callable
from typing import Any

from openai import AsyncOpenAI

from ..base import LLMProvider
from ..models import CompletionRequest, StreamChunk, StreamingResponse

logger = logging.getLogger(__name__)


def chunk_from_completion(chunk: Any) -> StreamChunk:
    """Collect the non-empty content deltas of a Chat Completions chunk."""
    deltas = [
        choice.delta.content
        for choice in (chunk.choices or [])
        if choice.delta is not None and choice.delta.content
    ]
    return StreamChunk(deltas=deltas)


class OpenAIProvider(LLMProvider):
    """OpenAI LLM provider implementation.

    Hidden design decisions:
    - OpenAI API client initialization
    - Message format conversion
    - Authentication mechanism

    Retries are disabled on the client: a failed turn is reported once and
    the conversation moves on.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        organization: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Default model to use
            base_url: Optional custom API base URL
            organization: Optional organization ID
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        client_kwargs.setdefault("max_retries", 0)
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url or None,
            organization=organization,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        return self._model

    @property
    def reports_stream_usage(self) -> bool:
        """Whether the endpoint accepts ``stream_options`` for usage reporting."""
        return True

    def build_payload(self, request: CompletionRequest) -> dict[str, Any]:
        """Render the request, falling back to the default model."""
        payload = request.to_payload(default_model=self.model)
        if request.stream and self.reports_stream_usage:
            payload["stream_options"] = {"include_usage": True}
        return payload

    async def stream_chat(self, request: CompletionRequest) -> StreamingResponse:
        """Open a streaming chat completion on the Chat Completions API.

        Args:
            request: Completion request carrying the full transcript

        Returns:
            StreamingResponse that yields StreamChunk objects and captures usage
        """
        # The generator runs lazily, so response is bound before usage arrives
        response = StreamingResponse(
            self._chunk_generator(request, lambda usage: response.set_usage(usage))
        )
        return response

    async def _chunk_generator(
        self,
        request: CompletionRequest,
        record_usage: Callable[[dict[str, int]], None],
    ) -> AsyncIterator[StreamChunk]:
        """Internal generator that yields chunks and captures usage."""
        payload = self.build_payload(request)
        logger.debug(
            "Opening stream: model=%s messages=%d max_tokens=%d",
            payload["model"],
            len(request.messages),
            request.max_tokens,
        )
        stream = await self._client.chat.completions.create(**payload)

        async for chunk in stream:
            # Check for usage in the final chunk
            if getattr(chunk, "usage", None) is not None:
                record_usage({
                    "prompt_tokens": chunk.usage.prompt_tokens,
                    "completion_tokens": chunk.usage.completion_tokens,
                    "total_tokens": chunk.usage.total_tokens,
                })
            yield chunk_from_completion(chunk)

    async def close(self) -> None:
        """Close the OpenAI client.

        Note: Uses the OpenAI SDK's async context manager for proper cleanup.
        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
