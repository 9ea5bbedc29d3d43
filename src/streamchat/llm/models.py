from collections.abc import AsyncIterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Role tag carried by every chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """Represents a chat message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Role of the message sender: 'user', 'assistant', or 'system'")
    content: str = Field(description="Content of the message")

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role=Role.SYSTEM, content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role=Role.ASSISTANT, content=content)

    def to_payload(self) -> dict[str, str]:
        """Render the message in Chat Completions wire format."""
        return {"role": self.role.value, "content": self.content}


class CompletionRequest(BaseModel):
    """A chat completion request built from the full transcript."""

    model_config = ConfigDict(frozen=True)

    model: str | None = Field(
        default=None,
        description="Model (or Azure deployment) identifier; None uses the provider default",
    )
    messages: tuple[ChatMessage, ...] = Field(description="Ordered conversation context")
    max_tokens: int = Field(ge=0, description="Ceiling on generated tokens")
    temperature: float = Field(ge=0.0, le=2.0, description="Sampling temperature")
    stream: bool = Field(default=True, description="Request incremental delivery")

    def to_payload(self, default_model: str) -> dict[str, Any]:
        """Render keyword arguments for ``chat.completions.create``.

        Args:
            default_model: Model used when the request does not name one
        """
        return {
            "model": self.model or default_model,
            "messages": [msg.to_payload() for msg in self.messages],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "stream": self.stream,
        }


class StreamChunk(BaseModel):
    """One chunk of a streamed reply.

    A chunk carries zero or more text deltas, one for each choice that
    had content. Usage-only trailer chunks have no deltas.
    """

    model_config = ConfigDict(frozen=True)

    deltas: list[str] = Field(default_factory=list)


class StreamingResponse:
    """Wrapper for streaming LLM responses that captures usage info.

    Acts as an async iterator over StreamChunk objects while storing token
    usage that becomes available at the end of the stream.

    Usage:
        stream = await provider.stream_chat(request)
        async for chunk in stream:
            for delta in chunk.deltas:
                print(delta, end="")
        # After iteration, usage is available
        print(stream.usage)  # {"prompt_tokens": 100, "completion_tokens": 50, ...}
    """

    def __init__(self, async_iter: AsyncIterator[StreamChunk]):
        self._iter = async_iter
        self._usage: dict[str, int] | None = None

    @property
    def usage(self) -> dict[str, int] | None:
        """Get token usage info (available after iteration completes)."""
        return self._usage

    def set_usage(self, usage: dict[str, int]) -> None:
        """Set token usage info (called by provider at end of stream)."""
        self._usage = usage

    def __aiter__(self) -> "StreamingResponse":
        return self

    async def __anext__(self) -> StreamChunk:
        return await self._iter.__anext__()
