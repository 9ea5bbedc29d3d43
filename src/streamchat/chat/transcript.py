"""Conversation transcript.

The transcript is the context sent to the completion service on every
turn. It starts with exactly one system message and only ever grows.
"""

from collections.abc import Iterator

from ..config.models import DEFAULT_SYSTEM_PROMPT
from ..llm.models import ChatMessage, Role


class Transcript:
    """Ordered, append-only list of chat messages.

    The system message is fixed at construction; user and assistant
    messages are appended after it in submission order.
    """

    def __init__(self, system_prompt: str = DEFAULT_SYSTEM_PROMPT):
        self._messages: list[ChatMessage] = [ChatMessage.system(system_prompt)]

    @property
    def system(self) -> ChatMessage:
        return self._messages[0]

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        """Snapshot of the transcript, safe to hand to a request."""
        return tuple(self._messages)

    def add_user(self, content: str) -> ChatMessage:
        message = ChatMessage.user(content)
        self._messages.append(message)
        return message

    def add_assistant(self, content: str) -> ChatMessage:
        message = ChatMessage.assistant(content)
        self._messages.append(message)
        return message

    @property
    def last(self) -> ChatMessage:
        return self._messages[-1]

    def roles(self) -> list[Role]:
        return [msg.role for msg in self._messages]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self.messages)

    def __getitem__(self, index: int) -> ChatMessage:
        return self._messages[index]
