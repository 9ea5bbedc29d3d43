"""Interactive conversation loop.

One turn is fully resolved (request sent, stream drained or failed,
transcript updated) before the next prompt is shown. There is no
cancellation: a stream runs until it is exhausted or errors.
"""

import logging
from collections.abc import Callable
from enum import Enum

import httpx
from openai import OpenAIError
from rich.console import Console

from ..config.models import Settings
from ..llm.base import LLMProvider
from ..llm.models import CompletionRequest
from .transcript import Transcript

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"
USER_PROMPT = "[bold blue]You:[/bold blue] "
ASSISTANT_LABEL = "[bold green]Assistant:[/bold green] "
FAREWELL = "[bold green]Goodbye![/bold green]"

# Errors that end a turn early without ending the session
STREAM_ERRORS = (OpenAIError, httpx.HTTPError, OSError)


class SessionState(str, Enum):
    AWAITING_INPUT = "awaiting_input"
    STREAMING = "streaming"
    TERMINATED = "terminated"


class ChatSession:
    """Drives one interactive chat session against a completion service.

    The session owns its transcript. Settings are passed in rather than read
    from global state, so tests can run it against synthetic settings and a
    fake provider.
    """

    def __init__(
        self,
        settings: Settings,
        provider: LLMProvider,
        transcript: Transcript | None = None,
        console: Console | None = None,
        read_input: Callable[[str], str] | None = None,
    ) -> None:
        self._settings = settings
        self._provider = provider
        self._console = console or Console()
        self._read_input = read_input or self._console.input
        if transcript is None:
            transcript = Transcript(settings.azure.system_prompt)
        self.transcript = transcript
        self._state = SessionState.AWAITING_INPUT

    @property
    def state(self) -> SessionState:
        return self._state

    def build_request(self) -> CompletionRequest:
        """Build a streaming request carrying the whole transcript."""
        azure = self._settings.azure
        return CompletionRequest(
            model=azure.model,
            messages=self.transcript.messages,
            max_tokens=azure.max_tokens,
            temperature=azure.temperature,
            stream=True,
        )

    async def run(self) -> None:
        """Prompt, stream and repeat until the user exits."""
        while self._state is not SessionState.TERMINATED:
            try:
                line = self._read_input(USER_PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._console.print()
                self._terminate()
                break
            await self.handle_line(line)

    async def handle_line(self, line: str) -> SessionState:
        """Process one line of user input from the AWAITING_INPUT state.

        ``exit`` (any case, surrounding whitespace ignored) terminates the
        session. Anything else, the empty line included, is appended as a
        user message and answered.

        Returns:
            The state after the transition
        """
        if self._state is not SessionState.AWAITING_INPUT:
            raise RuntimeError(f"cannot accept input in state {self._state.value}")

        text = line.strip()
        if text.lower() == EXIT_COMMAND:
            self._terminate()
            return self._state

        self.transcript.add_user(text)
        self._state = SessionState.STREAMING
        reply = await self.stream_reply()
        # Partial or empty replies are kept so roles keep alternating
        self.transcript.add_assistant(reply)
        self._state = SessionState.AWAITING_INPUT
        return self._state

    async def stream_reply(self) -> str:
        """Stream one reply, echoing each delta as it arrives.

        Returns:
            The accumulated reply text. On a transport or API error this is
            whatever arrived before the failure, possibly empty.
        """
        request = self.build_request()
        self._console.print(ASSISTANT_LABEL, end="")

        parts: list[str] = []
        stream = None
        try:
            stream = await self._provider.stream_chat(request)
            async for chunk in stream:
                for delta in chunk.deltas:
                    if not delta:
                        continue
                    self._write_delta(delta)
                    parts.append(delta)
        except STREAM_ERRORS as e:
            self._console.print()
            logger.error("Error: %s", e)

        self._console.print("\n")

        if stream is not None and stream.usage:
            logger.debug("Token usage: %s", stream.usage)
        return "".join(parts)

    def _write_delta(self, delta: str) -> None:
        self._console.print(delta, end="", markup=False, emoji=False, highlight=False, soft_wrap=True)
        self._console.file.flush()

    def _terminate(self) -> None:
        self._console.print(FAREWELL)
        self._state = SessionState.TERMINATED
