from .session import EXIT_COMMAND, ChatSession, SessionState
from .transcript import Transcript

__all__ = ["ChatSession", "EXIT_COMMAND", "SessionState", "Transcript"]
