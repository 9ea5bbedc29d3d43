"""
streamchat: a terminal chat client for hosted chat-completion endpoints.

Each line typed is appended to a running transcript, the whole transcript
is sent to the service, and the reply is streamed back as it is generated.
"""

__version__ = "0.1.0"

from .chat import ChatSession, SessionState, Transcript
from .config import ConfigError, MissingCredentialsError, Settings, load, require_credentials
from .llm import ChatMessage, CompletionRequest, LLMProvider, Role, StreamChunk, create_llm_provider

__all__ = [
    "ChatMessage",
    "ChatSession",
    "CompletionRequest",
    "ConfigError",
    "LLMProvider",
    "MissingCredentialsError",
    "Role",
    "SessionState",
    "Settings",
    "StreamChunk",
    "Transcript",
    "create_llm_provider",
    "load",
    "require_credentials",
]
