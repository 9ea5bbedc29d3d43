from .azure import AzureOpenAIProvider
from .openai import OpenAIProvider

__all__ = ["AzureOpenAIProvider", "OpenAIProvider"]
