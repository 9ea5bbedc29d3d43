from typing import Any

from .base import LLMProvider
from .providers import AzureOpenAIProvider, OpenAIProvider


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    This factory function hides the instantiation logic for different providers.

    Args:
        provider: Provider type ('azure', 'openai')
        **config: Provider-specific configuration
            For Azure OpenAI:
                - api_key: str (required)
                - endpoint: str (required)
                - model: str (required, the deployment name)
                - api_version: str (default: '2023-05-15')
            For OpenAI:
                - api_key: str (required)
                - model: str (default: 'gpt-4o-mini')
                - base_url: str | None

    Returns:
        Initialized LLM provider instance

    Raises:
        ValueError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> provider = create_llm_provider(
        ...     "azure",
        ...     api_key="...",
        ...     endpoint="https://my-resource.openai.azure.com/",
        ...     model="gpt-4"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower in ("azure", "azure_openai"):
        for key in ("api_key", "endpoint", "model"):
            if key not in config:
                raise TypeError(f"Azure OpenAI provider requires '{key}' in config")
        return AzureOpenAIProvider(**config)

    if provider_lower == "openai":
        if "api_key" not in config:
            raise TypeError("OpenAI provider requires 'api_key' in config")
        return OpenAIProvider(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'azure', 'openai'"
    )
