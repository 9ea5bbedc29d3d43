"""Provider factory functions for CLI.

Builds the LLM provider from loaded Settings, hiding which keyword
arguments each provider type expects.
"""

from ..config.models import Settings
from ..llm import LLMProvider, create_llm_provider


def get_llm(settings: Settings) -> LLMProvider:
    """Create the LLM provider named by ``settings.azure.provider``.

    Args:
        settings: Validated settings with non-empty credentials

    Returns:
        LLM provider instance

    Raises:
        ValueError: If the provider type is not supported
    """
    azure = settings.azure
    if azure.provider.lower() == "openai":
        return create_llm_provider(
            "openai",
            api_key=azure.openai_api_key,
            model=azure.model,
            base_url=azure.openai_endpoint,
        )

    return create_llm_provider(
        azure.provider,
        api_key=azure.openai_api_key,
        endpoint=azure.openai_endpoint,
        model=azure.model,
        api_version=azure.api_version,
    )
