from typing import Any

from openai import AsyncAzureOpenAI

from .openai import OpenAIProvider

DEFAULT_API_VERSION = "2023-05-15"
# First API version that accepts stream_options on chat completions
STREAM_USAGE_API_VERSION = "2024-09-01"


class AzureOpenAIProvider(OpenAIProvider):
    """Azure OpenAI provider implementation.

    Azure serves the same Chat Completions API as OpenAI, addressed by
    resource endpoint and deployment name instead of a model id. The model
    configured here is used as the deployment name.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str,
        model: str,
        api_version: str = DEFAULT_API_VERSION,
        **client_kwargs: Any
    ):
        """Initialize Azure OpenAI provider.

        Args:
            api_key: Azure OpenAI resource key
            endpoint: Resource endpoint, e.g. https://my-resource.openai.azure.com/
            model: Deployment name
            api_version: Azure OpenAI REST API version
            **client_kwargs: Additional kwargs for AsyncAzureOpenAI client
        """
        self._model = model
        self._api_version = api_version
        client_kwargs.setdefault("max_retries", 0)
        self._client = AsyncAzureOpenAI(
            api_key=api_key,
            azure_endpoint=endpoint,
            azure_deployment=model,
            api_version=api_version,
            **client_kwargs
        )

    @property
    def api_version(self) -> str:
        return self._api_version

    @property
    def reports_stream_usage(self) -> bool:
        # API versions are ISO dates, optionally suffixed with "-preview"
        return self.api_version >= STREAM_USAGE_API_VERSION
