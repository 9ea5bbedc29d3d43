"""Typed settings records.

These models define the shape of the settings file, independent of
where the values come from (file, environment, or test code).
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."


class AzureSettings(BaseModel):
    """The ``[azure]`` section of the settings file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    openai_api_key: str = Field(repr=False, description="API key for the completion service")
    openai_endpoint: str = Field(description="Resource endpoint URL")
    model: str = Field(description="Model id, or deployment name on Azure")
    max_tokens: int = Field(ge=0, le=65535, description="Maximum output tokens per reply")
    temperature: float = Field(ge=0.0, le=2.0, description="Sampling temperature")
    api_version: str = Field(default="2023-05-15", description="Azure OpenAI API version")
    provider: str = Field(default="azure", description="Provider type: 'azure' or 'openai'")
    system_prompt: str = Field(default=DEFAULT_SYSTEM_PROMPT, description="First transcript message")


class Settings(BaseModel):
    """Process-wide settings, loaded once at startup and never mutated."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    azure: AzureSettings
