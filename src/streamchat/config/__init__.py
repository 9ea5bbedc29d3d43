"""Configuration loading for streamchat.

Settings come from a TOML file overridden by ``APP_`` environment variables.
"""

from .errors import ConfigError, MissingCredentialsError
from .loader import DEFAULT_CONFIG_PATH, ENV_PREFIX, load, require_credentials
from .models import AzureSettings, Settings

__all__ = [
    "AzureSettings",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "MissingCredentialsError",
    "Settings",
    "load",
    "require_credentials",
]
