"""Startup errors raised while building Settings."""


class ConfigError(Exception):
    """The settings file is missing or malformed, or a value has the wrong type."""


class MissingCredentialsError(Exception):
    """Settings loaded, but the API key or endpoint is empty."""
