"""Layered settings loading.

The base TOML file supplies defaults; environment variables prefixed with
``APP_`` override them key by key. Nested keys are separated by a double
underscore, so ``APP_AZURE__MODEL`` overrides ``model`` in the ``[azure]``
section.
"""

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ConfigError, MissingCredentialsError
from .models import Settings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/default.toml")
ENV_PREFIX = "APP_"
NESTED_DELIMITER = "__"


def _resolve_path(path: Path) -> Path:
    """Accept ``config/default`` as shorthand for ``config/default.toml``."""
    if not path.exists() and not path.suffix:
        candidate = path.with_suffix(".toml")
        if candidate.exists():
            return candidate
    return path


def _read_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"configuration file {path} not found") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"configuration file {path} is malformed: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read configuration file {path}: {e}") from e


def env_overrides(environ: Mapping[str, str], prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Build a nested settings dict from prefixed environment variables.

    Args:
        environ: Environment mapping to scan
        prefix: Variable prefix, matched case-insensitively

    Returns:
        Nested dict of lower-cased keys to raw string values
    """
    overrides: dict[str, Any] = {}
    for name, value in environ.items():
        if not name.upper().startswith(prefix.upper()):
            continue
        parts = [p for p in name[len(prefix):].lower().split(NESTED_DELIMITER) if p]
        if not parts:
            continue

        node = overrides
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[parts[-1]] = value
    return overrides


def merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``; override wins on conflict."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load(
    path: str | Path = DEFAULT_CONFIG_PATH,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Load settings from the base file and the environment.

    Args:
        path: Base TOML settings file
        environ: Environment to overlay (default: ``os.environ``)

    Returns:
        Validated, immutable Settings

    Raises:
        ConfigError: If the file is missing or malformed, or a field cannot
            be coerced to its declared type
    """
    resolved = _resolve_path(Path(path))
    raw = _read_file(resolved)

    overrides = env_overrides(os.environ if environ is None else environ)
    if overrides:
        logger.debug("Applying environment overrides for: %s", ", ".join(sorted(overrides)))

    try:
        settings = Settings.model_validate(merge(raw, overrides))
    except ValidationError as e:
        raise ConfigError(f"invalid configuration in {resolved}: {e}") from e

    logger.debug("Loaded settings from %s (model=%s)", resolved, settings.azure.model)
    return settings


def require_credentials(settings: Settings) -> Settings:
    """Reject settings whose API key or endpoint is blank.

    Raises:
        MissingCredentialsError: If either value is empty or whitespace
    """
    azure = settings.azure
    if not azure.openai_api_key.strip() or not azure.openai_endpoint.strip():
        raise MissingCredentialsError("Missing API key or endpoint")
    return settings
