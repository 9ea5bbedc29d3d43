"""Pytest configuration and shared fixtures."""
import io
import os
from pathlib import Path

import pytest
from rich.console import Console

from streamchat.config import AzureSettings, Settings

BASE_CONFIG = """\
[azure]
openai_api_key = "test-key"
openai_endpoint = "https://example.openai.azure.com/"
model = "gpt-4"
max_tokens = 512
temperature = 0.7
"""


@pytest.fixture
def settings():
    """Return synthetic settings; nothing is read from disk."""
    return Settings(
        azure=AzureSettings(
            openai_api_key="test-key",
            openai_endpoint="https://example.openai.azure.com/",
            model="gpt-4",
            max_tokens=512,
            temperature=0.7,
        )
    )


@pytest.fixture
def output():
    """Buffer that captures everything written to the test console."""
    return io.StringIO()


@pytest.fixture
def console(output):
    """Return a plain (no color) console writing into ``output``."""
    return Console(file=output, force_terminal=False, color_system=None, width=120)


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Write the base settings file and return its path."""
    path = tmp_path / "default.toml"
    path.write_text(BASE_CONFIG)
    return path


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Strip APP_* variables and run from an empty directory (no stray .env)."""
    for name in list(os.environ):
        if name.upper().startswith("APP_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(scope="session")
def api_keys():
    """Return credentials for integration tests from the environment."""
    return {
        "azure_key": os.getenv("APP_AZURE__OPENAI_API_KEY"),
        "azure_endpoint": os.getenv("APP_AZURE__OPENAI_ENDPOINT"),
        "azure_model": os.getenv("APP_AZURE__MODEL", "gpt-4"),
    }
