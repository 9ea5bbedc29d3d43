"""Unit tests for the configuration module."""
import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from streamchat.config import (
    ConfigError,
    MissingCredentialsError,
    Settings,
    load,
    require_credentials,
)
from streamchat.config.loader import env_overrides, merge


class TestLoad:
    """Tests for loading the base file."""

    def test_load_base_file(self, config_file):
        """Test that file values populate Settings when nothing overrides them."""
        settings = load(config_file, environ={})

        assert settings.azure.openai_api_key == "test-key"
        assert settings.azure.openai_endpoint == "https://example.openai.azure.com/"
        assert settings.azure.model == "gpt-4"
        assert settings.azure.max_tokens == 512
        assert settings.azure.temperature == pytest.approx(0.7)

    def test_defaults_for_optional_fields(self, config_file):
        settings = load(config_file, environ={})

        assert settings.azure.api_version == "2023-05-15"
        assert settings.azure.provider == "azure"
        assert settings.azure.system_prompt == "You are a helpful assistant."

    def test_path_without_suffix(self, tmp_path, config_file):
        """Test that 'config/default' finds 'config/default.toml'."""
        settings = load(tmp_path / "default", environ={})
        assert settings.azure.model == "gpt-4"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load(tmp_path / "nope.toml", environ={})

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("[azure\nmodel = ")

        with pytest.raises(ConfigError, match="malformed"):
            load(path, environ={})

    def test_missing_required_field(self, tmp_path):
        path = tmp_path / "partial.toml"
        path.write_text('[azure]\nopenai_api_key = "k"\nopenai_endpoint = "e"\n')

        with pytest.raises(ConfigError, match="invalid configuration"):
            load(path, environ={})

    def test_wrong_type_in_file(self, tmp_path, config_file):
        text = config_file.read_text().replace("max_tokens = 512", 'max_tokens = "lots"')
        config_file.write_text(text)

        with pytest.raises(ConfigError):
            load(config_file, environ={})

    def test_settings_are_immutable(self, config_file):
        settings = load(config_file, environ={})

        with pytest.raises(ValidationError):
            settings.azure.model = "other"  # type: ignore[misc]


class TestEnvironmentOverrides:
    """Tests for APP_* overrides layered on the base file."""

    def test_environment_wins_over_file(self, config_file):
        """Test that APP_AZURE__MODEL overrides model from the file."""
        settings = load(config_file, environ={"APP_AZURE__MODEL": "gpt-4-turbo"})
        assert settings.azure.model == "gpt-4-turbo"

    def test_override_is_case_insensitive(self, config_file):
        settings = load(config_file, environ={"app_azure__model": "gpt-4-turbo"})
        assert settings.azure.model == "gpt-4-turbo"

    def test_other_keys_survive_override(self, config_file):
        settings = load(config_file, environ={"APP_AZURE__MODEL": "gpt-4-turbo"})

        assert settings.azure.openai_api_key == "test-key"
        assert settings.azure.max_tokens == 512

    def test_string_values_are_coerced(self, config_file):
        settings = load(
            config_file,
            environ={"APP_AZURE__MAX_TOKENS": "256", "APP_AZURE__TEMPERATURE": "1.5"},
        )

        assert settings.azure.max_tokens == 256
        assert settings.azure.temperature == pytest.approx(1.5)

    def test_uncoercible_override_fails(self, config_file):
        with pytest.raises(ConfigError):
            load(config_file, environ={"APP_AZURE__MAX_TOKENS": "many"})

    def test_out_of_range_temperature_fails(self, config_file):
        with pytest.raises(ConfigError):
            load(config_file, environ={"APP_AZURE__TEMPERATURE": "3.5"})

    def test_unrelated_variables_ignored(self, config_file):
        settings = load(
            config_file,
            environ={"AZURE__MODEL": "x", "APPLE": "y", "APP_": "z", "PATH": "/bin"},
        )
        assert settings.azure.model == "gpt-4"

    def test_env_overrides_builds_nested_keys(self):
        overrides = env_overrides({
            "APP_AZURE__MODEL": "m",
            "APP_AZURE__OPENAI_API_KEY": "k",
            "APP_DEBUG": "1",
            "HOME": "/root",
        })

        assert overrides == {"azure": {"model": "m", "openai_api_key": "k"}, "debug": "1"}

    def test_merge_keeps_nested_siblings(self):
        base = {"azure": {"model": "gpt-4", "max_tokens": 100}}
        merged = merge(base, {"azure": {"model": "gpt-4-turbo"}})

        assert merged == {"azure": {"model": "gpt-4-turbo", "max_tokens": 100}}
        assert base["azure"]["model"] == "gpt-4"

    @given(
        st.dictionaries(st.text(min_size=1), st.text()),
        st.dictionaries(st.text(min_size=1), st.text()),
    )
    def test_merge_override_wins(self, base: dict, override: dict):
        """Property test: every override key ends up with the override value."""
        merged = merge(base, override)

        assert set(merged) == set(base) | set(override)
        for key, value in override.items():
            assert merged[key] == value
        for key in set(base) - set(override):
            assert merged[key] == base[key]


class TestRequireCredentials:
    """Tests for the post-load credential check."""

    def test_complete_settings_pass(self, settings):
        assert require_credentials(settings) is settings

    @pytest.mark.parametrize(
        "field,value",
        [
            ("openai_api_key", ""),
            ("openai_api_key", "   "),
            ("openai_endpoint", ""),
            ("openai_endpoint", "\t"),
        ],
    )
    def test_blank_credentials_fail(self, settings, field, value):
        broken = Settings(azure=settings.azure.model_copy(update={field: value}))

        with pytest.raises(MissingCredentialsError):
            require_credentials(broken)

    def test_missing_credentials_is_distinct_from_config_error(self):
        assert not issubclass(MissingCredentialsError, ConfigError)

    def test_blank_key_from_file(self, config_file):
        text = config_file.read_text().replace('"test-key"', '""')
        config_file.write_text(text)

        settings = load(config_file, environ={})
        with pytest.raises(MissingCredentialsError):
            require_credentials(settings)

    def test_key_supplied_by_environment(self, config_file):
        text = config_file.read_text().replace('"test-key"', '""')
        config_file.write_text(text)

        settings = load(config_file, environ={"APP_AZURE__OPENAI_API_KEY": "from-env"})
        assert require_credentials(settings).azure.openai_api_key == "from-env"
