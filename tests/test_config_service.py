"""Property-based tests for the configuration service."""

import json
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from hypothesis import given, strategies as st

from igdb import ClientConfig, ConfigurationError, ConfigurationService
from igdb.services.config import ENV_OVERRIDES

# Blank values count as unset, so this hides any real credentials.
NO_ENV = {var: "" for var in ENV_OVERRIDES}

credentials = st.text(
    alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd")),
    min_size=1,
    max_size=40,
)
valid_base_urls = st.sampled_from([
    "https://api.igdb.com/v4/",
    "https://proxy.example.com/igdb/",
    "http://localhost:8080/v4/",
])
valid_timeouts = st.floats(min_value=0.1, max_value=300.0, allow_nan=False, allow_infinity=False)
valid_log_levels = st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])

valid_config_strategy = st.builds(
    ClientConfig,
    client_id=credentials,
    access_token=credentials,
    base_url=valid_base_urls,
    timeout=valid_timeouts,
    log_level=valid_log_levels,
)


@given(valid_config_strategy)
def test_configuration_round_trip(config: ClientConfig) -> None:
    """**Property: configuration persistence round-trip**

    For any valid configuration, saving it and then reloading should preserve
    all values.
    """
    with tempfile.TemporaryDirectory() as temp_dir, patch.dict(os.environ, NO_ENV):
        service = ConfigurationService(Path(temp_dir) / "config.json")

        service.save_config(config)
        loaded = service.load_config()

        assert loaded == config


def test_configuration_round_trip_example() -> None:
    """Unit test example for configuration round-trip."""
    config = ClientConfig(client_id="abc123", access_token="tok456", timeout=10.0, log_level="DEBUG")

    with tempfile.TemporaryDirectory() as temp_dir, patch.dict(os.environ, NO_ENV):
        config_path = Path(temp_dir) / "nested" / "config.json"
        service = ConfigurationService(config_path)

        service.save_config(config)
        assert json.loads(config_path.read_text(encoding="utf-8"))["client_id"] == "abc123"

        loaded = service.load_config()
        assert loaded.client_id == "abc123"
        assert loaded.access_token == "tok456"
        assert loaded.timeout == 10.0
        assert loaded.log_level == "DEBUG"


invalid_config_strategy = st.one_of(
    st.builds(ClientConfig, client_id=st.sampled_from(["", "   "]), access_token=credentials),
    st.builds(ClientConfig, client_id=credentials, access_token=st.sampled_from(["", "   "])),
    st.builds(
        ClientConfig,
        client_id=credentials,
        access_token=credentials,
        base_url=st.sampled_from(["", "api.igdb.com/v4/", "ftp://api.igdb.com/"]),
    ),
    st.builds(ClientConfig, client_id=credentials, access_token=credentials, timeout=st.floats(max_value=0.0)),
    st.builds(
        ClientConfig,
        client_id=credentials,
        access_token=credentials,
        log_level=st.sampled_from(["TRACE", "info", "VERBOSE"]),
    ),
)


@given(invalid_config_strategy)
def test_invalid_configuration_rejected(config: ClientConfig) -> None:
    """**Property: invalid configurations are rejected with a reason**

    For any configuration with a blank credential, a non-HTTP base URL, a
    non-positive timeout or an unknown log level, validation fails and saving
    raises without writing a file.
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        config_path = Path(temp_dir) / "config.json"
        service = ConfigurationService(config_path)

        result = service.validate_config(config)
        assert not result.is_valid
        assert result.errors

        with pytest.raises(ConfigurationError):
            service.save_config(config)
        assert not config_path.exists()


def test_environment_overrides_file() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        config_path = Path(temp_dir) / "config.json"
        config_path.write_text(json.dumps({"client_id": "file-id", "access_token": "file-token"}), encoding="utf-8")

        env = {**NO_ENV, "IGDB_ACCESS_TOKEN": "env-token", "IGDB_BASE_URL": "https://proxy.example.com/"}
        with patch.dict(os.environ, env):
            config = ConfigurationService(config_path).load_config()

    assert config.client_id == "file-id"
    assert config.access_token == "env-token"
    assert config.base_url == "https://proxy.example.com/"


def test_missing_file_uses_environment() -> None:
    with tempfile.TemporaryDirectory() as temp_dir:
        env = {**NO_ENV, "IGDB_CLIENT_ID": "env-id", "IGDB_ACCESS_TOKEN": "env-token"}
        with patch.dict(os.environ, env):
            config = ConfigurationService(Path(temp_dir) / "absent.json").load_config()

    assert config.client_id == "env-id"
    assert config.base_url == "https://api.igdb.com/v4/"
    assert config.timeout == 30.0


def test_missing_credentials_rejected() -> None:
    with tempfile.TemporaryDirectory() as temp_dir, patch.dict(os.environ, NO_ENV):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationService(Path(temp_dir) / "absent.json").load_config()

    assert "client_id cannot be empty" in exc_info.value.errors
    assert "access_token cannot be empty" in exc_info.value.errors


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_unreadable_file_rejected(content: str) -> None:
    with tempfile.TemporaryDirectory() as temp_dir, patch.dict(os.environ, NO_ENV):
        config_path = Path(temp_dir) / "config.json"
        config_path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigurationService(config_path).load_config()


def test_default_path() -> None:
    service = ConfigurationService()
    assert service.config_path == Path.home() / ".config" / "igdb" / "config.json"
