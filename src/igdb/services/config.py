"""Configuration service for client credentials and connection settings."""

import json
import os
from dataclasses import asdict, replace
from pathlib import Path

import structlog

from ..models.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ClientConfig
from .errors import ConfigurationError

log = structlog.stdlib.get_logger()

# Environment variables that override values read from the file.
ENV_OVERRIDES = {
    "IGDB_CLIENT_ID": "client_id",
    "IGDB_ACCESS_TOKEN": "access_token",
    "IGDB_BASE_URL": "base_url",
}

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ValidationResult:
    """Result of configuration validation."""

    def __init__(self, is_valid: bool, errors: list[str] | None = None) -> None:
        self.is_valid: bool = is_valid
        self.errors: list[str] = errors or []


class ConfigurationService:
    """Loads, validates and saves ``ClientConfig`` as a JSON file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path: Path = config_path or Path.home() / ".config" / "igdb" / "config.json"
        log.debug("Configuration service initialized", config_path=str(self.config_path))

    def load_config(self) -> ClientConfig:
        """Load configuration from the file, then apply environment overrides.

        A missing file is not an error when the environment supplies the
        credentials.

        Raises:
            ConfigurationError: If the file cannot be parsed or the resulting
                configuration is invalid
        """
        data: dict[str, str | int | float] = {}
        if self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                log.error("Failed to read configuration", config_path=str(self.config_path), error=str(e))
                raise ConfigurationError(f"cannot read {self.config_path}", errors=[str(e)]) from e
            if not isinstance(data, dict):
                raise ConfigurationError(f"cannot read {self.config_path}", errors=["expected a JSON object"])
        else:
            log.info("Configuration file not found, using environment", config_path=str(self.config_path))

        config = self.apply_env_overrides(self._dict_to_config(data))
        result = self.validate_config(config)
        if not result.is_valid:
            log.warning("Invalid configuration", errors=result.errors)
            raise ConfigurationError(errors=result.errors)

        log.info("Configuration loaded successfully", base_url=config.base_url)
        return config

    def save_config(self, config: ClientConfig) -> None:
        """Save configuration to the file.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        result = self.validate_config(config)
        if not result.is_valid:
            raise ConfigurationError(errors=result.errors)

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(asdict(config), f, indent=2, ensure_ascii=False)
            log.info("Configuration saved successfully", config_path=str(self.config_path))
        except OSError as e:
            log.error("Failed to save configuration", error=str(e))
            raise

    def validate_config(self, config: ClientConfig) -> ValidationResult:
        """Validate configuration settings."""
        errors = []

        if not config.client_id or not config.client_id.strip():
            errors.append("client_id cannot be empty")
        if not config.access_token or not config.access_token.strip():
            errors.append("access_token cannot be empty")

        if not config.base_url.startswith(("http://", "https://")):
            errors.append("base_url must be an http or https URL")

        if not isinstance(config.timeout, (int, float)) or config.timeout <= 0:
            errors.append("timeout must be a positive number")

        if config.log_level not in VALID_LOG_LEVELS:
            errors.append(f"log_level must be one of: {', '.join(VALID_LOG_LEVELS)}")

        return ValidationResult(len(errors) == 0, errors)

    def apply_env_overrides(self, config: ClientConfig) -> ClientConfig:
        """Return ``config`` with values taken from set environment variables."""
        overrides = {attr: os.environ[var] for var, attr in ENV_OVERRIDES.items() if os.environ.get(var)}
        if overrides:
            log.debug("Applying environment overrides", keys=sorted(overrides))
        return replace(config, **overrides)

    def _dict_to_config(self, data: dict[str, str | int | float]) -> ClientConfig:
        timeout_raw = data.get("timeout", 30.0)
        return ClientConfig(
            client_id=str(data.get("client_id", "")),
            access_token=str(data.get("access_token", "")),
            base_url=str(data.get("base_url", DEFAULT_BASE_URL)),
            timeout=float(timeout_raw) if isinstance(timeout_raw, (int, float)) else 30.0,
            user_agent=str(data.get("user_agent", DEFAULT_USER_AGENT)),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )
