"""Configuration data models."""

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.igdb.com/v4/"
DEFAULT_USER_AGENT = "igdb-client/1.0"


@dataclass(frozen=True)
class ClientConfig:
    """Client configuration settings."""
    client_id: str
    access_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0  # seconds
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"
