"""Tests for the top-level Client."""

import pytest

from igdb import Client, ClientConfig, ConfigurationError, NoResultsError, Status, UsageReport
from mock_api import as_body, mock_client, mock_http

STATUS_BODY = as_body([
    {
        "authorized": True,
        "plan": "Free",
        "usage_reports": {
            "metric": "requests",
            "period": "month",
            "period_start": "2026-10-01",
            "period_end": "2026-10-31",
            "max_value": 10000,
            "current_value": 421,
        },
    }
])


def test_status() -> None:
    client, handler = mock_client(STATUS_BODY)
    status = client.status()

    assert isinstance(status, Status)
    assert status.authorized is True
    assert status.plan == "Free"
    assert isinstance(status.usage_reports, UsageReport)
    assert status.usage_reports.current_value == 421

    assert handler.last.url.path == "/v4/api_status"
    assert "fields" not in handler.last.url.params


def test_status_no_results() -> None:
    client, _ = mock_client("[]")
    with pytest.raises(NoResultsError) as exc_info:
        client.status()
    assert str(exc_info.value) == "cannot get API status: igdb: no results"


def test_from_config() -> None:
    http, handler = mock_http(as_body([{"id": 1}]))
    config = ClientConfig(client_id="abc", access_token="xyz", base_url="https://proxy.example.com/igdb/")

    client = Client.from_config(config, http=http)
    client.genres.get(1)

    assert str(handler.last.url).startswith("https://proxy.example.com/igdb/genres/")
    assert handler.last.headers["Client-ID"] == "abc"
    assert handler.last.headers["Authorization"] == "Bearer xyz"


def test_from_config_invalid() -> None:
    config = ClientConfig(client_id="", access_token="xyz", timeout=-1)
    with pytest.raises(ConfigurationError) as exc_info:
        Client.from_config(config)

    assert "client_id cannot be empty" in exc_info.value.errors
    assert "timeout must be a positive number" in exc_info.value.errors


def test_context_manager_closes_owned_client() -> None:
    with Client("id", "token") as client:
        pass
    assert client.http._client.is_closed
