"""HTTP transport for the IGDB API."""

import json
from typing import Any, TypeVar

import httpx
import structlog

from ..models.base import Count, Model
from ..models.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT
from .endpoints import Endpoint
from .errors import APIError, MalformedResponseError, NoResultsError, convert_http_error
from .options import Option, _is_int, encode_url, new_options

log = structlog.stdlib.get_logger()

T = TypeVar("T", bound=Model)


class HttpClientService:
    """Issues one request per call and decodes the JSON response.

    Nothing is retried. Timeouts are those of the underlying httpx client.
    """

    def __init__(
        self,
        client_id: str,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        http: httpx.Client | None = None,
    ) -> None:
        """Initialize the HTTP client service.

        Args:
            client_id: Twitch application Client-ID
            access_token: App access token sent as a Bearer token
            base_url: Root URL of the API, ending with a slash
            timeout: Request timeout in seconds (ignored when ``http`` is given)
            user_agent: User-Agent header value
            http: Optional preconfigured httpx client, owned by the caller
        """
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self._headers = {
            "Client-ID": client_id,
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
            "User-Agent": user_agent,
        }

        self._owns_client = http is None
        self._client = http or httpx.Client(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
        )

        log.debug(
            "HTTP client service initialized",
            base_url=self.base_url,
            timeout=timeout,
            external_client=not self._owns_client,
        )

    def get(self, endpoint: Endpoint | str, model: type[T], *opts: Option) -> list[T]:
        """GET ``endpoint`` with the options encoded in the query string.

        Raises:
            ValidationError: If any option is invalid; nothing is sent
            NoResultsError: If the response is an empty array
            MalformedResponseError: If the body is empty or not JSON
            NetworkError: If the request fails or the API returns an error
        """
        options = new_options(*opts)
        url = encode_url(options, self._url(endpoint))
        request = self._client.build_request("GET", url, headers=self._headers)
        return self._decode_list(self.send(request), model)

    def post(self, endpoint: Endpoint | str, model: type[T], *opts: Option) -> list[T]:
        """POST ``endpoint`` with the options as a form-encoded body."""
        options = new_options(*opts)
        headers = {**self._headers, "Content-Type": "application/x-www-form-urlencoded"}
        request = self._client.build_request(
            "POST",
            self._url(endpoint),
            headers=headers,
            content=options.encode().encode("utf-8"),
        )
        return self._decode_list(self.send(request), model)

    def get_count(self, endpoint: Endpoint, *opts: Option) -> int:
        """Return the number of objects at ``endpoint`` matching the options."""
        options = new_options(*opts)
        url = encode_url(options, self._url(endpoint.count_path))
        request = self._client.build_request("GET", url, headers=self._headers)

        payload = self._decode(self.send(request))
        if isinstance(payload, list) and not payload:
            raise NoResultsError()
        if not isinstance(payload, dict):
            raise MalformedResponseError(technical_details=f"unexpected count payload: {payload!r}"[:200])
        count = Count.from_dict(payload).count
        if not _is_int(count):
            raise MalformedResponseError(technical_details=f"unexpected count value: {count!r}"[:200])
        return count

    def get_fields(self, endpoint: Endpoint) -> list[str]:
        """Return the field names of the object served at ``endpoint``.

        An empty array means the object has no fields and is not an error.
        """
        request = self._client.build_request("GET", self._url(endpoint.meta_path), headers=self._headers)

        payload = self._decode(self.send(request))
        if not isinstance(payload, list):
            raise MalformedResponseError(technical_details=f"unexpected meta payload: {payload!r}"[:200])
        return [str(f) for f in payload]

    def send(self, request: httpx.Request) -> bytes:
        """Send ``request`` once and return the response body.

        Raises:
            NetworkError: If the request could not be completed
            APIError: If the API answered with a non-200 status
        """
        url = str(request.url)
        log.debug("Making HTTP request", method=request.method, url=url)

        try:
            response = self._client.send(request)
        except httpx.HTTPError as e:
            log.warning(
                "HTTP request failed",
                method=request.method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise convert_http_error(e, url=url) from e

        if response.status_code != httpx.codes.OK:
            detail = _error_detail(response.content)
            log.warning(
                "API returned an error",
                method=request.method,
                url=url,
                status_code=response.status_code,
                detail=detail,
            )
            raise APIError(response.status_code, detail, url=url)

        log.debug(
            "HTTP request successful",
            method=request.method,
            url=url,
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return response.content

    def close(self) -> None:
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            self._client.close()
            log.debug("HTTP client closed")

    def __enter__(self) -> "HttpClientService":
        return self

    def __exit__(self, exc_type: type[Exception] | None, exc_val: Exception | None, exc_tb: Any) -> None:
        self.close()

    def _url(self, path: str) -> str:
        return self.base_url + path

    @staticmethod
    def _decode(body: bytes) -> Any:
        if not body.strip():
            raise MalformedResponseError(technical_details="empty response body")
        try:
            return json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedResponseError(technical_details=str(e)) from e

    def _decode_list(self, body: bytes, model: type[T]) -> list[T]:
        payload = self._decode(body)
        if not isinstance(payload, list):
            raise MalformedResponseError(technical_details=f"expected a JSON array, got {type(payload).__name__}")
        if not payload:
            raise NoResultsError()
        if not all(isinstance(item, dict) for item in payload):
            raise MalformedResponseError(technical_details="expected an array of JSON objects")
        return [model.from_dict(item) for item in payload]


def _error_detail(body: bytes) -> str:
    """Extract the message of an API error body, if there is one."""
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace").strip()[:200]

    if isinstance(payload, list) and payload:
        payload = payload[0]
    if isinstance(payload, dict):
        for key in ("message", "title", "cause"):
            if payload.get(key):
                return str(payload[key])
    return ""
