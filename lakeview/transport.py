"""
HTTP Transport for Lakeview SDK.

Handles authenticated HTTP communication with the API and classification
of error responses. Every call is a single attempt: nothing is retried.
"""

import time
from typing import Any
from urllib.parse import quote

import httpx

from lakeview.credentials import CredentialProvider, Credentials, basic_auth_header
from lakeview.exceptions import ApiError, ConfigurationError, NotFoundError
from lakeview.logging import log_http_request, log_http_response
from lakeview.query import Query

API_PREFIX = "/api/v1"

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def path_segment(value: str) -> str:
    """Quote a resource identifier for use as a single path segment."""
    return quote(str(value), safe="")


def merge_headers(*layers: dict[str, str] | None) -> dict[str, str]:
    """
    Merge header mappings, later layers taking precedence.

    Names are compared case-insensitively. A header whose final value is
    the empty string is dropped, which lets callers suppress a default.

    Args:
        layers: Header mappings in increasing precedence

    Returns:
        Merged headers
    """
    merged: dict[str, tuple[str, str]] = {}
    for layer in layers:
        if not layer:
            continue
        for name, value in layer.items():
            merged[name.lower()] = (name, value)
    return {name: value for name, value in merged.values() if value != ""}


def extract_message(response: httpx.Response) -> str:
    """
    Produce a human-readable message from an error response.

    JSON bodies yield their ``message`` field; anything else is returned as
    raw text. A body that claims to be JSON but is malformed raises the
    decode error.

    Args:
        response: HTTP response with an unexpected status

    Returns:
        Error message
    """
    content_type = response.headers.get("Content-Type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        data = response.json()
        if isinstance(data, dict):
            message = data.get("message")
            return "" if message is None else str(message)
        return str(data)
    return response.text


def expect_status(
    response: httpx.Response,
    expected: int,
    *,
    context: str | None = None,
    not_found: str | None = None,
    resource_id: str | None = None,
) -> httpx.Response:
    """
    Check a response status, raising a typed error on mismatch.

    Args:
        response: HTTP response to check
        expected: The single success status for this operation
        context: Prefix prepended to the classified message
        not_found: Message for a 404; when None a 404 is a generic error
        resource_id: Identifier carried by the NotFoundError

    Returns:
        The response, unchanged

    Raises:
        NotFoundError: On 404 when ``not_found`` is given
        ApiError: On any other unexpected status
    """
    status_code = response.status_code
    if status_code == expected:
        return response

    if status_code == 404 and not_found is not None:
        raise NotFoundError(not_found, resource_id=resource_id, status_code=404)

    message = extract_message(response)
    if context:
        message = f"{context}: {message}"
    raise ApiError(message, status_code=status_code)


class HTTPTransport:
    """
    HTTP transport layer with credential injection.

    Handles:
    - URL construction under the fixed API prefix
    - Basic auth from explicit or provider-supplied credentials
    - Header merging (auth < defaults < caller headers)
    - Request/response debug logging with credentials masked
    """

    def __init__(
        self,
        base_url: str,
        credentials: CredentialProvider,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Server URL (e.g., "http://localhost:8000")
            credentials: Provider consulted on every request
            timeout: Request timeout in seconds (None waits indefinitely)
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}{API_PREFIX}"
        self.credentials = credentials
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.api_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def resolve_credentials(self, explicit: Credentials | None = None) -> Credentials:
        """
        Pick the credentials for one request.

        Raises:
            ConfigurationError: If neither explicit nor cached credentials exist
        """
        if explicit is not None:
            return explicit
        cached = self.credentials.get_credentials()
        if cached is None:
            raise ConfigurationError("no credentials available: log in first")
        return cached

    def build_headers(
        self,
        headers: dict[str, str] | None = None,
        credentials: Credentials | None = None,
    ) -> dict[str, str]:
        """Compute the final request headers."""
        auth = basic_auth_header(self.resolve_credentials(credentials))
        return merge_headers(auth, DEFAULT_HEADERS, headers)

    def url_for(self, path: str, query: Query | None = None) -> str:
        """Absolute URL for an API path, with its query string."""
        url = f"{self.api_url}{path}"
        if query is not None:
            encoded = query.encode()
            if encoded:
                url = f"{url}?{encoded}"
        return url

    def execute(
        self,
        method: str,
        path: str,
        *,
        query: Query | None = None,
        json: Any = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
        credentials: Credentials | None = None,
    ) -> httpx.Response:
        """
        Send one authenticated request.

        Args:
            method: HTTP method
            path: API path below the prefix (e.g., "/repositories")
            query: Typed query parameters
            json: JSON-serializable request body
            files: Multipart files mapping
            headers: Caller headers; an empty value removes a default
            credentials: Explicit credentials overriding the provider

        Returns:
            The raw response; status codes are not interpreted

        Raises:
            ConfigurationError: If no credentials are available
            httpx.RequestError: On transport failure
        """
        request_headers = self.build_headers(headers, credentials)
        params = query.to_params() if query is not None else None

        log_http_request(
            method,
            self.url_for(path, query),
            headers=request_headers,
            body=json if isinstance(json, dict) else None,
        )
        started = time.perf_counter()

        response = self._client.request(
            method,
            path,
            params=params,
            json=json,
            files=files,
            headers=request_headers,
        )

        log_http_response(
            response.status_code,
            str(response.request.url),
            elapsed_ms=(time.perf_counter() - started) * 1000,
        )
        return response
