"""
Async HTTP Transport for Lakeview SDK.

Same request construction as the sync transport, using the httpx async
client.
"""

import time
from typing import Any

import httpx

from lakeview.credentials import CredentialProvider, Credentials, basic_auth_header
from lakeview.exceptions import ConfigurationError
from lakeview.logging import log_http_request, log_http_response
from lakeview.query import Query
from lakeview.transport import API_PREFIX, DEFAULT_HEADERS, merge_headers


class AsyncHTTPTransport:
    """
    Async HTTP transport layer with credential injection.

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
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Server URL (e.g., "http://localhost:8000")
            credentials: Provider consulted on every request
            timeout: Request timeout in seconds (None waits indefinitely)
            transport: Optional httpx async transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}{API_PREFIX}"
        self.credentials = credentials
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            base_url=self.api_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

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

    async def execute(
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

        response = await self._client.request(
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
