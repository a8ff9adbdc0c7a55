"""Async authentication client."""

from typing import TYPE_CHECKING

from lakeview.clients.auth import parse_login_response
from lakeview.credentials import Credentials, SessionCredentials
from lakeview.logging import get_logger
from lakeview.types.auth import Session

if TYPE_CHECKING:
    from lakeview.async_transport import AsyncHTTPTransport

logger = get_logger("auth")


class AsyncAuthClient:
    """Async client for logging in with an access key pair."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def login(self, access_key_id: str, secret_access_key: str) -> Session:
        """
        Verify a key pair against the server.

        Raises:
            AuthenticationError: If the server rejects the login
        """
        credentials = Credentials(access_key_id, secret_access_key)
        response = await self.transport.execute(
            "GET", "/authentication", credentials=credentials
        )
        session = parse_login_response(response, credentials)

        if isinstance(self.transport.credentials, SessionCredentials):
            self.transport.credentials.store(credentials)
        logger.info("logged in as %s", session.user.id or access_key_id)
        return session
