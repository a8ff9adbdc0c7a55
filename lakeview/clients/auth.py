"""Authentication client."""

from typing import TYPE_CHECKING, Any

import httpx

from lakeview.credentials import Credentials, SessionCredentials
from lakeview.exceptions import AuthenticationError
from lakeview.logging import get_logger
from lakeview.types.auth import Session, User

if TYPE_CHECKING:
    from lakeview.transport import HTTPTransport

logger = get_logger("auth")


def parse_login_response(response: httpx.Response, credentials: Credentials) -> Session:
    """
    Map a login response to a Session.

    Raises:
        AuthenticationError: "invalid credentials" on 401, a distinct
            message for any other non-200 status
    """
    if response.status_code == 401:
        raise AuthenticationError("invalid credentials", status_code=401)
    if response.status_code != 200:
        raise AuthenticationError(
            "unknown authentication error", status_code=response.status_code
        )
    data: dict[str, Any] = response.json()
    return Session(credentials=credentials, user=User.from_dict(data.get("user") or {}))


class AuthClient:
    """Client for logging in with an access key pair."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def login(self, access_key_id: str, secret_access_key: str) -> Session:
        """
        Verify a key pair against the server.

        The pair is sent explicitly, whatever the client's credential
        provider holds. When that provider is a session cache it is filled
        on success.

        Args:
            access_key_id: Access key id
            secret_access_key: Secret access key

        Returns:
            Session with the credentials and the user they belong to

        Raises:
            AuthenticationError: If the server rejects the login
        """
        credentials = Credentials(access_key_id, secret_access_key)
        response = self.transport.execute("GET", "/authentication", credentials=credentials)
        session = parse_login_response(response, credentials)

        if isinstance(self.transport.credentials, SessionCredentials):
            self.transport.credentials.store(credentials)
        logger.info("logged in as %s", session.user.id or access_key_id)
        return session
