"""
Credential providers for Lakeview SDK.

The transport never stores credentials itself; it asks the provider it was
constructed with for the current pair on every request.
"""

import base64
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    """An access key pair."""

    access_key_id: str
    secret_access_key: str

    def __repr__(self) -> str:
        return f"Credentials(access_key_id={self.access_key_id!r}, secret_access_key='***')"


def basic_auth_header(credentials: Credentials) -> dict[str, str]:
    """
    Build the HTTP Basic ``Authorization`` header for a key pair.

    Args:
        credentials: The access key pair

    Returns:
        Single-entry header mapping
    """
    token = f"{credentials.access_key_id}:{credentials.secret_access_key}"
    encoded = base64.b64encode(token.encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {encoded}"}


class CredentialProvider(ABC):
    """Abstract source of credentials."""

    @abstractmethod
    def get_credentials(self) -> Credentials | None:
        """Return the current credentials, or None when none are known."""
        pass


class StaticCredentials(CredentialProvider):
    """Always returns the same key pair."""

    def __init__(self, credentials: Credentials) -> None:
        self._credentials = credentials

    def get_credentials(self) -> Credentials | None:
        return self._credentials


class SessionCredentials(CredentialProvider):
    """
    Session-scoped credential cache.

    Starts empty (or seeded) and is filled by a successful login. A single
    writer is assumed; readers only ever see a whole ``Credentials`` value.
    """

    def __init__(self, credentials: Credentials | None = None) -> None:
        self._credentials = credentials

    def get_credentials(self) -> Credentials | None:
        return self._credentials

    def store(self, credentials: Credentials) -> None:
        """Cache credentials for subsequent requests."""
        self._credentials = credentials

    def clear(self) -> None:
        """Forget the cached credentials (logout)."""
        self._credentials = None


class EnvCredentials(CredentialProvider):
    """Reads the key pair from environment variables on every call."""

    def __init__(
        self,
        access_key_var: str = "LAKEVIEW_ACCESS_KEY_ID",
        secret_key_var: str = "LAKEVIEW_SECRET_ACCESS_KEY",
    ) -> None:
        self.access_key_var = access_key_var
        self.secret_key_var = secret_key_var

    def get_credentials(self) -> Credentials | None:
        access_key_id = os.environ.get(self.access_key_var)
        secret_access_key = os.environ.get(self.secret_key_var)
        if not access_key_id or not secret_access_key:
            return None
        return Credentials(access_key_id, secret_access_key)


def as_provider(
    credentials: "CredentialProvider | Credentials | None",
) -> CredentialProvider:
    """Normalize the ``credentials`` argument accepted by the clients."""
    if credentials is None:
        return SessionCredentials()
    if isinstance(credentials, Credentials):
        return StaticCredentials(credentials)
    return credentials
