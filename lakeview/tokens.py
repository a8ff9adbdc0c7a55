"""
Download token generation for Lakeview SDK.

Shareable object links carry a short-lived token instead of credentials.
The default generator issues an HS256 JSON Web Token signed with the
secret access key.
"""

import time
from abc import ABC, abstractmethod
from typing import Any

import jwt

from lakeview.credentials import Credentials

ALGORITHM = "HS256"


class TokenGenerator(ABC):
    """Abstract base class for download token generators."""

    @abstractmethod
    def generate(self, credentials: Credentials, path: str) -> str:
        """Return a token granting download access to ``path``."""
        pass


class HmacTokenGenerator(TokenGenerator):
    """HS256 JWT generator keyed by the secret access key."""

    DEFAULT_TTL = 3600

    def __init__(self, ttl_seconds: int = DEFAULT_TTL) -> None:
        """
        Initialize the generator.

        Args:
            ttl_seconds: Token lifetime in seconds
        """
        self.ttl_seconds = ttl_seconds

    def generate(self, credentials: Credentials, path: str) -> str:
        """
        Issue a token for one object path.

        Args:
            credentials: Key pair of the user sharing the link
            path: Object path the token is scoped to

        Returns:
            Compact JWT string
        """
        issued_at = int(time.time())
        claims = {
            "sub": credentials.access_key_id,
            "path": path,
            "iat": issued_at,
            "exp": issued_at + self.ttl_seconds,
        }
        return jwt.encode(claims, credentials.secret_access_key, algorithm=ALGORITHM)

    def verify(self, token: str, secret: str) -> dict[str, Any]:
        """
        Check a token and return its claims.

        Only HS256 is accepted and expired tokens are rejected.

        Raises:
            ValueError: If the token is malformed, expired, signed with
                another algorithm or carries a wrong signature
        """
        try:
            return jwt.decode(token, secret, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError as e:
            raise ValueError("token expired") from e
        except jwt.InvalidSignatureError as e:
            raise ValueError("invalid token signature") from e
        except jwt.InvalidAlgorithmError as e:
            raise ValueError("token algorithm not allowed") from e
        except jwt.DecodeError as e:
            raise ValueError("malformed token") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"invalid token: {e}") from e
