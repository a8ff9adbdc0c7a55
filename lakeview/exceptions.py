"""Lakeview SDK exception classes."""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of API failure kinds."""

    NOT_FOUND = "not_found"
    GENERIC = "generic"
    AUTH = "auth"


class LakeviewError(Exception):
    """Base exception for all Lakeview SDK errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(LakeviewError):
    """Raised when SDK configuration is invalid or missing."""

    pass


class ApiError(LakeviewError):
    """
    Raised when the API answers with an unexpected status.

    Every API failure carries a ``kind`` so callers can branch on it
    exhaustively instead of inspecting exception types.
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"message={self.message!r}, status_code={self.status_code!r})"
        )


class NotFoundError(ApiError):
    """Raised when a resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        message: str,
        resource_id: str | None = None,
        status_code: int | None = 404,
    ) -> None:
        super().__init__(message, status_code)
        self.resource_id = resource_id


class AuthenticationError(ApiError):
    """Raised when login fails."""

    kind = ErrorKind.AUTH
