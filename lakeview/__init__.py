"""Lakeview SDK - Python client for version-controlled object storage."""

from lakeview.async_client import AsyncLakeviewClient
from lakeview.client import LakeviewClient
from lakeview.credentials import (
    CredentialProvider,
    Credentials,
    EnvCredentials,
    SessionCredentials,
    StaticCredentials,
)
from lakeview.exceptions import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    ErrorKind,
    LakeviewError,
    NotFoundError,
)
from lakeview.logging import configure_logging, get_logger
from lakeview.prefix import FILTER_WINDOW, merge_prefix_page
from lakeview.tokens import HmacTokenGenerator, TokenGenerator
from lakeview.transport import HTTPTransport, extract_message

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "LakeviewClient",
    "AsyncLakeviewClient",
    # Credentials
    "Credentials",
    "CredentialProvider",
    "StaticCredentials",
    "SessionCredentials",
    "EnvCredentials",
    # Exceptions
    "LakeviewError",
    "ApiError",
    "ErrorKind",
    "NotFoundError",
    "AuthenticationError",
    "ConfigurationError",
    # Prefix search
    "FILTER_WINDOW",
    "merge_prefix_page",
    # Download tokens
    "TokenGenerator",
    "HmacTokenGenerator",
    # Transport
    "HTTPTransport",
    "extract_message",
    # Logging
    "configure_logging",
    "get_logger",
]
