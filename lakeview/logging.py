"""
Lakeview SDK logging utilities.

Provides configurable logging for HTTP requests and responses.
Ensures no credentials (Authorization headers, secret keys, download
tokens) are logged.
"""

import logging
import re
from typing import Any

# Create SDK-specific loggers
_sdk_logger = logging.getLogger("lakeview")
_http_logger = logging.getLogger("lakeview.http")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Basic auth header values
    (re.compile(r"Basic\s+[A-Za-z0-9+/=]+"), "Basic [REDACTED]"),
    # JWT-shaped download tokens
    (re.compile(r"\beyJ[A-Za-z0-9_-]*\.[A-Za-z0-9_-]*\.[A-Za-z0-9_-]*"), "[TOKEN_REDACTED]"),
    # token=... in query strings
    (re.compile(r"([?&]token=)[^&\s]+"), r"\1[REDACTED]"),
    # Secret/token patterns
    (
        re.compile(
            r"(secret_access_key|secret|token|password)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]",
            re.IGNORECASE,
        ),
        r"\1: [REDACTED]",
    ),
]

_DEFAULT_SENSITIVE_KEYS = {
    "authorization",
    "secret_access_key",
    "secret",
    "token",
    "password",
}


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure Lakeview SDK logging.

    Args:
        level: Default log level for all SDK loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from lakeview.logging import configure_logging

        # Enable debug logging for HTTP requests
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a Lakeview SDK logger.

    Args:
        name: Logger name suffix (e.g., "http"). If None, returns main SDK logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"lakeview.{name}")


def mask_sensitive_data(text: str) -> str:
    """Replace Basic auth values, download tokens and secret fields in ``text``."""
    for pattern, replacement in _SENSITIVE_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def safe_log_dict(
    data: dict[str, Any], sensitive_keys: set[str] | None = None
) -> dict[str, Any]:
    """
    Copy a header or body mapping with secret values replaced by "[REDACTED]".

    A key is secret when any of ``sensitive_keys`` occurs in it, compared
    case-insensitively. Nested mappings are masked too.
    """
    keys = _DEFAULT_SENSITIVE_KEYS if sensitive_keys is None else sensitive_keys
    masked: dict[str, Any] = {}
    for key, value in data.items():
        if any(secret in str(key).lower() for secret in keys):
            masked[key] = "[REDACTED]"
        elif isinstance(value, dict):
            masked[key] = safe_log_dict(value, keys)
        else:
            masked[key] = value
    return masked


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: dict[str, Any] | None = None,
) -> None:
    """Log an outgoing request at DEBUG with auth headers and secret fields masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    line = f"{method} {mask_sensitive_data(url)}"
    if headers:
        line += f" | headers={safe_log_dict(headers)}"
    if body:
        line += f" | body={safe_log_dict(body)}"
    _http_logger.debug(line)


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
) -> None:
    """Log the status of a finished request at DEBUG."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    line = f"Response {status_code} from {mask_sensitive_data(url)}"
    if elapsed_ms is not None:
        line += f" | elapsed={elapsed_ms:.2f}ms"
    _http_logger.debug(line)


# Export public API
__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
