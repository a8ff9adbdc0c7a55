"""
Property-based tests for Lakeview SDK logging.

Feature: lakeview-sdk
"""

import base64
import io
import logging

from hypothesis import given, settings
from hypothesis import strategies as st

from lakeview.credentials import Credentials, basic_auth_header
from lakeview.logging import (
    configure_logging,
    get_logger,
    log_http_request,
    log_http_response,
    mask_sensitive_data,
    safe_log_dict,
)
from lakeview.tokens import HmacTokenGenerator

# Strategies for generating test data
key_strategy = st.text(
    alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd"), whitelist_characters="/+"),
    min_size=8,
    max_size=40,
)

url_strategy = st.text(
    min_size=5,
    max_size=100,
    alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd"), whitelist_characters="/-_"),
)


def _capture_http_log() -> io.StringIO:
    log_buffer = io.StringIO()
    handler = logging.StreamHandler(log_buffer)
    handler.setLevel(logging.DEBUG)

    http_logger = logging.getLogger("lakeview.http")
    http_logger.setLevel(logging.DEBUG)
    http_logger.handlers = [handler]
    return log_buffer


@given(access_key_id=key_strategy, secret=key_strategy)
@settings(max_examples=100)
def test_property_authorization_header_never_logged(access_key_id: str, secret: str) -> None:
    """
    Property: no credentials in logs

    For any key pair, the logged request headers SHALL NOT contain the
    encoded Authorization value nor the secret.
    """
    log_buffer = _capture_http_log()
    headers = basic_auth_header(Credentials(access_key_id, secret))
    encoded = headers["Authorization"].split(" ", 1)[1]

    log_http_request("GET", "http://lakeview.test/api/v1/repositories", headers=headers)

    output = log_buffer.getvalue()
    assert encoded not in output
    assert "[REDACTED]" in output


@given(
    secret=st.text(min_size=10, max_size=50),
    token=st.text(min_size=10, max_size=50),
    password=st.text(min_size=10, max_size=50),
)
@settings(max_examples=100)
def test_property_safe_log_dict_masks_secrets(
    secret: str, token: str, password: str
) -> None:
    """
    For any dictionary containing secret/token/password values,
    safe_log_dict SHALL mask those values.
    """
    data = {
        "secret_access_key": secret,
        "token": token,
        "password": password,
        "normal_field": "visible",
    }

    safe_data = safe_log_dict(data)

    assert safe_data["secret_access_key"] == "[REDACTED]"
    assert safe_data["token"] == "[REDACTED]"
    assert safe_data["password"] == "[REDACTED]"
    assert safe_data["normal_field"] == "visible"


@given(method=st.sampled_from(["GET", "POST", "DELETE"]), url=url_strategy)
@settings(max_examples=50)
def test_property_log_http_request_masks_body_secrets(method: str, url: str) -> None:
    """Logged JSON bodies keep ordinary fields and hide secrets."""
    log_buffer = _capture_http_log()

    log_http_request(
        method,
        url,
        body={"id": "my-repo", "secret_access_key": "top-secret-value"},
    )

    output = log_buffer.getvalue()
    assert "top-secret-value" not in output
    assert "my-repo" in output


def test_download_token_masked_in_urls() -> None:
    """Download links logged as URLs do not leak their token."""
    token = HmacTokenGenerator().generate(Credentials("AKIA", "secret"), "a/b.csv")
    url = f"http://lakeview.test/api/v1/repositories/r/refs/master/objects?path=a%2Fb.csv&token={token}"

    masked = mask_sensitive_data(url)

    assert token not in masked
    assert "path=a%2Fb.csv" in masked


def test_basic_header_masked_in_text() -> None:
    encoded = base64.b64encode(b"AKIA:secret").decode("ascii")
    masked = mask_sensitive_data(f"Authorization: Basic {encoded}")
    assert encoded not in masked


def test_log_http_response_includes_status_and_elapsed() -> None:
    log_buffer = _capture_http_log()

    log_http_response(404, "http://lakeview.test/api/v1/repositories/x", elapsed_ms=12.5)

    output = log_buffer.getvalue()
    assert "Response 404" in output
    assert "elapsed=12.50ms" in output


def test_nothing_logged_above_debug() -> None:
    log_buffer = _capture_http_log()
    logging.getLogger("lakeview.http").setLevel(logging.INFO)

    log_http_request("GET", "http://lakeview.test/api/v1/repositories")

    assert log_buffer.getvalue() == ""


def test_configure_logging_sets_levels() -> None:
    """Test that configure_logging properly sets log levels."""
    configure_logging(level=logging.WARNING, http_level=logging.DEBUG)

    assert get_logger().level == logging.WARNING
    assert get_logger("http").level == logging.DEBUG


def test_get_logger_returns_correct_loggers() -> None:
    """Test that get_logger returns the correct logger instances."""
    assert get_logger().name == "lakeview"
    assert get_logger("http").name == "lakeview.http"
    assert get_logger("prefix").name == "lakeview.prefix"


def test_mask_sensitive_data_preserves_non_sensitive() -> None:
    """Test that mask_sensitive_data preserves non-sensitive content."""
    text = "This is a normal log message with no secrets"
    assert mask_sensitive_data(text) == text


def test_safe_log_dict_handles_nested_structures() -> None:
    """Nested request bodies are masked at every depth."""
    data = {
        "level1": {
            "level2": {
                "Authorization": "Basic QUtJQTpzZWNyZXQ=",
                "normal": "visible",
            },
            "object": {"token": "nested-token", "normal": "also-visible"},
        },
    }

    safe_data = safe_log_dict(data)

    assert "QUtJQTpzZWNyZXQ=" not in str(safe_data)
    assert "nested-token" not in str(safe_data)
    assert safe_data["level1"]["level2"]["normal"] == "visible"
    assert safe_data["level1"]["object"]["normal"] == "also-visible"
