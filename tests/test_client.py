"""
Tests for LakeviewClient construction, configuration and login.

Feature: lakeview-sdk
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lakeview.client import LakeviewClient, settings_from_env
from lakeview.credentials import (
    Credentials,
    SessionCredentials,
    StaticCredentials,
)
from lakeview.exceptions import AuthenticationError, ConfigurationError
from lakeview.testing.mock import FakeLakeServer

key_strategy = st.text(
    alphabet=st.characters(whitelist_categories=("L", "N")), min_size=1, max_size=20
)


def test_client_initialization() -> None:
    """Client wires every resource client to one transport."""
    creds = Credentials("AKID", "secret")
    client = LakeviewClient("http://lake.example:9000/", credentials=creds, timeout=5.0)

    assert client.base_url == "http://lake.example:9000/"
    assert client.transport.api_url == "http://lake.example:9000/api/v1"
    assert client.timeout == 5.0
    assert isinstance(client.credentials, StaticCredentials)
    for resource in (
        client.auth,
        client.repositories,
        client.branches,
        client.objects,
        client.commits,
        client.refs,
    ):
        assert resource.transport is client.transport

    client.close()


def test_client_default_values() -> None:
    client = LakeviewClient()

    assert client.transport.api_url == "http://localhost:8000/api/v1"
    assert client.timeout is None
    assert isinstance(client.credentials, SessionCredentials)
    assert client.credentials.get_credentials() is None

    client.close()


def test_client_context_manager() -> None:
    with LakeviewClient() as client:
        assert client.transport is not None


def test_client_without_credentials_fails_before_sending(fake_server: FakeLakeServer) -> None:
    with LakeviewClient(transport=fake_server.transport()) as client:
        with pytest.raises(ConfigurationError, match="log in first"):
            client.repositories.list()

    assert fake_server.requests == []


# ============================================================================
# Environment configuration
# ============================================================================


def test_from_env(monkeypatch, fake_server: FakeLakeServer) -> None:
    creds = fake_server.credentials
    monkeypatch.setenv("LAKEVIEW_ENDPOINT", "http://env.example")
    monkeypatch.setenv("LAKEVIEW_ACCESS_KEY_ID", creds.access_key_id)
    monkeypatch.setenv("LAKEVIEW_SECRET_ACCESS_KEY", creds.secret_access_key)
    monkeypatch.setenv("LAKEVIEW_TIMEOUT", "2.5")
    fake_server.add_repository("from-env")

    with LakeviewClient.from_env(transport=fake_server.transport()) as client:
        assert client.transport.api_url == "http://env.example/api/v1"
        assert client.timeout == 2.5
        assert client.repositories.get("from-env").id == "from-env"


def test_from_env_defaults_endpoint(monkeypatch) -> None:
    monkeypatch.delenv("LAKEVIEW_ENDPOINT", raising=False)
    monkeypatch.delenv("LAKEVIEW_TIMEOUT", raising=False)
    monkeypatch.setenv("LAKEVIEW_ACCESS_KEY_ID", "AKID")
    monkeypatch.setenv("LAKEVIEW_SECRET_ACCESS_KEY", "secret")

    endpoint, creds, timeout = settings_from_env("http://localhost:8000")

    assert endpoint == "http://localhost:8000"
    assert creds == Credentials("AKID", "secret")
    assert timeout is None


def test_from_env_missing_access_key(monkeypatch) -> None:
    monkeypatch.delenv("LAKEVIEW_ACCESS_KEY_ID", raising=False)
    monkeypatch.setenv("LAKEVIEW_SECRET_ACCESS_KEY", "secret")

    with pytest.raises(ConfigurationError, match="LAKEVIEW_ACCESS_KEY_ID"):
        LakeviewClient.from_env()


def test_from_env_missing_secret(monkeypatch) -> None:
    monkeypatch.setenv("LAKEVIEW_ACCESS_KEY_ID", "AKID")
    monkeypatch.delenv("LAKEVIEW_SECRET_ACCESS_KEY", raising=False)

    with pytest.raises(ConfigurationError, match="LAKEVIEW_SECRET_ACCESS_KEY"):
        LakeviewClient.from_env()


def test_from_env_invalid_timeout(monkeypatch) -> None:
    monkeypatch.setenv("LAKEVIEW_ACCESS_KEY_ID", "AKID")
    monkeypatch.setenv("LAKEVIEW_SECRET_ACCESS_KEY", "secret")
    monkeypatch.setenv("LAKEVIEW_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError, match="LAKEVIEW_TIMEOUT"):
        LakeviewClient.from_env()


# ============================================================================
# Login
# ============================================================================


def test_login_caches_credentials_for_later_calls(fake_server: FakeLakeServer) -> None:
    creds = fake_server.credentials
    fake_server.add_repository("ab")

    with LakeviewClient(transport=fake_server.transport()) as client:
        session = client.auth.login(creds.access_key_id, creds.secret_access_key)
        repo = client.repositories.get("ab")

    assert session.credentials == creds
    assert session.user.id == creds.access_key_id
    assert session.user.created_at is not None
    assert repo.id == "ab"
    assert fake_server.get_calls("GET", "/repositories/ab")[0].basic_auth == (
        creds.access_key_id,
        creds.secret_access_key,
    )


def test_login_sends_explicit_credentials_over_provider(fake_server: FakeLakeServer) -> None:
    fake_server.add_user("other", "other-secret")

    with LakeviewClient(
        credentials=fake_server.credentials, transport=fake_server.transport()
    ) as client:
        client.auth.login("other", "other-secret")

    assert fake_server.get_calls("GET", "/authentication")[0].basic_auth == ("other", "other-secret")
    # A fixed provider is never overwritten by login.
    assert client.credentials.get_credentials() == fake_server.credentials


def test_login_invalid_credentials(fake_server: FakeLakeServer) -> None:
    with LakeviewClient(transport=fake_server.transport()) as client:
        with pytest.raises(AuthenticationError) as exc_info:
            client.auth.login("AKID", "wrong")

    assert exc_info.value.message == "invalid credentials"
    assert exc_info.value.status_code == 401
    assert client.credentials.get_credentials() is None


@pytest.mark.parametrize("status_code", [403, 500, 503])
def test_login_other_failures_are_distinct(fake_server: FakeLakeServer, status_code: int) -> None:
    fake_server.fail("GET", "/authentication", status_code, message="boom")

    with LakeviewClient(transport=fake_server.transport()) as client:
        with pytest.raises(AuthenticationError) as exc_info:
            client.auth.login("AKID", "secret")

    assert exc_info.value.message == "unknown authentication error"
    assert exc_info.value.status_code == status_code


@given(access_key_id=key_strategy, secret=key_strategy)
@settings(max_examples=50)
def test_property_login_roundtrip(access_key_id: str, secret: str) -> None:
    """Any registered key pair SHALL log in and then authorize requests."""
    server = FakeLakeServer(access_key_id=access_key_id, secret_access_key=secret)

    with LakeviewClient(transport=server.transport()) as client:
        client.auth.login(access_key_id, secret)
        page = client.repositories.list()

    assert page.results == []
    assert server.get_calls("GET", "/repositories")[0].basic_auth == (access_key_id, secret)
