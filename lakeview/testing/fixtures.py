"""
Pytest fixtures for Lakeview SDK testing.

Provides a fake server and clients wired to it.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio

from lakeview.async_client import AsyncLakeviewClient
from lakeview.client import LakeviewClient
from lakeview.credentials import Credentials
from lakeview.testing.mock import FakeLakeServer
from lakeview.types.branches import Branch
from lakeview.types.repos import Repository


def create_mock_repository(
    repo_id: str = "mock-repo",
    bucket_name: str | None = None,
    default_branch: str = "master",
) -> Repository:
    """Build a Repository value without touching any server."""
    return Repository(
        id=repo_id,
        bucket_name=bucket_name or f"bucket-{repo_id}",
        default_branch=default_branch,
    )


def create_mock_branch(branch_id: str = "master", commit_id: str = "c0ffee") -> Branch:
    """Build a Branch value without touching any server."""
    return Branch(id=branch_id, commit_id=commit_id)


# ============================================================================
# Server and client fixtures
# ============================================================================


@pytest.fixture
def fake_server() -> Generator[FakeLakeServer, None, None]:
    """
    Provide an empty FakeLakeServer.

    Example:
        ```python
        def test_my_feature(fake_server, client):
            fake_server.add_repository("ab")
            assert client.repositories.get("ab").id == "ab"
        ```
    """
    server = FakeLakeServer()
    yield server
    server.reset()


@pytest.fixture
def credentials(fake_server: FakeLakeServer) -> Credentials:
    """Provide the fake server's valid key pair."""
    return fake_server.credentials


@pytest.fixture
def client(
    fake_server: FakeLakeServer, credentials: Credentials
) -> Generator[LakeviewClient, None, None]:
    """Provide a LakeviewClient talking to the fake server."""
    with LakeviewClient(
        base_url="http://lakeview.test",
        credentials=credentials,
        transport=fake_server.transport(),
    ) as sdk_client:
        yield sdk_client


@pytest_asyncio.fixture
async def async_client(
    fake_server: FakeLakeServer, credentials: Credentials
) -> AsyncGenerator[AsyncLakeviewClient, None]:
    """Provide an AsyncLakeviewClient talking to the fake server."""
    async with AsyncLakeviewClient(
        base_url="http://lakeview.test",
        credentials=credentials,
        transport=fake_server.transport(),
    ) as sdk_client:
        yield sdk_client


@pytest.fixture
def populated_server(fake_server: FakeLakeServer) -> FakeLakeServer:
    """
    Provide a fake server holding repositories a, ab, abc and b.

    Repository ``ab`` also has branches master, feature, feature-1 and
    fix.
    """
    for repo_id in ("a", "ab", "abc", "b"):
        fake_server.add_repository(repo_id)
    for branch_id in ("feature", "feature-1", "fix"):
        fake_server.add_branch("ab", branch_id)
    return fake_server
