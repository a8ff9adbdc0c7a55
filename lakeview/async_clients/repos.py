"""Async repositories resource client."""

from typing import TYPE_CHECKING

from lakeview.prefix import async_filter_by_prefix
from lakeview.query import ListQuery
from lakeview.transport import expect_status, path_segment
from lakeview.types.common import Page
from lakeview.types.repos import Repository, RepositoryCreation

if TYPE_CHECKING:
    from lakeview.async_transport import AsyncHTTPTransport


class AsyncRepositoriesClient:
    """Async client for repository operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repositories client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def get(self, repo_id: str) -> Repository:
        """Get a repository, raising NotFoundError when it does not exist."""
        response = await self.transport.execute(
            "GET", f"/repositories/{path_segment(repo_id)}"
        )
        expect_status(
            response,
            200,
            context="could not get repository",
            not_found=f"could not find repository {repo_id}",
            resource_id=repo_id,
        )
        return Repository.from_dict(response.json())

    async def list(
        self, after: str | None = None, amount: int | None = None
    ) -> Page[Repository]:
        """List repositories ordered by id."""
        response = await self.transport.execute(
            "GET", "/repositories", query=ListQuery(after=after, amount=amount)
        )
        expect_status(response, 200, context="could not list repositories")
        return Page.from_dict(response.json(), Repository.from_dict)

    async def filter(
        self, prefix: str | None, amount: int | None = None
    ) -> Page[Repository]:
        """
        Find repositories whose id starts with ``prefix``.

        The listing and the exact-match lookup are issued concurrently.
        """
        return await async_filter_by_prefix(prefix, amount, self.list, self.get)

    async def create(self, repository: RepositoryCreation) -> Repository:
        """Create a repository."""
        response = await self.transport.execute(
            "POST", "/repositories", json=repository.to_dict()
        )
        expect_status(response, 201)
        return Repository.from_dict(response.json())

    async def delete(self, repo_id: str) -> None:
        """Delete a repository."""
        response = await self.transport.execute(
            "DELETE", f"/repositories/{path_segment(repo_id)}"
        )
        expect_status(response, 204)
