"""Async branches resource client."""

from typing import TYPE_CHECKING

from lakeview.prefix import async_filter_by_prefix
from lakeview.query import ListQuery
from lakeview.transport import expect_status, path_segment
from lakeview.types.branches import Branch, BranchCreation
from lakeview.types.common import Page

if TYPE_CHECKING:
    from lakeview.async_transport import AsyncHTTPTransport


def _branches_path(repo_id: str) -> str:
    return f"/repositories/{path_segment(repo_id)}/branches"


class AsyncBranchesClient:
    """Async client for branch operations within a repository."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async branches client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def get(self, repo_id: str, branch_id: str) -> Branch:
        """Get a branch, raising NotFoundError when it does not exist."""
        response = await self.transport.execute(
            "GET", f"{_branches_path(repo_id)}/{path_segment(branch_id)}"
        )
        expect_status(
            response,
            200,
            context="could not get branch",
            not_found=f"could not find branch {branch_id}",
            resource_id=branch_id,
        )
        return Branch.from_dict(response.json())

    async def list(
        self,
        repo_id: str,
        after: str | None = None,
        amount: int | None = None,
    ) -> Page[Branch]:
        """List the branches of a repository ordered by id."""
        response = await self.transport.execute(
            "GET", _branches_path(repo_id), query=ListQuery(after=after, amount=amount)
        )
        expect_status(response, 200, context="could not list branches")
        return Page.from_dict(response.json(), Branch.from_dict)

    async def filter(
        self,
        repo_id: str,
        prefix: str | None,
        amount: int | None = None,
    ) -> Page[Branch]:
        """Find branches whose id starts with ``prefix``."""
        return await async_filter_by_prefix(
            prefix,
            amount,
            lambda after, size: self.list(repo_id, after, size),
            lambda branch_id: self.get(repo_id, branch_id),
        )

    async def create(self, repo_id: str, branch: BranchCreation) -> Branch:
        """Create a branch from an existing ref."""
        response = await self.transport.execute(
            "POST", _branches_path(repo_id), json=branch.to_dict()
        )
        expect_status(response, 201)
        return Branch.from_created(branch.name, response.json())

    async def delete(self, repo_id: str, branch_id: str) -> None:
        """Delete a branch."""
        response = await self.transport.execute(
            "DELETE", f"{_branches_path(repo_id)}/{path_segment(branch_id)}"
        )
        expect_status(response, 204)
