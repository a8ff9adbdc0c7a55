"""Branches resource client."""

from typing import TYPE_CHECKING

from lakeview.prefix import filter_by_prefix
from lakeview.query import ListQuery
from lakeview.transport import expect_status, path_segment
from lakeview.types.branches import Branch, BranchCreation
from lakeview.types.common import Page

if TYPE_CHECKING:
    from lakeview.transport import HTTPTransport


def _branches_path(repo_id: str) -> str:
    return f"/repositories/{path_segment(repo_id)}/branches"


class BranchesClient:
    """Client for branch operations within a repository."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the branches client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, repo_id: str, branch_id: str) -> Branch:
        """
        Get a branch.

        Raises:
            NotFoundError: If the branch does not exist
            ApiError: On any other failure
        """
        response = self.transport.execute(
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

    def list(
        self,
        repo_id: str,
        after: str | None = None,
        amount: int | None = None,
    ) -> Page[Branch]:
        """
        List the branches of a repository ordered by id.

        Args:
            repo_id: The repository identifier
            after: Return branches whose id sorts after this one
            amount: Maximum number of branches to return

        Returns:
            Page of branches
        """
        response = self.transport.execute(
            "GET", _branches_path(repo_id), query=ListQuery(after=after, amount=amount)
        )
        expect_status(response, 200, context="could not list branches")
        return Page.from_dict(response.json(), Branch.from_dict)

    def filter(
        self,
        repo_id: str,
        prefix: str | None,
        amount: int | None = None,
    ) -> Page[Branch]:
        """
        Find branches whose id starts with ``prefix``.

        Same rules as ``RepositoriesClient.filter``, scoped to one
        repository.
        """
        return filter_by_prefix(
            prefix,
            amount,
            lambda after, size: self.list(repo_id, after, size),
            lambda branch_id: self.get(repo_id, branch_id),
        )

    def create(self, repo_id: str, branch: BranchCreation) -> Branch:
        """
        Create a branch from an existing ref.

        Args:
            repo_id: The repository identifier
            branch: New branch name and source ref

        Returns:
            The created branch
        """
        response = self.transport.execute(
            "POST", _branches_path(repo_id), json=branch.to_dict()
        )
        expect_status(response, 201)
        return Branch.from_created(branch.name, response.json())

    def delete(self, repo_id: str, branch_id: str) -> None:
        """Delete a branch."""
        response = self.transport.execute(
            "DELETE", f"{_branches_path(repo_id)}/{path_segment(branch_id)}"
        )
        expect_status(response, 204)
