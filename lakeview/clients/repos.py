"""Repositories resource client."""

from typing import TYPE_CHECKING

from lakeview.prefix import filter_by_prefix
from lakeview.query import ListQuery
from lakeview.transport import expect_status, path_segment
from lakeview.types.common import Page
from lakeview.types.repos import Repository, RepositoryCreation

if TYPE_CHECKING:
    from lakeview.transport import HTTPTransport


class RepositoriesClient:
    """Client for repository operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repositories client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, repo_id: str) -> Repository:
        """
        Get a repository.

        Args:
            repo_id: The repository identifier

        Returns:
            Repository

        Raises:
            NotFoundError: If the repository does not exist
            ApiError: On any other failure
        """
        response = self.transport.execute("GET", f"/repositories/{path_segment(repo_id)}")
        expect_status(
            response,
            200,
            context="could not get repository",
            not_found=f"could not find repository {repo_id}",
            resource_id=repo_id,
        )
        return Repository.from_dict(response.json())

    def list(self, after: str | None = None, amount: int | None = None) -> Page[Repository]:
        """
        List repositories ordered by id.

        Args:
            after: Return repositories whose id sorts after this one
            amount: Maximum number of repositories to return

        Returns:
            Page of repositories
        """
        response = self.transport.execute(
            "GET", "/repositories", query=ListQuery(after=after, amount=amount)
        )
        expect_status(response, 200, context="could not list repositories")
        return Page.from_dict(response.json(), Repository.from_dict)

    def filter(self, prefix: str | None, amount: int | None = None) -> Page[Repository]:
        """
        Find repositories whose id starts with ``prefix``.

        The repository named exactly ``prefix`` comes first when it exists.
        With an empty prefix this is ``list(prefix, amount)``.

        Args:
            prefix: Id prefix to search for
            amount: Page size for the unfiltered case

        Returns:
            Page of matching repositories

        Raises:
            ApiError: If the listing or the point lookup fails for any
                reason other than the repository being absent
        """
        return filter_by_prefix(prefix, amount, self.list, self.get)

    def create(self, repository: RepositoryCreation) -> Repository:
        """
        Create a repository.

        Args:
            repository: Id, storage bucket and default branch

        Returns:
            The created repository
        """
        response = self.transport.execute(
            "POST", "/repositories", json=repository.to_dict()
        )
        expect_status(response, 201)
        return Repository.from_dict(response.json())

    def delete(self, repo_id: str) -> None:
        """
        Delete a repository.

        Args:
            repo_id: The repository identifier
        """
        response = self.transport.execute(
            "DELETE", f"/repositories/{path_segment(repo_id)}"
        )
        expect_status(response, 204)
