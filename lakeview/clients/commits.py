"""Commits resource client."""

from typing import TYPE_CHECKING

from lakeview.transport import expect_status, path_segment
from lakeview.types.commits import Commit

if TYPE_CHECKING:
    from lakeview.transport import HTTPTransport


class CommitsClient:
    """Client for commit history."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def log(self, repo_id: str, branch_id: str) -> list[Commit]:
        """
        Fetch the commit log of a branch in a single request.

        Only the commits are returned; pagination metadata is dropped.
        """
        response = self.transport.execute(
            "GET",
            f"/repositories/{path_segment(repo_id)}/branches/{path_segment(branch_id)}/commits",
        )
        expect_status(response, 200)
        return [Commit.from_dict(item) for item in response.json().get("results") or []]
