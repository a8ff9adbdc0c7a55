"""Refs resource client."""

from typing import TYPE_CHECKING

from lakeview.transport import expect_status, path_segment
from lakeview.types.common import Page
from lakeview.types.objects import Difference

if TYPE_CHECKING:
    from lakeview.transport import HTTPTransport


def diff_path(repo_id: str, left_ref: str, right_ref: str) -> str:
    """
    Endpoint comparing two refs.

    Comparing a ref with itself means the uncommitted changes of that
    branch, which live under the branch rather than the refs endpoint.
    """
    repo = path_segment(repo_id)
    if left_ref == right_ref:
        return f"/repositories/{repo}/branches/{path_segment(left_ref)}/diff"
    return f"/repositories/{repo}/refs/{path_segment(left_ref)}/diff/{path_segment(right_ref)}"


class RefsClient:
    """Client for ref comparisons."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def diff(self, repo_id: str, left_ref: str, right_ref: str) -> Page[Difference]:
        """
        Diff two refs, or a branch against its last commit when both are equal.

        Args:
            repo_id: The repository identifier
            left_ref: Base ref
            right_ref: Compared ref

        Returns:
            Page of changed paths
        """
        response = self.transport.execute("GET", diff_path(repo_id, left_ref, right_ref))
        expect_status(response, 200)
        return Page.from_dict(response.json(), Difference.from_dict)
