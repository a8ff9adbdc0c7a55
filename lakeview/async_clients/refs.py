"""Async refs resource client."""

from typing import TYPE_CHECKING

from lakeview.clients.refs import diff_path
from lakeview.transport import expect_status
from lakeview.types.common import Page
from lakeview.types.objects import Difference

if TYPE_CHECKING:
    from lakeview.async_transport import AsyncHTTPTransport


class AsyncRefsClient:
    """Async client for ref comparisons."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def diff(self, repo_id: str, left_ref: str, right_ref: str) -> Page[Difference]:
        """Diff two refs, or a branch against its last commit when both are equal."""
        response = await self.transport.execute("GET", diff_path(repo_id, left_ref, right_ref))
        expect_status(response, 200)
        return Page.from_dict(response.json(), Difference.from_dict)
