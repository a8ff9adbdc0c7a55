"""Async objects resource client."""

import posixpath
from typing import IO, TYPE_CHECKING

from lakeview.query import DownloadQuery, PathQuery, TreeQuery
from lakeview.tokens import HmacTokenGenerator, TokenGenerator
from lakeview.transport import expect_status, path_segment
from lakeview.types.common import Page
from lakeview.types.objects import ObjectStats

if TYPE_CHECKING:
    from lakeview.async_transport import AsyncHTTPTransport


class AsyncObjectsClient:
    """Async client for listing, uploading and linking objects."""

    def __init__(
        self,
        transport: "AsyncHTTPTransport",
        token_generator: TokenGenerator | None = None,
    ) -> None:
        self.transport = transport
        self.token_generator = token_generator or HmacTokenGenerator()

    async def list(
        self,
        repo_id: str,
        ref: str,
        tree: str = "",
        after: str = "",
        amount: int = 1000,
    ) -> Page[ObjectStats]:
        """List the entries directly under ``tree`` at ``ref``."""
        response = await self.transport.execute(
            "GET",
            f"/repositories/{path_segment(repo_id)}/refs/{path_segment(ref)}/objects/ls",
            query=TreeQuery(tree=tree, amount=amount, after=after),
        )
        expect_status(response, 200)
        return Page.from_dict(response.json(), ObjectStats.from_dict)

    async def upload(
        self,
        repo_id: str,
        branch_id: str,
        path: str,
        content: bytes | IO[bytes],
    ) -> ObjectStats:
        """Upload an object to a branch as a multipart ``content`` field."""
        filename = posixpath.basename(path) or "content"
        response = await self.transport.execute(
            "POST",
            f"/repositories/{path_segment(repo_id)}/branches/{path_segment(branch_id)}/objects",
            query=PathQuery(path=path),
            files={"content": (filename, content)},
            headers={"Content-Type": ""},
        )
        expect_status(response, 201)
        return ObjectStats.from_dict(response.json())

    def link_to_path(self, repo_id: str, ref: str, path: str) -> str:
        """Build a shareable download URL for an object without any I/O."""
        credentials = self.transport.resolve_credentials()
        token = self.token_generator.generate(credentials, path)
        return self.transport.url_for(
            f"/repositories/{path_segment(repo_id)}/refs/{path_segment(ref)}/objects",
            DownloadQuery(path=path, token=token),
        )
