"""Objects resource client."""

import posixpath
from typing import IO, TYPE_CHECKING

from lakeview.query import DownloadQuery, PathQuery, TreeQuery
from lakeview.tokens import HmacTokenGenerator, TokenGenerator
from lakeview.transport import expect_status, path_segment
from lakeview.types.common import Page
from lakeview.types.objects import ObjectStats

if TYPE_CHECKING:
    from lakeview.transport import HTTPTransport


class ObjectsClient:
    """Client for listing, uploading and linking objects."""

    def __init__(
        self,
        transport: "HTTPTransport",
        token_generator: TokenGenerator | None = None,
    ) -> None:
        """
        Initialize the objects client.

        Args:
            transport: HTTP transport for making requests
            token_generator: Issues download tokens for shareable links
        """
        self.transport = transport
        self.token_generator = token_generator or HmacTokenGenerator()

    def list(
        self,
        repo_id: str,
        ref: str,
        tree: str = "",
        after: str = "",
        amount: int = 1000,
    ) -> Page[ObjectStats]:
        """
        List the entries directly under ``tree`` at ``ref``.

        Args:
            repo_id: The repository identifier
            ref: Branch or commit to read from
            tree: Path prefix of the directory to list
            after: Return entries whose path sorts after this one
            amount: Maximum number of entries to return

        Returns:
            Page of objects and common prefixes
        """
        response = self.transport.execute(
            "GET",
            f"/repositories/{path_segment(repo_id)}/refs/{path_segment(ref)}/objects/ls",
            query=TreeQuery(tree=tree, amount=amount, after=after),
        )
        expect_status(response, 200)
        return Page.from_dict(response.json(), ObjectStats.from_dict)

    def upload(
        self,
        repo_id: str,
        branch_id: str,
        path: str,
        content: bytes | IO[bytes],
    ) -> ObjectStats:
        """
        Upload an object to a branch.

        The body is multipart with a single ``content`` field; the JSON
        Content-Type default is removed so httpx can set the boundary.

        Args:
            repo_id: The repository identifier
            branch_id: Branch to write to
            path: Object path inside the branch
            content: Raw bytes or a binary file object

        Returns:
            Stats of the stored object

        Raises:
            ApiError: If the server does not answer 201
        """
        filename = posixpath.basename(path) or "content"
        response = self.transport.execute(
            "POST",
            f"/repositories/{path_segment(repo_id)}/branches/{path_segment(branch_id)}/objects",
            query=PathQuery(path=path),
            files={"content": (filename, content)},
            headers={"Content-Type": ""},
        )
        expect_status(response, 201)
        return ObjectStats.from_dict(response.json())

    def link_to_path(self, repo_id: str, ref: str, path: str) -> str:
        """
        Build a shareable download URL for an object.

        No request is made; the link embeds a token derived from the
        current credentials.

        Args:
            repo_id: The repository identifier
            ref: Branch or commit holding the object
            path: Object path

        Returns:
            Absolute download URL
        """
        credentials = self.transport.resolve_credentials()
        token = self.token_generator.generate(credentials, path)
        return self.transport.url_for(
            f"/repositories/{path_segment(repo_id)}/refs/{path_segment(ref)}/objects",
            DownloadQuery(path=path, token=token),
        )
