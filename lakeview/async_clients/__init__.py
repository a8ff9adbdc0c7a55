"""Lakeview SDK async resource clients."""

from lakeview.async_clients.auth import AsyncAuthClient
from lakeview.async_clients.branches import AsyncBranchesClient
from lakeview.async_clients.commits import AsyncCommitsClient
from lakeview.async_clients.objects import AsyncObjectsClient
from lakeview.async_clients.refs import AsyncRefsClient
from lakeview.async_clients.repos import AsyncRepositoriesClient

__all__ = [
    "AsyncAuthClient",
    "AsyncRepositoriesClient",
    "AsyncBranchesClient",
    "AsyncObjectsClient",
    "AsyncCommitsClient",
    "AsyncRefsClient",
]
