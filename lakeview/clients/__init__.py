"""Lakeview SDK resource clients."""

from lakeview.clients.auth import AuthClient
from lakeview.clients.branches import BranchesClient
from lakeview.clients.commits import CommitsClient
from lakeview.clients.objects import ObjectsClient
from lakeview.clients.refs import RefsClient
from lakeview.clients.repos import RepositoriesClient

__all__ = [
    "AuthClient",
    "RepositoriesClient",
    "BranchesClient",
    "ObjectsClient",
    "CommitsClient",
    "RefsClient",
]
