"""Lakeview SDK type definitions.

This module exports all data model types used by the SDK.
"""

from lakeview.types.auth import Session, User
from lakeview.types.branches import Branch, BranchCreation
from lakeview.types.commits import Commit
from lakeview.types.common import Page, Pagination
from lakeview.types.objects import Difference, ObjectStats
from lakeview.types.repos import Repository, RepositoryCreation

__all__ = [
    # Pagination
    "Page",
    "Pagination",
    # Repository types
    "Repository",
    "RepositoryCreation",
    # Branch types
    "Branch",
    "BranchCreation",
    # Commit types
    "Commit",
    # Object types
    "ObjectStats",
    "Difference",
    # Auth types
    "User",
    "Session",
]
