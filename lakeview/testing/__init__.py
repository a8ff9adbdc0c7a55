"""Lakeview SDK testing utilities.

Provides a fake server and fixtures for testing applications that use the
Lakeview SDK.
"""

from lakeview.testing.fixtures import create_mock_branch, create_mock_repository
from lakeview.testing.mock import FakeLakeServer, RecordedRequest, paginate

__all__ = [
    # Fake server
    "FakeLakeServer",
    "RecordedRequest",
    "paginate",
    # Helper functions
    "create_mock_repository",
    "create_mock_branch",
]
