"""
Pytest plugin for Lakeview SDK testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["lakeview.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from lakeview.testing.fixtures import (
    async_client,
    client,
    credentials,
    fake_server,
    populated_server,
)

__all__ = [
    "fake_server",
    "credentials",
    "client",
    "async_client",
    "populated_server",
]
