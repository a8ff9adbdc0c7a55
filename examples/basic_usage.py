#!/usr/bin/env python3
"""
Basic Lakeview SDK usage example.

Runs offline against the in-memory fake server shipped with the SDK.
Point LakeviewClient at a real server to do the same against live data.
Run with: python examples/basic_usage.py
"""

import logging

from lakeview import ApiError, ErrorKind, LakeviewClient, NotFoundError, configure_logging
from lakeview.testing import FakeLakeServer
from lakeview.types import BranchCreation, RepositoryCreation

print("=== Lakeview SDK Basic Usage Example ===\n")

configure_logging(level=logging.WARNING)

server = FakeLakeServer()
keys = server.credentials

with LakeviewClient("http://localhost:8000", transport=server.transport()) as client:
    # 1. Log in; the session keeps the key pair for later calls
    print("1. Logging in...")
    session = client.auth.login(keys.access_key_id, keys.secret_access_key)
    print(f"   Logged in as {session.user.id}\n")

    # 2. Create a few repositories
    print("2. Creating repositories...")
    for repo_id in ("analytics", "analytics-raw", "archive", "billing"):
        client.repositories.create(
            RepositoryCreation(id=repo_id, bucket_name=f"s3://lake/{repo_id}")
        )
    print(f"   Repositories: {client.repositories.list().ids}\n")

    # 3. Prefix search puts the exact match first
    print("3. Filtering by prefix 'analytics'...")
    page = client.repositories.filter("analytics", amount=20)
    print(f"   Matches: {page.ids} (has_more={page.pagination.has_more})\n")

    # 4. Branch, upload and diff
    print("4. Working on a branch...")
    client.branches.create("analytics", BranchCreation(name="feature-etl", source="master"))
    stats = client.objects.upload("analytics", "feature-etl", "events/day1.csv", b"id,value\n1,42\n")
    print(f"   Uploaded {stats.path} ({stats.size_bytes} bytes)")
    print(f"   Branches matching 'feature': {client.branches.filter('analytics', 'feature').ids}")
    print(f"   Share link: {client.objects.link_to_path('analytics', 'feature-etl', stats.path)}\n")

    # 5. Errors are tagged with a kind
    print("5. Handling errors...")
    try:
        client.repositories.get("missing")
    except NotFoundError as e:
        print(f"   {e.kind.value}: {e.message}")

    try:
        client.repositories.create(RepositoryCreation(id="billing", bucket_name="s3://lake/billing"))
    except ApiError as e:
        assert e.kind is ErrorKind.GENERIC
        print(f"   {e.kind.value} ({e.status_code}): {e.message}")

print("\n=== Done ===")
