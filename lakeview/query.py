"""
Typed query parameters.

Each endpoint that takes a query string gets a dataclass of optional named
parameters. Parameters serialize in field declaration order; ``None``
fields are left out while empty strings are sent as-is.
"""

from dataclasses import dataclass, fields
from urllib.parse import urlencode


class Query:
    """Base class for query parameter dataclasses."""

    def to_params(self) -> list[tuple[str, str]]:
        """Return ``(name, value)`` pairs in a stable order."""
        params: list[tuple[str, str]] = []
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            params.append((f.name, str(value)))
        return params

    def encode(self) -> str:
        """Return the URL-encoded query string without a leading ``?``."""
        return urlencode(self.to_params())


@dataclass
class ListQuery(Query):
    """Cursor pagination for id-ordered collections."""

    after: str | None = None
    amount: int | None = None


@dataclass
class TreeQuery(Query):
    """Tree listing under a ref."""

    tree: str | None = None
    amount: int | None = None
    after: str | None = None


@dataclass
class PathQuery(Query):
    """Single object addressed by path."""

    path: str


@dataclass
class DownloadQuery(Query):
    """Object download with a pre-issued token."""

    path: str
    token: str
