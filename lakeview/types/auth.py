"""Authentication data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from lakeview.credentials import Credentials
from lakeview.types.common import parse_timestamp, split_known


@dataclass
class User:
    """The user behind a pair of access keys."""

    id: str | None = None
    created_at: datetime | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=data.get("id"),
            created_at=parse_timestamp(data.get("created_at")),
            extra=split_known(data, {"id", "created_at"}),
        )


@dataclass
class Session:
    """Result of a successful login."""

    credentials: Credentials
    user: User
