"""Commit data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from lakeview.types.common import parse_timestamp


@dataclass
class Commit:
    """A commit in a branch log."""

    id: str
    committer: str | None = None
    message: str | None = None
    creation_date: datetime | None = None
    parents: list[str] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Commit":
        return cls(
            id=data["id"],
            committer=data.get("committer"),
            message=data.get("message"),
            creation_date=parse_timestamp(data.get("creation_date")),
            parents=list(data.get("parents") or []),
            metadata=dict(data.get("metadata") or {}),
        )
