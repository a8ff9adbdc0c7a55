"""Repository data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from lakeview.types.common import parse_timestamp, split_known

_REPOSITORY_FIELDS = {"id", "bucket_name", "default_branch", "creation_date"}


@dataclass
class Repository:
    """Repository information."""

    id: str
    bucket_name: str | None = None
    default_branch: str | None = None
    creation_date: datetime | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Repository":
        return cls(
            id=data["id"],
            bucket_name=data.get("bucket_name"),
            default_branch=data.get("default_branch"),
            creation_date=parse_timestamp(data.get("creation_date")),
            extra=split_known(data, _REPOSITORY_FIELDS),
        )


@dataclass
class RepositoryCreation:
    """Payload for creating a repository."""

    id: str
    bucket_name: str
    default_branch: str = "master"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "bucket_name": self.bucket_name,
            "default_branch": self.default_branch,
        }
