"""Object and diff data models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from lakeview.types.common import parse_timestamp


@dataclass
class ObjectStats:
    """An entry of a tree listing: either an object or a common prefix."""

    path: str
    path_type: str  # "object" or "common_prefix"
    checksum: str | None = None
    mtime: datetime | None = None
    size_bytes: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ObjectStats":
        return cls(
            path=data["path"],
            path_type=data.get("path_type", "object"),
            checksum=data.get("checksum"),
            mtime=parse_timestamp(data.get("mtime")),
            size_bytes=data.get("size_bytes"),
        )

    @property
    def id(self) -> str:
        return self.path


@dataclass
class Difference:
    """One changed path between two refs."""

    type: str  # "added", "removed", "changed" or "conflict"
    path: str
    path_type: str = "object"
    direction: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Difference":
        return cls(
            type=data["type"],
            path=data["path"],
            path_type=data.get("path_type", "object"),
            direction=data.get("direction"),
        )

    @property
    def id(self) -> str:
        return self.path
