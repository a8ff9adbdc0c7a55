"""Branch data models."""

from dataclasses import dataclass, field
from typing import Any

from lakeview.types.common import split_known


@dataclass
class Branch:
    """Branch information."""

    id: str
    commit_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Branch":
        return cls(
            id=data["id"],
            commit_id=data.get("commit_id"),
            extra=split_known(data, {"id", "commit_id"}),
        )

    @classmethod
    def from_created(cls, name: str, data: Any) -> "Branch":
        """Parse a create response, which is either a branch or its commit id."""
        if isinstance(data, dict):
            return cls.from_dict(data)
        return cls(id=name, commit_id=data)


@dataclass
class BranchCreation:
    """Payload for creating a branch from an existing ref."""

    name: str
    source: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "source": self.source}
