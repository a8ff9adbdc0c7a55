"""Pagination data models shared by every listing endpoint."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Generic, Protocol, TypeVar


class Identified(Protocol):
    """Anything listed by id."""

    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=Identified)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a unix-seconds or ISO 8601 timestamp into an aware datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def split_known(data: dict[str, Any], known: set[str]) -> dict[str, Any]:
    """Return the fields of ``data`` that are not in ``known``."""
    return {key: value for key, value in data.items() if key not in known}


@dataclass
class Pagination:
    """Pagination metadata attached to a listing."""

    has_more: bool
    max_per_page: int
    results: int
    next_offset: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Pagination":
        return cls(
            has_more=bool(data.get("has_more", False)),
            max_per_page=int(data.get("max_per_page", 0)),
            results=int(data.get("results", 0)),
            next_offset=data.get("next_offset") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "has_more": self.has_more,
            "max_per_page": self.max_per_page,
            "results": self.results,
        }
        if self.next_offset is not None:
            data["next_offset"] = self.next_offset
        return data


@dataclass
class Page(Generic[T]):
    """One window of an id-ordered collection."""

    results: list[T] = field(default_factory=list)
    pagination: Pagination = field(
        default_factory=lambda: Pagination(has_more=False, max_per_page=0, results=0)
    )

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], parse_item: Callable[[dict[str, Any]], T]
    ) -> "Page[T]":
        """
        Decode a listing response body.

        Args:
            data: Decoded JSON body with ``results`` and ``pagination``
            parse_item: Function turning one raw result into a model

        Returns:
            Page of parsed items
        """
        results = [parse_item(item) for item in data.get("results") or []]
        raw_pagination = data.get("pagination")
        if raw_pagination is None:
            pagination = Pagination(
                has_more=False, max_per_page=len(results), results=len(results)
            )
        else:
            pagination = Pagination.from_dict(raw_pagination)
        return cls(results=results, pagination=pagination)

    @property
    def ids(self) -> list[str]:
        """Ids of the items in this page, in order."""
        return [item.id for item in self.results]
