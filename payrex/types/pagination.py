"""Cursor pagination types for list endpoints."""
from typing import Annotated, Generic, Iterator, List, Optional, TypeVar

from pydantic import field_validator

from payrex.types.base import OmitIfNone, PayrexModel

T = TypeVar("T")

MIN_LIMIT = 1
MAX_LIMIT = 100


def clamp_limit(limit: int) -> int:
    return max(MIN_LIMIT, min(MAX_LIMIT, limit))


class ListParams(PayrexModel):
    """Baseline list parameters used by every list endpoint."""

    limit: Annotated[Optional[int], OmitIfNone()] = None
    """Limits the number of resources returned. The minimum is 1 and the maximum is 100."""

    after: Annotated[Optional[str], OmitIfNone()] = None
    """Resource ID cursor; fetch the page after this resource."""

    before: Annotated[Optional[str], OmitIfNone()] = None
    """Resource ID cursor; fetch the page before this resource."""

    @field_validator("limit")
    @classmethod
    def _clamp(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return None
        return clamp_limit(value)

    def with_limit(self, limit: int) -> "ListParams":
        """Sets the page size, clamped to 1..100."""
        self.limit = clamp_limit(limit)
        return self

    def with_after(self, after: object) -> "ListParams":
        self.after = str(after)
        return self

    def with_before(self, before: object) -> "ListParams":
        self.before = str(before)
        return self


class PaginatedList(PayrexModel, Generic[T]):
    """A page of resources returned by a list endpoint."""

    object: Annotated[Optional[str], OmitIfNone()] = None
    data: List[T]
    has_more: bool = False
    next_page: Annotated[Optional[str], OmitIfNone()] = None
    total_count: Annotated[Optional[int], OmitIfNone()] = None

    @classmethod
    def empty(cls) -> "PaginatedList[T]":
        return cls(object="list", data=[], has_more=False, total_count=0)

    def is_empty(self) -> bool:
        return not self.data

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)
