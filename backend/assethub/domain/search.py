"""Paged search primitives shared by every management entity."""

from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class SearchCriteria:
    """One page of a query: 1-based page number and a positive page size."""

    page_number: int = 1
    page_size: int = 100

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError("page_number must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size


@dataclass(slots=True)
class SearchResults(Generic[T]):
    """Ordered page of results plus the total number of matches."""

    results: Sequence[T] = field(default_factory=list)
    num_results: int = 0

    def map(self, convert) -> "SearchResults":
        """Convert every result, keeping the total count."""
        return SearchResults(
            results=[convert(item) for item in self.results],
            num_results=self.num_results,
        )
