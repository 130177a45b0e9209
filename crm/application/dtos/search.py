"""DTOs for intelligent search (no dependency on ORM).

A category lookup is tagged: LookupOk carries rows, LookupFailed carries the
reason. Failures collapse to empty lists only when the outcome is serialized.
"""

from dataclasses import dataclass, field
from typing import Any

from crm.domain.enums import EntityCategory


@dataclass(frozen=True)
class SearchOptions:
    """Caller options for one search invocation."""

    include_results: bool = True
    max_results: int = 10


@dataclass(frozen=True)
class LookupOk:
    """A category lookup that completed (possibly with zero rows)."""

    category: EntityCategory
    rows: list[dict[str, Any]]


@dataclass(frozen=True)
class LookupFailed:
    """A category lookup that raised; treated as zero rows."""

    category: EntityCategory
    reason: str


CategoryLookup = LookupOk | LookupFailed


@dataclass(frozen=True)
class SearchCandidate:
    """One scored row from one category (read-model)."""

    id: str
    name: str | None
    type: EntityCategory
    description: str
    relevance_score: float
    # Remaining projected columns (e.g. email, website, developer)
    fields: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SearchAnalytics:
    """Counts for one search: before truncation and per collection."""

    total_results: int
    results_by_type: dict[str, int]
    search_term: str
    timestamp: str
    failed_categories: list[str] | None = None


@dataclass(frozen=True)
class SearchOutcome:
    """Result of SearchService.search."""

    query: str
    results: list[SearchCandidate]
    analytics: SearchAnalytics
    lookups: list[CategoryLookup]

    @property
    def total_results(self) -> int:
        return self.analytics.total_results
