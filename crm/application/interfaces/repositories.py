"""Repository protocols (ports) for the application layer.

Infrastructure implements these; use cases depend only on the protocols (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from crm.application.dtos.research import (
        AnalyticsEvent,
        ResearchRecord,
        ResearchResult,
    )
    from crm.domain.categories import CategoryProfile


# Entity search repository interface (substring lookups per category)
class IEntitySearchRepository(Protocol):
    """Protocol for the queryable entity store (people, companies, projects)."""

    async def search_category(
        self,
        profile: "CategoryProfile",
        term: str,
        limit: int,
    ) -> list[dict[str, Any]]:
        """Return up to limit rows of profile's collection whose match_fields
        contain term (case-insensitive, any field). Rows hold profile.projection keys."""


# Saved research repository interface
class IResearchRepository(Protocol):
    """Protocol for saved research persistence."""

    async def upsert(self, record: "ResearchRecord") -> "ResearchResult":
        """Insert or update (on id) a research record; return the stored row."""

    async def record_analytics(self, event: "AnalyticsEvent") -> None:
        """Append one user analytics row. May raise; callers treat it as best-effort."""
