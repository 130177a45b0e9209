"""Intelligent search use case: fan out over people, companies and projects.

Each category is looked up concurrently through IEntitySearchRepository.
A failing lookup degrades to zero rows for that category; the other
categories still answer. Rows are scored, merged, sorted by descending
relevance and truncated to max_results.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from crm.application.dtos.search import (
    CategoryLookup,
    LookupFailed,
    LookupOk,
    SearchAnalytics,
    SearchCandidate,
    SearchOptions,
    SearchOutcome,
)
from crm.application.services.relevance import calculate_relevance
from crm.domain.categories import PROFILES, CategoryProfile
from crm.domain.enums import EntityCategory
from crm.domain.exceptions import SearchValidationException
from crm.shared.telemetry.tracing import (
    record_lookup_failure,
    record_search_summary,
    traced,
)
from crm.shared.utils.datetime import utc_isoformat

if TYPE_CHECKING:
    from crm.application.interfaces.repositories import IEntitySearchRepository

logger = logging.getLogger(__name__)

# Row columns replaced by synthesized candidate attributes.
_RESERVED_COLUMNS = frozenset({"id", "type", "description"})


def per_category_limit(max_results: int) -> int:
    """Rows fetched per category: max_results split evenly, rounded up."""
    return -(-max_results // len(EntityCategory))


def build_candidate(profile: CategoryProfile, term: str, row: dict[str, Any]) -> SearchCandidate:
    """Score one row and attach its category tag, display name and description."""
    extra = {
        key: value
        for key, value in row.items()
        if key not in _RESERVED_COLUMNS and key != profile.name_field
    }
    return SearchCandidate(
        id=str(row["id"]),
        name=row.get(profile.name_field),
        type=profile.category,
        description=profile.describe(row),
        relevance_score=calculate_relevance(
            term, *(row.get(f) for f in profile.score_fields)
        ),
        fields=extra,
    )


class SearchService:
    """Ranked multi-entity search across people, companies and projects."""

    def __init__(
        self,
        search_repo: "IEntitySearchRepository",
        expose_lookup_errors: bool = False,
    ) -> None:
        self.search_repo = search_repo
        self.expose_lookup_errors = expose_lookup_errors

    @traced("search.intelligent")
    async def search(
        self, query: str, options: SearchOptions | None = None
    ) -> SearchOutcome:
        """Search all categories and return ranked, truncated results with analytics.

        Raises:
            SearchValidationException: blank query or max_results < 1.
        """
        options = options or SearchOptions()
        term = (query or "").strip()
        if not term:
            raise SearchValidationException("Query parameter is required")
        if options.max_results < 1:
            raise SearchValidationException("maxResults must be a positive integer")

        limit = per_category_limit(options.max_results)
        logger.info("Intelligent search for %r (per-category limit %d)", term, limit)

        lookups: list[CategoryLookup] = await asyncio.gather(
            *(self._lookup(PROFILES[c], term, limit) for c in EntityCategory)
        )

        candidates: list[SearchCandidate] = []
        results_by_type: dict[str, int] = {}
        failed: list[str] = []
        for lookup in lookups:
            profile = PROFILES[lookup.category]
            if isinstance(lookup, LookupFailed):
                failed.append(profile.collection)
                results_by_type[profile.collection] = 0
                continue
            results_by_type[profile.collection] = len(lookup.rows)
            candidates.extend(build_candidate(profile, term, row) for row in lookup.rows)

        # sorted() is stable: equal scores keep people, companies, projects order.
        ranked = sorted(candidates, key=lambda c: c.relevance_score, reverse=True)
        analytics = SearchAnalytics(
            total_results=len(candidates),
            results_by_type=results_by_type,
            search_term=term,
            timestamp=utc_isoformat(),
            failed_categories=failed if self.expose_lookup_errors else None,
        )
        record_search_summary(term, results_by_type, failed)
        logger.info(
            "Search completed: total=%d by_type=%s failed=%s",
            analytics.total_results,
            results_by_type,
            failed or "none",
        )
        return SearchOutcome(
            query=term,
            results=ranked[: options.max_results] if options.include_results else [],
            analytics=analytics,
            lookups=list(lookups),
        )

    async def _lookup(
        self, profile: CategoryProfile, term: str, limit: int
    ) -> CategoryLookup:
        """Run one category lookup; any exception becomes LookupFailed."""
        try:
            rows = await self.search_repo.search_category(profile, term, limit)
        except Exception as e:
            logger.exception("%s search error", profile.collection.capitalize())
            record_lookup_failure(profile.collection, e)
            return LookupFailed(category=profile.category, reason=str(e) or type(e).__name__)
        return LookupOk(category=profile.category, rows=list(rows or []))
