"""Application DTOs (no ORM dependency)."""

from crm.application.dtos.research import (
    AnalyticsEvent,
    ResearchRecord,
    ResearchResult,
    SaveResearchCommand,
    SaveResearchOutcome,
)
from crm.application.dtos.search import (
    CategoryLookup,
    LookupFailed,
    LookupOk,
    SearchAnalytics,
    SearchCandidate,
    SearchOptions,
    SearchOutcome,
)

__all__ = [
    "AnalyticsEvent",
    "CategoryLookup",
    "LookupFailed",
    "LookupOk",
    "ResearchRecord",
    "ResearchResult",
    "SaveResearchCommand",
    "SaveResearchOutcome",
    "SearchAnalytics",
    "SearchCandidate",
    "SearchOptions",
    "SearchOutcome",
]
