"""Intelligent search API schemas (camelCase on the wire)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from crm.application.dtos.search import SearchAnalytics, SearchCandidate, SearchOutcome


class SearchRequest(BaseModel):
    """Request body for POST /search/intelligent."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    query: str = Field(..., description="Free-text query; blank is rejected")
    include_results: bool = Field(default=True, description="False returns analytics only")
    max_results: int | None = Field(
        default=None, ge=1, description="Result cap (server default when omitted)"
    )

    @field_validator("query")
    @classmethod
    def _query_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Query parameter is required")
        return v


class SearchResultItemResponse(BaseModel):
    """Single ranked hit. Category-specific columns (email, website, developer, ...) ride along as extra keys."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    id: str
    name: str | None = None
    type: str = Field(..., description="person | company | project")
    description: str
    relevance_score: float

    @classmethod
    def from_candidate(cls, candidate: SearchCandidate) -> "SearchResultItemResponse":
        return cls(
            id=candidate.id,
            name=candidate.name,
            type=candidate.type.value,
            description=candidate.description,
            relevance_score=candidate.relevance_score,
            **candidate.fields,
        )


class SearchAnalyticsResponse(BaseModel):
    """Counts before truncation and per collection (people, companies, projects)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_results: int
    results_by_type: dict[str, int]
    search_term: str
    timestamp: str
    failed_categories: list[str] | None = None

    @classmethod
    def from_analytics(cls, analytics: SearchAnalytics) -> "SearchAnalyticsResponse":
        return cls(
            total_results=analytics.total_results,
            results_by_type=dict(analytics.results_by_type),
            search_term=analytics.search_term,
            timestamp=analytics.timestamp,
            failed_categories=analytics.failed_categories,
        )


class SearchResponse(BaseModel):
    """Successful intelligent search response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    query: str
    results: list[SearchResultItemResponse]
    analytics: SearchAnalyticsResponse
    total_results: int

    @classmethod
    def from_outcome(cls, outcome: SearchOutcome) -> "SearchResponse":
        return cls(
            query=outcome.query,
            results=[SearchResultItemResponse.from_candidate(c) for c in outcome.results],
            analytics=SearchAnalyticsResponse.from_analytics(outcome.analytics),
            total_results=outcome.total_results,
        )

    def to_json(self) -> dict[str, Any]:
        """Serialize by alias; failedCategories is omitted unless it was requested."""
        body = self.model_dump(by_alias=True, mode="json")
        if body["analytics"].get("failedCategories") is None:
            body["analytics"].pop("failedCategories", None)
        return body
