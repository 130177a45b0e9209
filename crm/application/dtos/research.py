"""DTOs for saved research (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class SaveResearchCommand:
    """Input for SaveResearchService.save (already shape-validated at the API)."""

    entity_type: str
    entity_name: str
    data: Any
    id: str | None = None
    confidence: float | None = None
    sources: list[str] = field(default_factory=list)
    user_id: str = "anonymous"
    session_id: str | None = None


@dataclass(frozen=True)
class ResearchRecord:
    """Row to upsert into saved_research."""

    id: str
    user_id: str
    entity_type: str
    entity_name: str
    research_data: Any
    confidence_score: float | None
    sources: list[str]
    session_id: str | None
    metadata: dict[str, Any]


@dataclass(frozen=True)
class ResearchResult:
    """Saved research read-model (after upsert)."""

    id: str
    user_id: str
    entity_type: str
    entity_name: str
    research_data: Any
    confidence_score: float | None
    sources: list[str]
    session_id: str | None
    metadata: dict[str, Any]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class AnalyticsEvent:
    """Row for user_analytics (best-effort)."""

    user_id: str
    action: str
    entity_type: str
    entity_name: str
    confidence_score: float | None
    sources_count: int
    data_size_bytes: int
    session_id: str | None


@dataclass(frozen=True)
class SaveResearchOutcome:
    """Result of SaveResearchService.save."""

    research: ResearchResult
    data_size: int
    sources_count: int
    analytics_recorded: bool
