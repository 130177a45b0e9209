"""Saved research API schemas (camelCase on the wire)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from crm.application.dtos.research import SaveResearchOutcome


class SaveResearchRequest(BaseModel):
    """Request body for POST /research. Presence of entityType/entityName/data is checked by the use case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = None
    entity_type: str | None = None
    entity_name: str | None = None
    data: Any = None
    confidence: float | None = Field(default=None, ge=0.0, le=9.99)
    sources: list[str] | None = None
    user_id: str = "anonymous"


class ResearchResponse(BaseModel):
    """Stored saved_research row (column names as stored)."""

    id: str
    user_id: str
    entity_type: str
    entity_name: str
    research_data: Any
    confidence_score: float | None = None
    sources: list[str]
    session_id: str | None = None
    metadata: dict[str, Any]
    created_at: str
    updated_at: str


class SaveResearchMetadata(BaseModel):
    """Summary of the save (camelCase)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    entity_type: str
    entity_name: str
    user_id: str
    saved_at: str
    data_size: int
    sources_count: int


class SaveResearchResponse(BaseModel):
    """Successful save response."""

    success: bool = True
    saved: bool = True
    research: ResearchResponse
    metadata: SaveResearchMetadata

    @classmethod
    def from_outcome(cls, outcome: SaveResearchOutcome) -> "SaveResearchResponse":
        r = outcome.research
        return cls(
            research=ResearchResponse(
                id=r.id,
                user_id=r.user_id,
                entity_type=r.entity_type,
                entity_name=r.entity_name,
                research_data=r.research_data,
                confidence_score=r.confidence_score,
                sources=r.sources,
                session_id=r.session_id,
                metadata=r.metadata,
                created_at=r.created_at.isoformat(),
                updated_at=r.updated_at.isoformat(),
            ),
            metadata=SaveResearchMetadata(
                id=r.id,
                entity_type=r.entity_type,
                entity_name=r.entity_name,
                user_id=r.user_id,
                saved_at=r.created_at.isoformat(),
                data_size=outcome.data_size,
                sources_count=outcome.sources_count,
            ),
        )
