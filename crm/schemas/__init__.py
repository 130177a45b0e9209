"""Pydantic request/response schemas for the API."""

from crm.schemas.health import HealthResponse
from crm.schemas.research import SaveResearchRequest, SaveResearchResponse
from crm.schemas.search import SearchRequest, SearchResponse

__all__ = [
    "HealthResponse",
    "SaveResearchRequest",
    "SaveResearchResponse",
    "SearchRequest",
    "SearchResponse",
]
