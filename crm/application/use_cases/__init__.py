"""Application use cases: one entry point per workflow."""

from crm.application.use_cases.research import SaveResearchService
from crm.application.use_cases.search import SearchService

__all__ = [
    "SaveResearchService",
    "SearchService",
]
