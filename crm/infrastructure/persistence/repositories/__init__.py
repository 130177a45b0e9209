"""Persistence repositories. Re-exports for dependency injection."""

from crm.infrastructure.persistence.repositories.research_repo import ResearchRepository
from crm.infrastructure.persistence.repositories.search_repo import EntitySearchRepository

__all__ = [
    "EntitySearchRepository",
    "ResearchRepository",
]
