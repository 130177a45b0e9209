"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for repositories and use cases. Each request
gets its own store handle built from the lazily created session factory;
routes depend only on these providers, not on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from crm.application.use_cases.research import SaveResearchService
from crm.application.use_cases.search import SearchService
from crm.core.config import Settings, get_settings
from crm.infrastructure.persistence.database import (
    get_db_transactional,
    get_session_factory,
)
from crm.infrastructure.persistence.repositories import (
    EntitySearchRepository,
    ResearchRepository,
)


async def get_entity_search_repo(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(get_session_factory)
    ],
) -> EntitySearchRepository:
    """Entity store for intelligent search (read-only, one session per lookup)."""
    return EntitySearchRepository(session_factory)


async def get_search_service(
    search_repo: Annotated[EntitySearchRepository, Depends(get_entity_search_repo)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchService:
    """Search use case (people, companies, projects)."""
    return SearchService(
        search_repo,
        expose_lookup_errors=settings.search_expose_lookup_errors,
    )


async def get_research_repo(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ResearchRepository:
    """Saved research repository on the request transaction."""
    return ResearchRepository(db)


async def get_research_service(
    research_repo: Annotated[ResearchRepository, Depends(get_research_repo)],
) -> SaveResearchService:
    """Saved research use case."""
    return SaveResearchService(research_repo)
