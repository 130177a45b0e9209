"""Pytest configuration and fixtures for the CRM search service.

Uses crm.main:app for HTTP tests and crm.infrastructure.persistence.database
for DB-dependent fixtures. API tests replace the store-backed services via
app.dependency_overrides so they run without Postgres.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from crm.api.v1.dependencies import get_research_repo, get_search_service
from crm.application.use_cases.search import SearchService
from crm.core.config import get_settings
from crm.infrastructure.persistence import database
from crm.main import app


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def search_repo() -> AsyncMock:
    """Entity store fake; set search_repo.search_category.side_effect per test."""
    repo = AsyncMock()
    repo.search_category = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def override_search_repo(search_repo: AsyncMock):
    """Route POST /search/intelligent to a SearchService over the fake store."""
    settings = get_settings()
    app.dependency_overrides[get_search_service] = lambda: SearchService(
        search_repo,
        expose_lookup_errors=settings.search_expose_lookup_errors,
    )
    yield search_repo
    app.dependency_overrides.pop(get_search_service, None)


@pytest.fixture
def research_repo() -> AsyncMock:
    """Research repository fake (upsert + record_analytics)."""
    repo = AsyncMock()
    repo.record_analytics = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def override_research_repo(research_repo: AsyncMock):
    """Route POST /research to SaveResearchService over the fake repository."""
    app.dependency_overrides[get_research_repo] = lambda: research_repo
    yield research_repo
    app.dependency_overrides.pop(get_research_repo, None)


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL. Skips (pytest.skip) when Postgres is not
    configured. Use @pytest.mark.requires_db to mark tests that need this
    fixture; run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip("Postgres not configured: set DATABASE_URL")
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    await database.dispose_engine()
