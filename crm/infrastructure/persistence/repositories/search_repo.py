"""Entity search repository. Case-insensitive substring lookups on people, companies, projects."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from crm.domain.categories import CategoryProfile
from crm.domain.enums import EntityCategory
from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models import Company, Person, Project

_MODELS: dict[EntityCategory, type[Base]] = {
    EntityCategory.PERSON: Person,
    EntityCategory.COMPANY: Company,
    EntityCategory.PROJECT: Project,
}


class EntitySearchRepository:
    """ILIKE search across one category's match fields (OR), one session per lookup.

    Lookups for different categories may run concurrently; an AsyncSession
    must not be shared between them, so each call opens its own.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def build_statement(profile: CategoryProfile, term: str, limit: int) -> Select:
        """SELECT projection WHERE any match field ILIKE %term% LIMIT limit.

        The term is not escaped: % and _ keep their pattern meaning. It is
        always sent as a bound parameter.
        """
        model: Any = _MODELS[profile.category]
        pattern = f"%{term}%"
        return (
            select(*(getattr(model, name) for name in profile.projection))
            .where(or_(*(getattr(model, name).ilike(pattern) for name in profile.match_fields)))
            .limit(limit)
        )

    async def search_category(
        self, profile: CategoryProfile, term: str, limit: int
    ) -> list[dict[str, Any]]:
        """Return up to limit matching rows as dicts keyed by projection column."""
        stmt = self.build_statement(profile, term, limit)
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [dict(row) for row in result.mappings().all()]
