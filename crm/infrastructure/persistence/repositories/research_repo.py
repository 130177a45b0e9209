"""Saved research repository: upsert on id and best-effort user analytics."""

from __future__ import annotations

from sqlalchemy import Insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from crm.application.dtos.research import AnalyticsEvent, ResearchRecord, ResearchResult
from crm.infrastructure.persistence.models import SavedResearch, UserAnalytics

_TABLE = SavedResearch.__table__

# Columns overwritten when the id already exists (created_at is kept).
_UPDATABLE = (
    "user_id",
    "entity_type",
    "entity_name",
    "research_data",
    "confidence_score",
    "sources",
    "session_id",
    "metadata",
)


class ResearchRepository:
    """saved_research and user_analytics writes on the request's transactional session."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @staticmethod
    def build_upsert(record: ResearchRecord) -> Insert:
        """INSERT ... ON CONFLICT (id) DO UPDATE ... RETURNING * for one record."""
        stmt = pg_insert(_TABLE).values(
            id=record.id,
            user_id=record.user_id,
            entity_type=record.entity_type,
            entity_name=record.entity_name,
            research_data=record.research_data,
            confidence_score=record.confidence_score,
            sources=record.sources,
            session_id=record.session_id,
            metadata=record.metadata,
        )
        return stmt.on_conflict_do_update(
            index_elements=[_TABLE.c.id],
            set_={
                **{name: stmt.excluded[name] for name in _UPDATABLE},
                "updated_at": func.now(),
            },
        ).returning(*_TABLE.c)

    async def upsert(self, record: ResearchRecord) -> ResearchResult:
        """Insert or update the record; return the stored row."""
        result = await self.db.execute(self.build_upsert(record))
        row = result.mappings().one()
        return ResearchResult(
            id=row["id"],
            user_id=row["user_id"],
            entity_type=row["entity_type"],
            entity_name=row["entity_name"],
            research_data=row["research_data"],
            confidence_score=row["confidence_score"],
            sources=list(row["sources"] or []),
            session_id=row["session_id"],
            metadata=row["metadata"] or {},
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    async def record_analytics(self, event: AnalyticsEvent) -> None:
        """Insert one user_analytics row inside a savepoint.

        A failure rolls back only the savepoint, so the research upsert in
        the same transaction still commits.
        """
        async with self.db.begin_nested():
            self.db.add(
                UserAnalytics(
                    user_id=event.user_id,
                    action=event.action,
                    entity_type=event.entity_type,
                    entity_name=event.entity_name,
                    confidence_score=event.confidence_score,
                    sources_count=event.sources_count,
                    data_size_bytes=event.data_size_bytes,
                    session_id=event.session_id,
                )
            )
            await self.db.flush()
