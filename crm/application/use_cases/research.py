"""Saved research use case: upsert a research record, then log analytics best-effort."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from crm.application.dtos.research import (
    AnalyticsEvent,
    ResearchRecord,
    SaveResearchCommand,
    SaveResearchOutcome,
)
from crm.domain.exceptions import ResearchSaveException, ResearchValidationException
from crm.shared.utils.generators import generate_research_id

if TYPE_CHECKING:
    from crm.application.interfaces.repositories import IResearchRepository

logger = logging.getLogger(__name__)


def payload_size(data: object) -> int:
    """Length of data serialized as compact JSON (the stored data_size)."""
    return len(json.dumps(data, separators=(",", ":"), ensure_ascii=False, default=str))


class SaveResearchService:
    """Persist a user's research about a named entity."""

    def __init__(self, research_repo: "IResearchRepository") -> None:
        self.research_repo = research_repo

    async def save(self, command: SaveResearchCommand) -> SaveResearchOutcome:
        """Upsert the research record and append a save_research analytics row.

        Raises:
            ResearchValidationException: entity_type, entity_name or data missing.
            ResearchSaveException: the store rejected the upsert.
        """
        if (
            not command.entity_type
            or not command.entity_name
            or command.data is None
        ):
            raise ResearchValidationException()

        data_size = payload_size(command.data)
        sources = list(command.sources or [])
        record = ResearchRecord(
            id=command.id or generate_research_id(),
            user_id=command.user_id or "anonymous",
            entity_type=command.entity_type,
            entity_name=command.entity_name,
            research_data=command.data,
            confidence_score=command.confidence,
            sources=sources,
            session_id=command.session_id,
            metadata={
                "saved_via": "user_service",
                "data_size": data_size,
                "source_count": len(sources),
            },
        )
        logger.info(
            "Saving research: entity_type=%s entity_name=%s user_id=%s",
            record.entity_type,
            record.entity_name,
            record.user_id,
        )
        try:
            saved = await self.research_repo.upsert(record)
        except Exception as e:
            logger.exception("Research save error")
            raise ResearchSaveException(str(e) or type(e).__name__) from e

        analytics_recorded = True
        try:
            await self.research_repo.record_analytics(
                AnalyticsEvent(
                    user_id=record.user_id,
                    action="save_research",
                    entity_type=record.entity_type,
                    entity_name=record.entity_name,
                    confidence_score=record.confidence_score,
                    sources_count=len(sources),
                    data_size_bytes=data_size,
                    session_id=record.session_id,
                )
            )
        except Exception as e:
            analytics_recorded = False
            logger.warning("Analytics save failed: %s", e)

        logger.info("Research saved successfully: %s", saved.id)
        return SaveResearchOutcome(
            research=saved,
            data_size=data_size,
            sources_count=len(sources),
            analytics_recorded=analytics_recorded,
        )
