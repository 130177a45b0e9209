"""SavedResearch ORM model. Research payload a user saved about an entity."""

from typing import Any

from sqlalchemy import Numeric, String
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import Mapped, mapped_column

from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models.mixins import TimestampMixin


class SavedResearch(TimestampMixin, Base):
    """Saved research. Table: saved_research. id is caller-supplied or 'research-<cuid>'."""

    __tablename__ = "saved_research"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    entity_type: Mapped[str] = mapped_column(String, nullable=False, index=True)
    entity_name: Mapped[str] = mapped_column(String, nullable=False)
    research_data: Mapped[Any] = mapped_column(JSONB, nullable=False)
    confidence_score: Mapped[float | None] = mapped_column(
        Numeric(3, 2, asdecimal=False)
    )
    sources: Mapped[list[str]] = mapped_column(ARRAY(String), nullable=False, default=list)
    session_id: Mapped[str | None] = mapped_column(String)
    # "metadata" is reserved on declarative classes; column keeps the name.
    research_metadata: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSONB)
