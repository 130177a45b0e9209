"""UserAnalytics ORM model. Append-only log of user actions (e.g. save_research)."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models.mixins import CuidPrimaryKeyMixin


class UserAnalytics(CuidPrimaryKeyMixin, Base):
    """User analytics row. Table: user_analytics."""

    __tablename__ = "user_analytics"

    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    action: Mapped[str] = mapped_column(String(64), nullable=False)
    entity_type: Mapped[str | None] = mapped_column(String)
    entity_name: Mapped[str | None] = mapped_column(String)
    confidence_score: Mapped[float | None] = mapped_column(
        Numeric(3, 2, asdecimal=False)
    )
    sources_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    data_size_bytes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    session_id: Mapped[str | None] = mapped_column(String)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
