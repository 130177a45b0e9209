"""Column mixins shared by the CRM tables.

Entity tables (people, companies, projects) get a CUID primary key and
server-side created_at / updated_at; saved_research supplies its own id.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from crm.shared.utils.generators import generate_cuid


class CuidPrimaryKeyMixin:
    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """created_at set by the database; updated_at refreshed on every ORM update."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class EntityRecordMixin(CuidPrimaryKeyMixin, TimestampMixin):
    """Searchable CRM entity row."""
