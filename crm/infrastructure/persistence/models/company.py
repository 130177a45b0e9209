"""Company ORM model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models.mixins import EntityRecordMixin


class Company(EntityRecordMixin, Base):
    """Company entity. Table: companies. sectors is free text (e.g. 'Residential, Mixed-use')."""

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text)
    city: Mapped[str | None] = mapped_column(String(128))
    state: Mapped[str | None] = mapped_column(String(64))
    sectors: Mapped[str | None] = mapped_column(String(500))
    website: Mapped[str | None] = mapped_column(String(500))
    type: Mapped[str | None] = mapped_column(String(64))
