"""Person ORM model. A contact in the CRM (broker, developer, architect, ...)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models.mixins import EntityRecordMixin


class Person(EntityRecordMixin, Base):
    """Person entity. Table: people."""

    __tablename__ = "people"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str | None] = mapped_column(String(255))
    company: Mapped[str | None] = mapped_column(String(255))
    email: Mapped[str | None] = mapped_column(String(320))
    phone: Mapped[str | None] = mapped_column(String(64))
    linkedin: Mapped[str | None] = mapped_column(String(500))
    type: Mapped[str | None] = mapped_column(String(64))
