"""Project ORM model. A real-estate development tracked for business development."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from crm.infrastructure.persistence.database import Base
from crm.infrastructure.persistence.models.mixins import EntityRecordMixin


class Project(EntityRecordMixin, Base):
    """Project entity. Table: projects. type is the project kind (residential, commercial, ...)."""

    __tablename__ = "projects"

    title: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text)
    location: Mapped[str | None] = mapped_column(String(255))
    type: Mapped[str | None] = mapped_column(String(64))
    status: Mapped[str | None] = mapped_column(String(64))
    developer: Mapped[str | None] = mapped_column(String(255))
    architect: Mapped[str | None] = mapped_column(String(255))
