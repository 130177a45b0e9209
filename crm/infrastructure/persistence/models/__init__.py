"""Persistence models: ORM entities and mixins."""

from crm.infrastructure.persistence.models.company import Company
from crm.infrastructure.persistence.models.mixins import (
    CuidPrimaryKeyMixin,
    EntityRecordMixin,
    TimestampMixin,
)
from crm.infrastructure.persistence.models.person import Person
from crm.infrastructure.persistence.models.project import Project
from crm.infrastructure.persistence.models.saved_research import SavedResearch
from crm.infrastructure.persistence.models.user_analytics import UserAnalytics

__all__ = [
    "Company",
    "CuidPrimaryKeyMixin",
    "EntityRecordMixin",
    "Person",
    "Project",
    "SavedResearch",
    "TimestampMixin",
    "UserAnalytics",
]
