"""Domain layer: enums, category profiles, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from crm.domain.categories import PROFILES, CategoryProfile
from crm.domain.enums import EntityCategory
from crm.domain.exceptions import (
    CrmException,
    ResearchSaveException,
    ResearchValidationException,
    SearchFailedException,
    SearchValidationException,
    SqlNotConfiguredException,
)

__all__ = [
    "PROFILES",
    "CategoryProfile",
    "CrmException",
    "EntityCategory",
    "ResearchSaveException",
    "ResearchValidationException",
    "SearchFailedException",
    "SearchValidationException",
    "SqlNotConfiguredException",
]
