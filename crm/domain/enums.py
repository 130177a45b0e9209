"""Domain enumerations for the CRM application.

Enums represent fixed sets of domain values (e.g. entity category).
"""

from enum import Enum


class EntityCategory(str, Enum):
    """Searchable record type. The value is the tag emitted on search results."""

    PERSON = "person"
    COMPANY = "company"
    PROJECT = "project"

    @property
    def collection(self) -> str:
        """Store collection (table) name, also the key used in resultsByType."""
        return _COLLECTIONS[self]


_COLLECTIONS = {
    EntityCategory.PERSON: "people",
    EntityCategory.COMPANY: "companies",
    EntityCategory.PROJECT: "projects",
}
