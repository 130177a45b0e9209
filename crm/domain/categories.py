"""Per-category search profiles: which fields are fetched, matched, and scored.

The store filters on match_fields; the aggregator scores score_fields in
order of importance and builds the display name and description.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from crm.domain.enums import EntityCategory

Row = Mapping[str, Any]


def _describe_person(row: Row) -> str:
    return f"{row.get('title') or 'Professional'} at {row.get('company') or 'Unknown Company'}"


def _describe_company(row: Row) -> str:
    if row.get("description"):
        return row["description"]
    return (
        f"{row.get('sectors') or 'Company'} based in "
        f"{row.get('city') or 'Unknown'}, {row.get('state') or ''}"
    )


def _describe_project(row: Row) -> str:
    if row.get("description"):
        return row["description"]
    return f"{row.get('type') or 'Project'} in {row.get('location') or 'Unknown location'}"


@dataclass(frozen=True)
class CategoryProfile:
    """How one entity category is fetched, matched, scored and described."""

    category: EntityCategory
    projection: tuple[str, ...]
    match_fields: tuple[str, ...]
    score_fields: tuple[str, ...]
    name_field: str
    describe: Callable[[Row], str]

    @property
    def collection(self) -> str:
        return self.category.collection


PROFILES: dict[EntityCategory, CategoryProfile] = {
    EntityCategory.PERSON: CategoryProfile(
        category=EntityCategory.PERSON,
        projection=("id", "name", "title", "company", "email", "phone", "linkedin", "type"),
        match_fields=("name", "title", "company", "email"),
        score_fields=("name", "title", "company"),
        name_field="name",
        describe=_describe_person,
    ),
    EntityCategory.COMPANY: CategoryProfile(
        category=EntityCategory.COMPANY,
        projection=("id", "name", "description", "city", "state", "sectors", "website", "type"),
        match_fields=("name", "description", "sectors", "city"),
        score_fields=("name", "description", "sectors"),
        name_field="name",
        describe=_describe_company,
    ),
    EntityCategory.PROJECT: CategoryProfile(
        category=EntityCategory.PROJECT,
        projection=(
            "id",
            "title",
            "description",
            "location",
            "type",
            "status",
            "developer",
            "architect",
        ),
        match_fields=("title", "description", "location", "developer", "architect"),
        score_fields=("title", "description", "location"),
        name_field="title",
        describe=_describe_project,
    ),
}
