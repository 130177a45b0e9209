"""Category profiles: collections, name fields, and description fallbacks."""

from crm.domain.categories import PROFILES
from crm.domain.enums import EntityCategory


def test_every_category_has_a_profile() -> None:
    assert set(PROFILES) == set(EntityCategory)
    assert [p.collection for p in PROFILES.values()] == ["people", "companies", "projects"]


def test_projects_use_title_as_name() -> None:
    assert PROFILES[EntityCategory.PROJECT].name_field == "title"
    assert PROFILES[EntityCategory.PERSON].name_field == "name"


def test_match_and_score_fields_are_projected() -> None:
    for profile in PROFILES.values():
        assert set(profile.match_fields) <= set(profile.projection)
        assert set(profile.score_fields) <= set(profile.projection)
        assert "id" in profile.projection


def test_person_description() -> None:
    describe = PROFILES[EntityCategory.PERSON].describe
    assert describe({"title": "Broker", "company": "Harbor"}) == "Broker at Harbor"
    assert describe({}) == "Professional at Unknown Company"


def test_company_description_fallback() -> None:
    describe = PROFILES[EntityCategory.COMPANY].describe
    assert describe({"description": "Studio"}) == "Studio"
    assert (
        describe({"sectors": "Hospitality", "city": "Miami", "state": "FL"})
        == "Hospitality based in Miami, FL"
    )
    assert describe({}) == "Company based in Unknown, "


def test_project_description_fallback() -> None:
    describe = PROFILES[EntityCategory.PROJECT].describe
    assert describe({"description": "54 stories"}) == "54 stories"
    assert describe({"type": "Residential", "location": "Miami"}) == "Residential in Miami"
    assert describe({}) == "Project in Unknown location"
