"""SearchService.search unit tests with a mocked entity store."""

from unittest.mock import AsyncMock

import pytest

from crm.application.dtos.search import LookupFailed, LookupOk, SearchOptions
from crm.application.use_cases.search import SearchService, per_category_limit
from crm.domain.categories import CategoryProfile
from crm.domain.enums import EntityCategory
from crm.domain.exceptions import SearchValidationException


def _store(rows_by_category: dict[EntityCategory, list[dict] | Exception]) -> AsyncMock:
    """Fake store returning rows (or raising) per category."""

    async def search_category(profile: CategoryProfile, term: str, limit: int):
        value = rows_by_category.get(profile.category, [])
        if isinstance(value, Exception):
            raise value
        return value[:limit]

    repo = AsyncMock()
    repo.search_category = AsyncMock(side_effect=search_category)
    return repo


ACME_COMPANY = {
    "id": "c1",
    "name": "Acme",
    "description": "Developer",
    "city": "Miami",
    "state": "FL",
    "sectors": "Residential",
    "website": None,
    "type": "developer",
}
ACME_PROJECT = {
    "id": "pr1",
    "title": "Bayfront Tower",
    "description": None,
    "location": "Miami, FL",
    "type": "Residential",
    "status": "Planning",
    "developer": "Acme Corp",
    "architect": None,
}


def test_per_category_limit_rounds_up() -> None:
    assert per_category_limit(10) == 4
    assert per_category_limit(1) == 1
    assert per_category_limit(3) == 1
    assert per_category_limit(7) == 3


def test_per_category_limit_is_exact_for_large_values() -> None:
    assert per_category_limit(3 * 2**60 + 3) == 2**60 + 1
    assert per_category_limit(3 * 2**60 + 4) == 2**60 + 2


async def test_default_max_results_fetches_four_per_category() -> None:
    repo = _store({})
    svc = SearchService(repo)
    await svc.search("acme")
    assert repo.search_category.await_count == 3
    limits = [call.args[2] for call in repo.search_category.await_args_list]
    assert limits == [4, 4, 4]
    categories = [call.args[0].category for call in repo.search_category.await_args_list]
    assert categories == [
        EntityCategory.PERSON,
        EntityCategory.COMPANY,
        EntityCategory.PROJECT,
    ]


@pytest.mark.parametrize("query", ["", "   ", None])
async def test_blank_query_raises_before_any_lookup(query) -> None:
    repo = _store({})
    svc = SearchService(repo)
    with pytest.raises(SearchValidationException) as exc_info:
        await svc.search(query)
    assert exc_info.value.message == "Query parameter is required"
    repo.search_category.assert_not_awaited()


async def test_non_positive_max_results_raises() -> None:
    svc = SearchService(_store({}))
    with pytest.raises(SearchValidationException):
        await svc.search("acme", SearchOptions(max_results=0))


async def test_query_is_trimmed_before_lookup() -> None:
    repo = _store({})
    outcome = await SearchService(repo).search("  acme  ")
    assert outcome.query == "acme"
    assert outcome.analytics.search_term == "acme"
    assert all(call.args[1] == "acme" for call in repo.search_category.await_args_list)


async def test_acme_company_ranks_first_over_project_by_developer() -> None:
    repo = _store(
        {
            EntityCategory.COMPANY: [ACME_COMPANY],
            EntityCategory.PROJECT: [ACME_PROJECT],
        }
    )
    outcome = await SearchService(repo).search("Acme")
    assert [c.id for c in outcome.results] == ["c1", "pr1"]
    company, project = outcome.results
    assert company.relevance_score == 100.0
    assert company.type is EntityCategory.COMPANY
    assert company.description == "Developer"
    # developer is matched but not scored
    assert project.relevance_score == 0.0
    assert project.name == "Bayfront Tower"
    assert project.description == "Residential in Miami, FL"
    assert project.fields["developer"] == "Acme Corp"
    assert outcome.analytics.results_by_type == {"people": 0, "companies": 1, "projects": 1}


async def test_results_sorted_descending_and_ties_keep_merge_order() -> None:
    people = [
        {"id": "p1", "name": "Zed", "title": "Tower lead", "company": None},
        {"id": "p2", "name": "Tower", "title": None, "company": None},
    ]
    companies = [{"id": "c1", "name": "Big Tower", "description": None, "sectors": None}]
    projects = [{"id": "pr1", "title": "Zed", "description": None, "location": "Tower st"}]
    repo = _store(
        {
            EntityCategory.PERSON: people,
            EntityCategory.COMPANY: companies,
            EntityCategory.PROJECT: projects,
        }
    )
    outcome = await SearchService(repo).search("tower")
    scores = [c.relevance_score for c in outcome.results]
    assert scores == sorted(scores, reverse=True)
    assert outcome.results[0].id == "p2"
    # p2 exact 100, c1 substring 60, p1 title prefix 80/2, pr1 location prefix 80/3
    assert [c.id for c in outcome.results] == ["p2", "c1", "p1", "pr1"]


async def test_equal_scores_keep_people_companies_projects_order() -> None:
    repo = _store(
        {
            EntityCategory.PERSON: [{"id": "p1", "name": "Acme"}],
            EntityCategory.COMPANY: [{"id": "c1", "name": "Acme"}],
            EntityCategory.PROJECT: [{"id": "pr1", "title": "Acme"}],
        }
    )
    outcome = await SearchService(repo).search("acme")
    assert [c.id for c in outcome.results] == ["p1", "c1", "pr1"]


async def test_max_results_one_returns_single_result_and_full_total() -> None:
    repo = _store(
        {
            EntityCategory.PERSON: [{"id": "p1", "name": "Acme Person"}],
            EntityCategory.COMPANY: [ACME_COMPANY],
            EntityCategory.PROJECT: [ACME_PROJECT],
        }
    )
    outcome = await SearchService(repo).search("acme", SearchOptions(max_results=1))
    assert len(outcome.results) == 1
    assert outcome.results[0].id == "c1"
    assert outcome.total_results == 3
    assert [call.args[2] for call in repo.search_category.await_args_list] == [1, 1, 1]


async def test_failing_lookup_degrades_to_zero_rows() -> None:
    repo = _store(
        {
            EntityCategory.PERSON: RuntimeError("people table missing"),
            EntityCategory.COMPANY: [ACME_COMPANY],
            EntityCategory.PROJECT: [ACME_PROJECT],
        }
    )
    outcome = await SearchService(repo).search("acme")
    assert outcome.analytics.results_by_type == {"people": 0, "companies": 1, "projects": 1}
    assert outcome.total_results == 2
    assert outcome.analytics.failed_categories is None
    failed = [lk for lk in outcome.lookups if isinstance(lk, LookupFailed)]
    assert len(failed) == 1
    assert failed[0].category is EntityCategory.PERSON
    assert failed[0].reason == "people table missing"
    assert sum(isinstance(lk, LookupOk) for lk in outcome.lookups) == 2


async def test_failed_categories_exposed_when_enabled() -> None:
    repo = _store({EntityCategory.PROJECT: RuntimeError("timeout")})
    outcome = await SearchService(repo, expose_lookup_errors=True).search("acme")
    assert outcome.analytics.failed_categories == ["projects"]


async def test_all_lookups_failing_still_returns_empty_outcome() -> None:
    boom = RuntimeError("down")
    repo = _store(
        {
            EntityCategory.PERSON: boom,
            EntityCategory.COMPANY: boom,
            EntityCategory.PROJECT: boom,
        }
    )
    outcome = await SearchService(repo).search("acme")
    assert outcome.results == []
    assert outcome.total_results == 0


async def test_include_results_false_keeps_analytics() -> None:
    repo = _store({EntityCategory.COMPANY: [ACME_COMPANY]})
    outcome = await SearchService(repo).search(
        "acme", SearchOptions(include_results=False)
    )
    assert outcome.results == []
    assert outcome.total_results == 1
    assert outcome.analytics.results_by_type["companies"] == 1


async def test_total_is_never_less_than_returned_results() -> None:
    people = [{"id": f"p{i}", "name": f"Acme {i}"} for i in range(4)]
    repo = _store({EntityCategory.PERSON: people, EntityCategory.COMPANY: [ACME_COMPANY]})
    outcome = await SearchService(repo).search("acme", SearchOptions(max_results=2))
    assert len(outcome.results) <= 2
    assert outcome.total_results >= len(outcome.results)
    assert outcome.total_results == 2  # per-category cap ceil(2/3) = 1
