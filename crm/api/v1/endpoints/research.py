"""Saved research API: store a user's research about a person, company or project."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from crm.api.v1.dependencies import get_research_service
from crm.application.dtos.research import SaveResearchCommand
from crm.application.use_cases.research import SaveResearchService
from crm.domain.exceptions import ResearchValidationException
from crm.schemas.research import SaveResearchRequest, SaveResearchResponse

router = APIRouter()


@router.post(
    "",
    response_model=SaveResearchResponse,
    responses={
        400: {"description": "entityType, entityName, and data are required"},
        500: {"description": "Store failure; saved is false"},
    },
)
async def save_research(
    request: Request,
    research_svc: Annotated[SaveResearchService, Depends(get_research_service)],
) -> SaveResearchResponse:
    """Upsert a research record (by id) and log a save_research analytics row."""
    raw = await request.body()
    try:
        body = SaveResearchRequest.model_validate_json(raw or b"{}")
    except ValidationError as e:
        raise ResearchValidationException(
            f"Invalid request body: {e.errors()[0].get('msg', 'invalid')}"
            if e.errors()
            else "Invalid request body"
        ) from e

    outcome = await research_svc.save(
        SaveResearchCommand(
            id=body.id,
            entity_type=body.entity_type or "",
            entity_name=body.entity_name or "",
            data=body.data,
            confidence=body.confidence,
            sources=body.sources or [],
            user_id=body.user_id,
            session_id=getattr(request.state, "request_id", None),
        )
    )
    return SaveResearchResponse.from_outcome(outcome)


@router.options("", include_in_schema=False)
async def save_research_options() -> Response:
    """Answer non-CORS OPTIONS with an empty 200 (CORS preflight is handled by middleware)."""
    return Response(status_code=200)
