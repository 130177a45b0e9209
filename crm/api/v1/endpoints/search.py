"""Intelligent search API: ranked search across people, companies and projects."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from crm.api.v1.dependencies import get_search_service
from crm.application.dtos.search import SearchOptions
from crm.application.use_cases.search import SearchService
from crm.core.config import Settings, get_settings
from crm.domain.exceptions import SearchFailedException, SearchValidationException
from crm.schemas.search import SearchRequest, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _validation_message(exc: ValidationError) -> str:
    """Short client-facing message for the first validation error."""
    errors = exc.errors()
    if any(err.get("loc", ())[:1] == ("query",) for err in errors):
        return "Query parameter is required"
    if not errors:
        return "Invalid request body"
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ()))
    return f"Invalid request body: {loc + ': ' if loc else ''}{first.get('msg', 'invalid')}"


async def _read_search_request(request: Request) -> SearchRequest:
    """Parse and validate the JSON body; an empty body counts as {}."""
    raw = await request.body()
    try:
        return SearchRequest.model_validate_json(raw or b"{}")
    except ValidationError as e:
        raise SearchValidationException(_validation_message(e)) from e


@router.post(
    "/intelligent",
    response_model=SearchResponse,
    responses={
        400: {"description": "Missing/blank query or malformed body"},
        500: {"description": "Unexpected failure; results is empty"},
    },
)
async def intelligent_search(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """Search people, companies and projects; return ranked results and analytics.

    A category whose lookup fails contributes no rows; the request still succeeds.
    """
    body = await _read_search_request(request)
    options = SearchOptions(
        include_results=body.include_results,
        max_results=(
            body.max_results
            if body.max_results is not None
            else settings.search_default_max_results
        ),
    )
    try:
        outcome = await search_svc.search(body.query, options)
        payload = SearchResponse.from_outcome(outcome).to_json()
    except SearchValidationException:
        raise
    except Exception as e:
        logger.exception("Intelligent search error")
        raise SearchFailedException() from e
    return JSONResponse(content=payload)


@router.options("/intelligent", include_in_schema=False)
async def intelligent_search_options() -> Response:
    """Answer non-CORS OPTIONS with an empty 200 (CORS preflight is handled by middleware)."""
    return Response(status_code=200)
