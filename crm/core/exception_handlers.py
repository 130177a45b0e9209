"""Exception-to-response mapping, registered once by create_app().

Domain errors serialize themselves (CrmException.to_dict), so search and
research failures keep their own envelopes; the status comes from
error_code. Framework errors get the {error, message} envelope.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from crm.core.config import get_settings
from crm.domain.exceptions import CrmException

logger = logging.getLogger(__name__)

# error_code -> HTTP status; unknown codes are client errors
_STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "SEARCH_FAILED": 500,
    "RESEARCH_SAVE_FAILED": 500,
    "SERVICE_UNAVAILABLE": 503,
}


def status_for(exc: CrmException) -> int:
    return _STATUS_BY_ERROR_CODE.get(exc.error_code, 400)


def _crm_exception_handler(request: Request, exc: CrmException) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.warning(
            "%s %s -> %d %s: %s",
            request.method,
            request.url.path,
            status,
            exc.error_code,
            exc.message,
        )
    return JSONResponse(status_code=status, content=exc.to_dict())


def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422 for parameters FastAPI validates itself (bodies are parsed by the endpoints)."""
    details: list[dict[str, Any]] = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": details,
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """404 / 405 and friends; the Allow header of a 405 is preserved."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=exc.headers,
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort 500. The exception text is only returned when DEBUG is on."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CrmException, _crm_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
