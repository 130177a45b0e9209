"""Domain exceptions.

Each exception carries an error_code (mapped to an HTTP status by the
exception handlers) and renders its own response body through to_dict():
search and research errors use the envelopes their clients expect.
"""

from typing import Any


class CrmException(Exception):
    """Error raised by the CRM service layers.

    error_code selects the HTTP status in crm.core.exception_handlers and
    defaults to the class name; details is optional structured context.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = dict(details or {})

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the exception handler."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class SqlNotConfiguredException(CrmException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            "Database is not configured (DATABASE_URL is unset)", "SERVICE_UNAVAILABLE"
        )


class SearchException(CrmException):
    """Base for intelligent-search errors. Body always carries an empty result list."""

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "error": self.message, "results": []}


class SearchValidationException(SearchException):
    """Raised when the search request is malformed (e.g. blank query)."""

    def __init__(self, message: str = "Query parameter is required") -> None:
        super().__init__(message, "VALIDATION_ERROR")


class SearchFailedException(SearchException):
    """Raised when search fails outside the per-category lookups."""

    def __init__(self, message: str = "Internal server error during search") -> None:
        super().__init__(message, "SEARCH_FAILED")


class ResearchException(CrmException):
    """Base for saved-research errors. Body always reports saved=false."""

    def to_dict(self) -> dict[str, Any]:
        return {"success": False, "error": self.message, "saved": False}


class ResearchValidationException(ResearchException):
    """Raised when a research save request lacks entityType, entityName or data."""

    def __init__(
        self, message: str = "entityType, entityName, and data are required"
    ) -> None:
        super().__init__(message, "VALIDATION_ERROR")


class ResearchSaveException(ResearchException):
    """Raised when the research record could not be written to the store."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Failed to save research: {reason}",
            "RESEARCH_SAVE_FAILED",
            {"reason": reason},
        )
