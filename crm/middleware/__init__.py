"""HTTP middleware: CORS preflights, request and correlation IDs."""

from crm.middleware.cors import PreflightCORSMiddleware
from crm.middleware.request_context import RequestContextMiddleware

__all__ = ["PreflightCORSMiddleware", "RequestContextMiddleware"]
