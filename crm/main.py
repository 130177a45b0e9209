"""ASGI entry point: `uvicorn crm.main:app`.

create_app() only wires things together (lifespan, exception handlers,
middleware, routers) and reads settings when called, so tests can change
the environment and clear the get_settings cache first.
"""

from fastapi import FastAPI

from crm.api.v1 import api_router
from crm.core.config import get_settings
from crm.core.exception_handlers import register_exception_handlers
from crm.core.lifespan import create_lifespan
from crm.middleware import PreflightCORSMiddleware, RequestContextMiddleware


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    register_exception_handlers(app)

    # add_middleware prepends: the request context is outermost, CORS inside it.
    app.add_middleware(
        PreflightCORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header, settings.correlation_id_header],
    )
    app.add_middleware(
        RequestContextMiddleware,
        request_id_header=settings.request_id_header,
        correlation_id_header=settings.correlation_id_header,
    )

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
