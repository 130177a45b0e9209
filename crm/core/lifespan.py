"""Startup and shutdown for the API process.

Startup configures logging and, when TELEMETRY_ENABLED, tracing. The
database engine is not opened here; the first request that needs it
builds it. Shutdown flushes spans and closes pooled connections.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from crm.core.config import Settings, get_settings
from crm.infrastructure.persistence.database import dispose_engine
from crm.shared.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
    setup_logging,
)

logger = logging.getLogger(__name__)


def _start_tracing(app: FastAPI, settings: Settings) -> None:
    telemetry = TelemetryConfig(
        service_name=settings.app_name,
        service_version=settings.app_version,
        environment=settings.telemetry_environment,
    )
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    telemetry.instrument_fastapi(app)
    set_telemetry(telemetry)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    setup_logging()
    if settings.telemetry_enabled:
        _start_tracing(app, settings)
    if not settings.database_url:
        logger.warning("DATABASE_URL is not set; search and research answer 503")
    logger.info("%s %s ready", settings.app_name, settings.app_version)

    yield

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)
    await dispose_engine()
    logger.info("%s stopped", settings.app_name)
