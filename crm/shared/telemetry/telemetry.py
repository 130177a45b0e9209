"""OpenTelemetry tracing setup.

TELEMETRY_EXPORTER selects console (development), otlp (gRPC collector
such as Jaeger or Tempo) or none (spans sampled and dropped). FastAPI
requests and SQLAlchemy queries are instrumented; the health probe is not.
"""

import logging
import threading

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

UNTRACED_URLS = "/api/v1/health"


class TelemetryConfig:
    """Tracer provider for one service instance plus its instrumentations."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @staticmethod
    def _exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
        if exporter_type == "none":
            return None
        if exporter_type == "otlp":
            if otlp_endpoint:
                return OTLPSpanExporter(
                    endpoint=otlp_endpoint,
                    insecure=otlp_endpoint.startswith("http://"),
                )
            logger.warning("TELEMETRY_OTLP_ENDPOINT is not set; exporting spans to console")
        return ConsoleSpanExporter()

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Install the global tracer provider.

        Returns None when the SDK fails to initialize; the service keeps
        running untraced in that case.
        """
        resource = Resource.create(
            {
                SERVICE_NAME: self.service_name,
                SERVICE_VERSION: self.service_version,
                "deployment.environment": self.environment,
            }
        )
        try:
            provider = TracerProvider(
                resource=resource,
                sampler=ParentBased(TraceIdRatioBased(sample_rate)),
            )
            exporter = self._exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception:
            logger.exception("OpenTelemetry setup failed; tracing disabled")
            return None
        self.tracer_provider = provider
        logger.info(
            "Tracing %s %s (exporter=%s, sample_rate=%s)",
            self.service_name,
            self.service_version,
            exporter_type,
            sample_rate,
        )
        return provider

    def instrument_fastapi(self, app: FastAPI) -> None:
        if self.tracer_provider is None:
            return
        FastAPIInstrumentor.instrument_app(
            app,
            tracer_provider=self.tracer_provider,
            excluded_urls=UNTRACED_URLS,
        )

    def instrument_sqlalchemy(self, engine: AsyncEngine) -> None:
        """Trace queries of the async engine (instrumented through its sync engine)."""
        if self.tracer_provider is None:
            return
        SQLAlchemyInstrumentor().instrument(
            engine=engine.sync_engine,
            tracer_provider=self.tracer_provider,
        )

    def shutdown(self) -> None:
        """Flush pending spans and stop the provider."""
        if self.tracer_provider is not None:
            self.tracer_provider.shutdown()
            self.tracer_provider = None


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.Lock()


def get_telemetry() -> TelemetryConfig | None:
    """Telemetry installed by the lifespan, if any."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
