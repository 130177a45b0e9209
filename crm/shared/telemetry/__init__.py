"""Shared telemetry: logging setup, OpenTelemetry config, and span helpers."""

from crm.shared.telemetry.logging import setup_logging
from crm.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from crm.shared.telemetry.tracing import (
    record_lookup_failure,
    record_search_summary,
    traced,
)

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "record_lookup_failure",
    "record_search_summary",
]
