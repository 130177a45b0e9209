"""Timestamp and id helpers."""

from datetime import datetime, timedelta, timezone

from crm.shared.utils import generate_cuid, generate_research_id, utc_isoformat


def test_utc_isoformat_uses_milliseconds_and_z() -> None:
    dt = datetime(2025, 1, 15, 12, 0, 0, 123456, tzinfo=timezone.utc)
    assert utc_isoformat(dt) == "2025-01-15T12:00:00.123Z"


def test_utc_isoformat_converts_offsets_and_naive_values() -> None:
    plus_two = datetime(2025, 1, 15, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert utc_isoformat(plus_two) == "2025-01-15T12:00:00.000Z"
    assert utc_isoformat(datetime(2025, 1, 15, 12, 0)) == "2025-01-15T12:00:00.000Z"


def test_utc_isoformat_defaults_to_now() -> None:
    assert utc_isoformat().endswith("Z")


def test_generated_ids_are_unique() -> None:
    assert generate_cuid() != generate_cuid()
    research_id = generate_research_id()
    assert research_id.startswith("research-")
    assert len(research_id) > len("research-")


def test_request_id_filter_reads_bound_context() -> None:
    import logging

    from crm.shared.context import bind_request_id, reset_request_id
    from crm.shared.telemetry.logging import RequestIdFilter

    record = logging.LogRecord("crm", logging.INFO, __file__, 1, "msg", None, None)
    RequestIdFilter().filter(record)
    assert record.request_id == "-"

    token = bind_request_id("req-1")
    try:
        RequestIdFilter().filter(record)
    finally:
        reset_request_id(token)
    assert record.request_id == "req-1"
