"""Span helpers: the traced decorator and search-specific span data."""

import inspect
from collections.abc import Callable, Mapping
from functools import wraps
from typing import Any

from opentelemetry import trace

_tracer = trace.get_tracer("crm")


def traced(span_name: str) -> Callable:
    """Run the decorated coroutine function inside a span named span_name.

    The span records any exception and is marked as failed; the exception
    propagates unchanged.
    """

    def decorator(func: Callable) -> Callable:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"traced() needs an async function, got {func.__qualname__}")

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            with _tracer.start_as_current_span(span_name):
                return await func(*args, **kwargs)

        return wrapper

    return decorator


def _current_span() -> trace.Span | None:
    span = trace.get_current_span()
    return span if span.is_recording() else None


def record_search_summary(
    term: str, results_by_type: Mapping[str, int], failed: list[str]
) -> None:
    """Per-collection counts and failed lookups on the current span."""
    span = _current_span()
    if span is None:
        return
    span.set_attribute("search.term_length", len(term))
    span.set_attribute("search.total_results", sum(results_by_type.values()))
    for collection, count in results_by_type.items():
        span.set_attribute(f"search.results.{collection}", count)
    if failed:
        span.set_attribute("search.failed_collections", failed)


def record_lookup_failure(collection: str, error: BaseException) -> None:
    """Span event for a category lookup that degraded to zero rows."""
    span = _current_span()
    if span is not None:
        span.add_event(
            "search.lookup_failed",
            {
                "collection": collection,
                "error.type": type(error).__name__,
                "error.message": str(error),
            },
        )
