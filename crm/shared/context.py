"""Request-scoped request id using contextvars.

Bound per request by RequestContextMiddleware; read by the logging filter
so every log line of a request carries its id.
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def bind_request_id(request_id: str) -> Token:
    """Bind the id for the current task; pass the token to reset_request_id."""
    return _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id.reset(token)


def current_request_id() -> str | None:
    return _request_id.get()
