"""Request and correlation IDs (raw ASGI).

X-Request-ID is forwarded when the client sends a safe value, otherwise a
UUID4 is generated. X-Correlation-ID is forwarded the same way and falls
back to the request id. Both are stored on scope state
(request.state.request_id / correlation_id) and echoed on the response;
the request id is also bound to a contextvar for logging.
"""

import re
import uuid
from typing import Callable

from crm.shared.context import bind_request_id, reset_request_id

# Client ids outside this set are replaced (log injection).
_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def _header(scope: dict, name: bytes) -> str | None:
    for key, value in scope.get("headers", []):
        if key.lower() == name:
            return value.decode("latin-1").strip()
    return None


def sanitize_request_id(raw: str | None) -> str | None:
    """Return raw when it is a safe id, else None."""
    if raw and _SAFE_ID.match(raw):
        return raw
    return None


def RequestContextMiddleware(
    app: Callable,
    request_id_header: str = "X-Request-ID",
    correlation_id_header: str = "X-Correlation-ID",
) -> Callable:
    """Wrap app so each HTTP request carries a request id and a correlation id."""
    rid_name = request_id_header.lower().encode()
    cid_name = correlation_id_header.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        request_id = sanitize_request_id(_header(scope, rid_name)) or str(uuid.uuid4())
        correlation_id = sanitize_request_id(_header(scope, cid_name)) or request_id
        state = scope.setdefault("state", {})
        state["request_id"] = request_id
        state["correlation_id"] = correlation_id

        async def send_with_ids(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (rid_name, request_id.encode()),
                    (cid_name, correlation_id.encode()),
                ]
            await send(message)

        token = bind_request_id(request_id)
        try:
            await app(scope, receive, send_with_ids)
        finally:
            reset_request_id(token)

    return asgi_app
