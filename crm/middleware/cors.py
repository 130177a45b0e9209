"""CORS for every configured origin, with bodiless preflight answers."""

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

_BODY_HEADERS = ("content-length", "content-type")


class PreflightCORSMiddleware(CORSMiddleware):
    """Starlette CORS whose accepted preflights are an empty 200."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in _BODY_HEADERS
        }
        return Response(status_code=200, headers=headers)
