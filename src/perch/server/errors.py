"""Error responses for perch requests.

Maps HTTPError exceptions and unexpected handler failures to plain-text
Response objects, the way a bare HTTP server reports them.
"""

import logging
import traceback

from perch.errors import HTTPError
from perch.http.request import Request
from perch.http.response import Response

logger = logging.getLogger("perch.server")

PLAIN_TEXT = "text/plain; charset=utf-8"


def plain_error(status: int, detail: str) -> Response:
    """Plain-text error body terminated by a newline, no content sniffing."""
    return Response(
        body=f"{detail}\n",
        status=status,
        content_type=PLAIN_TEXT,
        headers=(("X-Content-Type-Options", "nosniff"),),
    )


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to its response.

    ``NotFound`` from the router lands here and produces
    ``404 page not found``.
    """
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    response = plain_error(exc.status, exc.detail or f"Error {exc.status}")
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request, debug: bool) -> Response:
    """Handle unexpected handler exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        detail = "".join(traceback.format_exception(exc)).rstrip("\n")
        return plain_error(500, detail)

    return plain_error(500, "Internal Server Error")
