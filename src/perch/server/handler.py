"""HTTP dispatch for one ASGI request.

The request handler is where ASGI meets perch: it wraps the scope in a
``Request``, asks the router for a route, runs that route's handler and
writes whatever comes back. Every outcome, including "no route", ends
as a response; nothing propagates to the ASGI server.
"""

import inspect
from typing import Any

from perch._internal.asgi import Receive, Scope, Send
from perch._internal.invoke import invoke
from perch._internal.types import Handler
from perch.errors import HTTPError
from perch.http.request import Request
from perch.http.response import Response
from perch.routing.route import RouteMatch
from perch.routing.router import Router
from perch.server.errors import handle_http_error, handle_internal_error
from perch.server.negotiation import negotiate
from perch.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    debug: bool = False,
) -> None:
    """Serve one ``http`` scope; other scope types are ignored.

    A miss in the router raises ``NotFound``, which is answered here with
    the plain ``404 page not found`` body and no handler is called.
    """
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    try:
        response = await dispatch(router.match(request.method, request.path), request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug)

    await send_response(response, send)


async def dispatch(match: RouteMatch, request: Request) -> Response:
    """Run the matched handler for *request* and turn its result into a Response."""
    # Captured names overwrite; anything already in the store is kept
    request.path_params.update(match.path_params)

    handler = match.route.handler
    result = await invoke(handler, **handler_arguments(handler, request))
    return negotiate(result)


def handler_arguments(handler: Handler, request: Request) -> dict[str, Any]:
    """Keyword arguments for *handler*, chosen by its signature.

    - a parameter called ``request``, or annotated ``Request``, gets the request
    - a parameter named like a path parameter gets its value, passed through
      the annotation (``id: int``) when it has one; if that conversion fails
      the raw string is passed instead

    Anything else is left to the handler's own defaults.
    """
    arguments: dict[str, Any] = {}
    for name, param in inspect.signature(handler, eval_str=True).parameters.items():
        if name == "request" or param.annotation is Request:
            arguments[name] = request
            continue
        if name not in request.path_params:
            continue
        raw = request.path_params[name]
        arguments[name] = _coerce(raw, param.annotation)
    return arguments


def _coerce(raw: str, annotation: Any) -> Any:
    if annotation is inspect.Parameter.empty or annotation is str:
        return raw
    try:
        return annotation(raw)
    except (TypeError, ValueError):
        return raw
