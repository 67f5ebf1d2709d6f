"""Handler return values to Response objects.

Handlers may return a finished ``Response`` or a plain value; plain values
are mapped by type, with no inspection of the request.
"""

import json as json_module
from typing import Any

from perch.http.response import Response

JSON = "application/json; charset=utf-8"
OCTET_STREAM = "application/octet-stream"


def negotiate(value: Any) -> Response:
    """Wrap a handler's return value in a ``Response``.

    ================================  ===================================
    returned                          response
    ================================  ===================================
    ``Response``                      unchanged
    ``None``                          204 with an empty body
    ``str``                           200 ``text/html``
    ``bytes``                         200 ``application/octet-stream``
    ``dict`` or ``list``              200 JSON
    ``(value, status)``               *value* mapped, status replaced
    ``(value, status, headers)``      as above, plus the headers
    ================================  ===================================
    """
    match value:
        case Response():
            return value
        case None:
            return Response(status=204)
        case str():
            return Response(value)
        case bytes():
            return Response(value, content_type=OCTET_STREAM)
        case dict() | list():
            return Response(json_module.dumps(value, default=str), content_type=JSON)
        case (body, int() as status):
            return negotiate(body).with_status(status)
        case (body, int() as status, dict() as headers):
            return negotiate(body).with_status(status).with_headers(headers)
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                "Return a Response, str, bytes, dict, list, None or a (value, status) tuple."
            )
            raise TypeError(msg)
