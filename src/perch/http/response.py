"""Outgoing responses.

A ``Response`` never changes after construction; the ``with_*`` methods
return modified copies, so responses can be shared and built up step by
step.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace

_HTML = "text/html; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """Status, content type, extra headers and a body.

    ::

        Response("Created").with_status(201).with_header("Location", "/users/7")

    ``content_type`` is kept apart from ``headers`` and written first on
    the wire; ``Content-Length`` is computed when the response is sent.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = _HTML
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Copy with one more header. Existing values for *name* are kept."""
        return self.with_headers(((name, value),))

    def with_headers(self, headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> Response:
        """Copy with every pair in *headers* appended, in order."""
        pairs = headers.items() if isinstance(headers, Mapping) else headers
        return replace(self, headers=self.headers + tuple(pairs))

    def with_content_type(self, content_type: str) -> Response:
        return replace(self, content_type=content_type)

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        wanted = name.lower()
        return next((v for k, v in self.headers if k.lower() == wanted), None)

    @property
    def body_bytes(self) -> bytes:
        """The body encoded as UTF-8 when it is text."""
        body = self.body
        return body.encode("utf-8") if isinstance(body, str) else body

    @property
    def text(self) -> str:
        """The body decoded as UTF-8 when it is bytes."""
        body = self.body
        return body.decode("utf-8") if isinstance(body, bytes) else body
