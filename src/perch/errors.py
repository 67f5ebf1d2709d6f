"""Exceptions raised by perch.

Configuration mistakes surface while routes are registered. ``HTTPError``
and its subclasses travel from the router or a handler up to the
request handler, which turns them into responses.
"""

from dataclasses import dataclass


class PerchError(Exception):
    """Root of the perch exception tree."""


class ConfigurationError(PerchError):
    """A setting or route pattern was rejected at registration time."""


@dataclass(frozen=True, slots=True)
class HTTPError(PerchError):
    """Answer the current request with *status* instead of a handler result.

    *detail* becomes the plain-text body, *headers* are added to the
    response::

        raise HTTPError(403, "Forbidden")
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        return f"{self.status}: {self.detail}" if self.detail else str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """No pattern registered for the method matched the path."""

    def __init__(self, detail: str = "404 page not found") -> None:
        super().__init__(404, detail)
