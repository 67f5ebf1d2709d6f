"""The request object passed to handlers.

Everything read from the ASGI scope is fixed when the request is built.
``path_params`` is the exception: it is the request's parameter store,
and dispatch writes the captured ``:name`` values into it.
"""

from __future__ import annotations

import json as json_module
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Any

from perch._internal.asgi import Receive, Scope

_BODY = "body"


@dataclass(frozen=True, slots=True)
class Request:
    """One HTTP request.

    ``path_params`` starts as a copy of ``scope["path_params"]`` when an
    outer ASGI layer already set some, and the router adds its captures
    on top. Read the body with ``await request.body()`` (or ``text()``,
    ``json()``); it is pulled from ASGI ``receive`` at most once.
    """

    method: str
    path: str
    headers: tuple[tuple[bytes, bytes], ...]
    path_params: dict[str, str]
    http_version: str = "1.1"
    server: tuple[str, int] | None = None
    client: tuple[str, int] | None = None

    _receive: Receive | None = field(default=None, repr=False, compare=False)
    # Holds the body once read; the dict itself is mutable under frozen=True
    _memo: dict[str, bytes] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Build a request from an ASGI HTTP scope."""
        server = scope.get("server")
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=tuple((bytes(k), bytes(v)) for k, v in scope.get("headers", ())),
            path_params=dict(scope.get("path_params") or {}),
            http_version=scope.get("http_version", "1.1"),
            server=(server[0], server[1]) if server else None,
            client=(client[0], client[1]) if client else None,
            _receive=receive,
        )

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of header *name*, compared case-insensitively."""
        wanted = name.lower().encode("latin-1")
        return next(
            (v.decode("latin-1") for k, v in self.headers if k.lower() == wanted),
            default,
        )

    @property
    def content_type(self) -> str | None:
        return self.header("content-type")

    async def stream(self) -> AsyncIterator[bytes]:
        """Yield non-empty body chunks as they arrive."""
        if self._receive is None:
            return
        more = True
        while more:
            message = await self._receive()
            if message["type"] != "http.request":
                break
            if chunk := message.get("body", b""):
                yield chunk
            more = message.get("more_body", False)

    async def body(self) -> bytes:
        if _BODY not in self._memo:
            self._memo[_BODY] = b"".join([chunk async for chunk in self.stream()])
        return self._memo[_BODY]

    async def text(self, encoding: str = "utf-8") -> str:
        return (await self.body()).decode(encoding)

    async def json(self) -> Any:
        return json_module.loads(await self.body())
