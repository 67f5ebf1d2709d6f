"""The perch App: a route table plus an ASGI entry point.

Two phases. While configuring, routes and lifespan hooks are collected.
The first request, lifespan startup, or ``run()`` compiles the table
into a ``Router``; after that the app is read-only.
"""

import threading
from collections.abc import Callable, Sequence

from perch._internal.asgi import Receive, Scope, Send
from perch._internal.invoke import invoke
from perch._internal.types import Handler, Hook
from perch.config import AppConfig
from perch.routing.params import validate_pattern
from perch.routing.route import Route
from perch.routing.router import Router
from perch.server.handler import handle_request


class App:
    """A perch application.

    Register handlers with ``@app.route(...)`` or ``app.handle(...)``, then
    hand the app to any ASGI server or call ``app.run()``.

    Compilation happens once. Concurrent first requests race on a lock
    and the loser sees the already-built router; from then on every
    request reads the router without locking.
    """

    __slots__ = (
        "_compile_lock",
        "_hooks",
        "_router",
        "_routes",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._routes: list[Route] = []
        self._hooks: dict[str, list[Hook]] = {"startup": [], "shutdown": []}
        self._router: Router | None = None
        self._compile_lock = threading.Lock()

    @property
    def frozen(self) -> bool:
        """True once the route table has been compiled."""
        return self._router is not None

    # -- Registration --

    def route(
        self,
        pattern: str,
        *,
        methods: Sequence[str] = ("GET",),
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Decorator form of ``handle()`` for one or more methods.

        Args:
            pattern: ``/``-separated pattern; ``:name`` segments capture,
                e.g. ``"/users/:id"``.
            methods: Methods to bind the handler to. GET when omitted.
            name: Label shown by ``perch routes``.
        """

        def register(func: Handler) -> Handler:
            for method in methods:
                self.handle(method, pattern, func, name=name)
            return func

        return register

    def handle(
        self,
        method: str,
        pattern: str,
        handler: Handler,
        *,
        name: str | None = None,
    ) -> None:
        """Bind *handler* to ``(method, pattern)``.

        The method is upper-cased. Binding a pair that already exists
        swaps its handler and leaves its precedence where it was.
        """
        self._ensure_configurable()
        if self.config.strict_patterns:
            validate_pattern(pattern)
        self._routes.append(Route(method.upper(), pattern, handler, name))

    def on_startup(self, func: Hook) -> Hook:
        """Run *func* (sync or async) when the server sends lifespan startup."""
        self._ensure_configurable()
        self._hooks["startup"].append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Run *func* (sync or async) when the server sends lifespan shutdown."""
        self._ensure_configurable()
        self._hooks["shutdown"].append(func)
        return func

    # -- Serving --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Compile the routes and serve them with the development server.

        *host* and *port* fall back to ``self.config``.
        """
        self._compile()

        from perch.server.dev import run_dev_server

        run_dev_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
            reload_dirs=self.config.reload_dirs,
            log_level=self.config.log_level,
        )

    @property
    def router(self) -> Router:
        """The compiled router. Accessing it compiles the app."""
        return self._compile()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 callable: lifespan is handled here, HTTP goes to the handler."""
        if scope["type"] == "lifespan":
            await self._lifespan(receive, send)
        else:
            await handle_request(
                scope, receive, send, router=self.router, debug=self.config.debug
            )

    async def run_hooks(self, phase: str) -> None:
        """Invoke the ``"startup"`` or ``"shutdown"`` hooks in registration order."""
        for hook in self._hooks[phase]:
            await invoke(hook)

    async def _lifespan(self, receive: Receive, send: Send) -> None:
        self._compile()

        while True:
            event = await receive()
            if event["type"] == "lifespan.startup":
                try:
                    await self.run_hooks("startup")
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif event["type"] == "lifespan.shutdown":
                await self.run_hooks("shutdown")
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Compilation --

    def _compile(self) -> Router:
        router = self._router
        if router is not None:
            return router
        with self._compile_lock:
            if self._router is None:
                router = Router(indexed=self.config.route_index)
                for route in self._routes:
                    router.add(route)
                router.compile()
                self._router = router
            return self._router

    def _ensure_configurable(self) -> None:
        if self._router is not None:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and hooks before the first request or app.run()."
            )
            raise RuntimeError(msg)
