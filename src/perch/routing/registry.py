"""Route registry — method → (pattern → route), in registration order.

A pattern keeps the position of its first registration. Registering the
same ``(method, pattern)`` again replaces the handler in place: the last
registration wins, and precedence among overlapping patterns does not move.
"""

from collections.abc import Callable, Iterator
from typing import Any

from perch.routing.route import Route


class RouteRegistry:
    """Two-level route table.

    Usage::

        registry = RouteRegistry()
        registry.register("GET", "/users/:id", show_user)
        for route in registry.routes_for("GET"):
            ...

    No validation happens here; malformed patterns are stored as given.
    """

    __slots__ = ("_by_method",)

    def __init__(self) -> None:
        self._by_method: dict[str, dict[str, Route]] = {}

    def register(
        self,
        method: str,
        pattern: str,
        handler: Callable[..., Any],
        *,
        name: str | None = None,
    ) -> Route:
        """Bind *handler* to ``(method, pattern)``, replacing any previous binding."""
        route = Route(method=method, pattern=pattern, handler=handler, name=name)
        self.register_route(route)
        return route

    def register_route(self, route: Route) -> None:
        """Store a prebuilt ``Route``."""
        patterns = self._by_method.setdefault(route.method, {})
        patterns[route.pattern] = route

    def routes_for(self, method: str) -> tuple[Route, ...]:
        """Routes registered for *method*, in registration order.

        An unknown method yields an empty tuple.
        """
        patterns = self._by_method.get(method)
        if not patterns:
            return ()
        return tuple(patterns.values())

    def get(self, method: str, pattern: str) -> Route | None:
        """Return the route bound to exactly ``(method, pattern)``, if any."""
        return self._by_method.get(method, {}).get(pattern)

    @property
    def methods(self) -> tuple[str, ...]:
        """Methods with at least one route, in first-registration order."""
        return tuple(self._by_method)

    def __iter__(self) -> Iterator[Route]:
        for patterns in self._by_method.values():
            yield from patterns.values()

    def __len__(self) -> int:
        return sum(len(patterns) for patterns in self._by_method.values())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        method, pattern = key
        return pattern in self._by_method.get(method, {})
