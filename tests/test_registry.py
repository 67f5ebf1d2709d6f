"""Tests for perch.routing.registry — two-level, registration-ordered table."""

from perch.routing.registry import RouteRegistry
from perch.routing.route import Route


def _first() -> str:
    return "first"


def _second() -> str:
    return "second"


class TestRegister:
    def test_register_returns_route(self) -> None:
        registry = RouteRegistry()
        route = registry.register("GET", "/users", _first)
        assert route == Route(method="GET", pattern="/users", handler=_first)

    def test_routes_for_in_registration_order(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "/b", _first)
        registry.register("GET", "/a", _first)
        registry.register("GET", "/c", _first)

        assert [r.pattern for r in registry.routes_for("GET")] == ["/b", "/a", "/c"]

    def test_methods_are_separate(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "/users", _first)
        registry.register("POST", "/users", _second)

        assert registry.routes_for("GET")[0].handler is _first
        assert registry.routes_for("POST")[0].handler is _second

    def test_method_keys_are_exact(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "/users", _first)
        assert registry.routes_for("get") == ()

    def test_unknown_method_is_empty(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "/users", _first)
        assert registry.routes_for("DELETE") == ()

    def test_no_validation(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "a//:", _first)
        assert ("GET", "a//:") in registry


class TestOverwrite:
    def test_last_registration_wins(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "/users", _first)
        registry.register("GET", "/users", _second)

        routes = registry.routes_for("GET")
        assert len(routes) == 1
        assert routes[0].handler is _second

    def test_overwrite_keeps_original_position(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "/a", _first)
        registry.register("GET", "/b", _first)
        registry.register("GET", "/a", _second)

        routes = registry.routes_for("GET")
        assert [r.pattern for r in routes] == ["/a", "/b"]
        assert routes[0].handler is _second


class TestIntrospection:
    def test_len_counts_all_methods(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "/a", _first)
        registry.register("POST", "/a", _first)
        registry.register("GET", "/b", _first)
        assert len(registry) == 3

    def test_iter_groups_by_method(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "/a", _first)
        registry.register("POST", "/a", _first)
        registry.register("GET", "/b", _first)

        assert [(r.method, r.pattern) for r in registry] == [
            ("GET", "/a"),
            ("GET", "/b"),
            ("POST", "/a"),
        ]

    def test_methods(self) -> None:
        registry = RouteRegistry()
        registry.register("POST", "/a", _first)
        registry.register("GET", "/a", _first)
        assert registry.methods == ("POST", "GET")

    def test_get(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "/a", _first)
        route = registry.get("GET", "/a")
        assert route is not None
        assert route.handler is _first
        assert registry.get("GET", "/missing") is None
        assert registry.get("PUT", "/a") is None

    def test_contains(self) -> None:
        registry = RouteRegistry()
        registry.register("GET", "/a", _first)
        assert ("GET", "/a") in registry
        assert ("POST", "/a") not in registry
        assert "/a" not in registry
