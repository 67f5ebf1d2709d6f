"""Tests for perch.routing.route value types."""

import dataclasses

import pytest

from perch.routing.route import PathSegment, Route, RouteMatch


def show_order(id: str) -> str:
    return id


class TestValueTypes:
    def test_segment_defaults_to_literal(self) -> None:
        assert PathSegment("orders") == PathSegment("orders", is_param=False, param_name=None)

    def test_route_positional_order(self) -> None:
        route = Route("GET", "/orders/:id", show_order, "order")
        assert (route.method, route.pattern, route.handler, route.name) == (
            "GET",
            "/orders/:id",
            show_order,
            "order",
        )

    def test_routes_compare_by_value(self) -> None:
        assert Route("GET", "/a", show_order) == Route("GET", "/a", show_order)
        assert Route("GET", "/a", show_order) != Route("POST", "/a", show_order)

    @pytest.mark.parametrize(
        "obj",
        [
            PathSegment("orders"),
            Route("GET", "/", show_order),
            RouteMatch(Route("GET", "/", show_order), {}),
        ],
    )
    def test_frozen(self, obj: object) -> None:
        field = dataclasses.fields(obj)[0].name  # type: ignore[arg-type]
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(obj, field, "changed")

    def test_match_params_are_mutable_dict(self) -> None:
        m = RouteMatch(Route("GET", "/orders/:id", show_order), {"id": "5"})
        m.path_params["id"] = "6"
        assert m.path_params == {"id": "6"}
