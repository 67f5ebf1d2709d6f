"""Routing — registration-ordered route table with ``:name`` parameters.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes.
"""

from perch.routing.matcher import PARAM_MARKER, match, split_path
from perch.routing.registry import RouteRegistry
from perch.routing.route import PathSegment, Route, RouteMatch
from perch.routing.router import Router

__all__ = [
    "PARAM_MARKER",
    "PathSegment",
    "Route",
    "RouteMatch",
    "RouteRegistry",
    "Router",
    "match",
    "split_path",
]
