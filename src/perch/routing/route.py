"""Value types shared by the registry, the router and the CLI."""

from dataclasses import dataclass

from perch._internal.types import Handler


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One ``/``-separated piece of a pattern.

    ``"users"`` is a literal. ``":id"`` is a parameter named ``id``, and a
    bare ``":"`` is a parameter whose name is the empty string.
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """*handler* bound to *pattern* for requests with *method*.

    *name* is only a label for listings; dispatch never looks at it.
    """

    method: str
    pattern: str
    handler: Handler
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """The route chosen for a request and the values its parameters captured.

    ``path_params`` is a fresh dict per lookup.
    """

    route: Route
    path_params: dict[str, str]
