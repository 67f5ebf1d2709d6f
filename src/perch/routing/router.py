"""Compiled router with registration-ordered precedence.

Routes are registered during setup and compiled into an immutable
lookup structure when the app freezes. The first registered pattern
(for the request's method) that matches the path wins.
"""

from dataclasses import dataclass

from perch.errors import NotFound
from perch.routing.matcher import match, split_path
from perch.routing.params import parse_pattern
from perch.routing.registry import RouteRegistry
from perch.routing.route import Route, RouteMatch

_NO_ROUTE = float("inf")

# (registration ordinal, route, captured params)
_Candidate = tuple[int, Route, dict[str, str]]


class _TrieNode:
    """A node in a per-method route trie. Mutable during compilation only."""

    __slots__ = ("children", "entry", "min_ordinal", "param_children")

    def __init__(self) -> None:
        # Literal segment children: "users" -> node
        self.children: dict[str, _TrieNode] = {}
        # Parameter children keyed by raw pattern segment (":id", ":uid", ":")
        self.param_children: dict[str, _ParamEdge] = {}
        # Route whose pattern ends exactly here, with its registration ordinal
        self.entry: tuple[int, Route] | None = None
        # Smallest ordinal of any route in this subtree (for pruning)
        self.min_ordinal: float = _NO_ROUTE


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    raw: str
    param_name: str
    node: _TrieNode


class Router:
    """Router over a ``RouteRegistry``.

    Usage::

        router = Router()
        router.add(Route("GET", "/users", list_users))
        router.add(Route("GET", "/users/:id", show_user))
        router.compile()
        match = router.match("GET", "/users/42")

    With ``indexed=True`` (the default) ``compile()`` builds one segment
    trie per method. The trie explores every structurally matching branch
    and keeps the lowest registration ordinal, so it selects exactly the
    route a linear scan in registration order would.
    """

    __slots__ = ("_compiled", "_indexed", "_registry", "_tries")

    def __init__(self, *, indexed: bool = True) -> None:
        self._registry = RouteRegistry()
        self._indexed = indexed
        self._tries: dict[str, _TrieNode] = {}
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        self._registry.register_route(route)

    @property
    def registry(self) -> RouteRegistry:
        return self._registry

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes, grouped by method in registration order."""
        return list(self._registry)

    @property
    def compiled(self) -> bool:
        return self._compiled

    def compile(self) -> None:
        """Freeze the router and build the lookup index. No more routes can be added."""
        if self._indexed:
            self._tries = {
                method: self._build_trie(self._registry.routes_for(method))
                for method in self._registry.methods
            }
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the route for a request.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no pattern registered for *method* matches
        *path*, including when *method* has no routes at all.
        """
        if self._compiled and self._indexed:
            result = self._lookup(method, path)
        else:
            result = self._scan(method, path)
        if result is None:
            raise NotFound()
        return result

    def _scan(self, method: str, path: str) -> RouteMatch | None:
        """Linear scan in registration order — the reference semantics."""
        for route in self._registry.routes_for(method):
            ok, params = match(route.pattern, path)
            if ok:
                return RouteMatch(route=route, path_params=params)
        return None

    # -- Trie index --

    @staticmethod
    def _build_trie(routes: tuple[Route, ...]) -> _TrieNode:
        root = _TrieNode()
        for ordinal, route in enumerate(routes):
            node = root
            node.min_ordinal = min(node.min_ordinal, ordinal)
            for seg in parse_pattern(route.pattern):
                if seg.is_param:
                    edge = node.param_children.get(seg.value)
                    if edge is None:
                        edge = _ParamEdge(
                            raw=seg.value,
                            param_name=seg.param_name or "",
                            node=_TrieNode(),
                        )
                        node.param_children[seg.value] = edge
                    node = edge.node
                else:
                    if seg.value not in node.children:
                        node.children[seg.value] = _TrieNode()
                    node = node.children[seg.value]
                node.min_ordinal = min(node.min_ordinal, ordinal)
            node.entry = (ordinal, route)
        return root

    def _lookup(self, method: str, path: str) -> RouteMatch | None:
        root = self._tries.get(method)
        if root is None:
            return None
        best = self._match_node(root, split_path(path), 0, {}, None)
        if best is None:
            return None
        _, route, params = best
        return RouteMatch(route=route, path_params=dict(params))

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
        best: _Candidate | None,
    ) -> _Candidate | None:
        """Recursively match path parts, keeping the earliest-registered hit."""
        # Nothing in this subtree can beat what we already have
        if best is not None and node.min_ordinal >= best[0]:
            return best

        # Path consumed: only a route ending at this node can match
        if index == len(parts):
            if node.entry is not None:
                ordinal, route = node.entry
                if best is None or ordinal < best[0]:
                    return ordinal, route, params
            return best

        part = parts[index]

        # 1. Literal child (byte-equal segment)
        child = node.children.get(part)
        if child is not None:
            best = self._match_node(child, parts, index + 1, params, best)

        # 2. Parameter children; a segment equal to the placeholder itself
        #    compares as a literal and captures nothing
        for edge in node.param_children.values():
            if edge.raw == part:
                next_params = params
            else:
                next_params = {**params, edge.param_name: part}
            best = self._match_node(edge.node, parts, index + 1, next_params, best)

        return best
