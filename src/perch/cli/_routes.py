"""``perch routes``: print the compiled route table.

Rows come out grouped by method and, within a method, in the order the
router tries them, so reading down a method's rows shows precedence.
"""

import argparse
import sys

from perch.cli._resolve import resolve_app
from perch.routing.route import Route

_HEADER = ("METHOD", "PATTERN", "HANDLER")


def _describe(route: Route) -> tuple[str, str, str]:
    label = getattr(route.handler, "__qualname__", None) or repr(route.handler)
    if route.name:
        label = f"{label} ({route.name})"
    return route.method, route.pattern, label


def format_routes(routes: list[Route]) -> str:
    """Left-aligned three-column table with a dashed rule under the header."""
    rows = [_describe(route) for route in routes]
    method_width = max(len(row[0]) for row in (_HEADER, *rows))
    pattern_width = max(len(row[1]) for row in (_HEADER, *rows))
    handler_width = max(len(row[2]) for row in (_HEADER, *rows))

    def line(method: str, pattern: str, handler: str) -> str:
        return f"{method:<{method_width}}  {pattern:<{pattern_width}}  {handler}"

    rule = "-" * min(method_width + pattern_width + handler_width + 4, 80)
    return "\n".join([line(*_HEADER), rule, *(line(*row) for row in rows)])


def run_routes(args: argparse.Namespace) -> None:
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = app.router.routes
    print(format_routes(routes) if routes else "No routes registered.")
