"""Pattern matching — structural comparison of a pattern and a request path.

Both strings are split naively on ``/``; a leading slash produces an empty
first segment, so patterns and paths must share the same slash convention.
Matching is pure and total: it never raises, it answers.
"""

PARAM_MARKER = ":"
SEPARATOR = "/"


def split_path(value: str) -> list[str]:
    """Split a pattern or path into segments without any normalization.

    Examples::

        "/users/42"  -> ["", "users", "42"]
        "/users/"    -> ["", "users", ""]
        ""           -> [""]
    """
    return value.split(SEPARATOR)


def is_param_segment(segment: str) -> bool:
    """True if a pattern segment is a named-parameter placeholder."""
    return segment[:1] == PARAM_MARKER


def match(pattern: str, path: str) -> tuple[bool, dict[str, str]]:
    """Match *path* against *pattern*, capturing named parameters.

    Returns ``(True, params)`` on success and ``(False, {})`` otherwise::

        match("/users/:id", "/users/42")   -> (True, {"id": "42"})
        match("/users/:id", "/items/5")    -> (False, {})
        match("/a/b", "/a")                -> (False, {})

    A byte-identical pattern and path always match with no parameters,
    even when the pattern contains parameter segments.
    """
    if pattern == path:
        return True, {}

    pattern_parts = split_path(pattern)
    path_parts = split_path(path)

    if len(pattern_parts) != len(path_parts):
        return False, {}

    params: dict[str, str] = {}
    for expected, actual in zip(pattern_parts, path_parts, strict=True):
        if expected == actual:
            continue
        if is_param_segment(expected):
            # Repeated names: last write wins
            params[expected[1:]] = actual
            continue
        return False, {}

    return True, params
