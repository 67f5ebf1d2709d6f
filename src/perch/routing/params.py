"""Named-parameter pattern syntax.

Parses route patterns into ``PathSegment`` lists and, when strict
validation is enabled, rejects patterns that would only ever match
by accident.
"""

from perch.errors import ConfigurationError
from perch.routing.matcher import PARAM_MARKER, SEPARATOR, is_param_segment, split_path
from perch.routing.route import PathSegment


def parse_pattern(pattern: str) -> list[PathSegment]:
    """Parse a route pattern into segments.

    One segment per ``split_path`` element, including the empty leading
    segment of an absolute pattern, so the result lines up with ``match()``::

        "/users/:id" -> [PathSegment(""), PathSegment("users"),
                         PathSegment(":id", is_param=True, param_name="id")]
    """
    segments: list[PathSegment] = []
    for part in split_path(pattern):
        if is_param_segment(part):
            segments.append(PathSegment(value=part, is_param=True, param_name=part[1:]))
        else:
            segments.append(PathSegment(value=part))
    return segments


def param_names(pattern: str) -> tuple[str, ...]:
    """Return parameter names in pattern order (duplicates kept)."""
    return tuple(
        seg.param_name
        for seg in parse_pattern(pattern)
        if seg.is_param and seg.param_name is not None
    )


def validate_pattern(pattern: str) -> None:
    """Reject patterns that the matcher accepts but rarely means.

    Raises ``ConfigurationError`` for:

    - a pattern that does not start with ``/``
    - empty interior segments (``/a//b``); a single trailing slash is allowed
    - a parameter segment with an empty name (``/users/:``)
    """
    if not pattern.startswith(SEPARATOR):
        msg = f"Route pattern {pattern!r} must start with {SEPARATOR!r}."
        raise ConfigurationError(msg)

    segments = parse_pattern(pattern)
    interior = segments[1:-1]
    if any(seg.value == "" for seg in interior):
        msg = f"Route pattern {pattern!r} contains an empty segment."
        raise ConfigurationError(msg)

    for seg in segments:
        if seg.is_param and not seg.param_name:
            msg = (
                f"Route pattern {pattern!r} has a parameter without a name. "
                f"Use {PARAM_MARKER}name, e.g. '/users/{PARAM_MARKER}id'."
            )
            raise ConfigurationError(msg)
