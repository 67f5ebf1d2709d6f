"""App settings.

One frozen dataclass, passed to ``App(config=...)``. There is no file or
environment-variable loading; build the object in code.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Settings read by ``App`` and the development server.

    Every field has a default, so override only what differs::

        AppConfig(port=3000, strict_patterns=True)
    """

    # Development server
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "info"
    reload_dirs: tuple[str, ...] = ()  # watched in addition to the cwd when reloading

    # Tracebacks in 500 bodies, auto-reload in the dev server
    debug: bool = False

    # Routing
    route_index: bool = True  # segment trie instead of a linear scan; same winner either way
    strict_patterns: bool = False  # reject empty segments and unnamed parameters on handle()
