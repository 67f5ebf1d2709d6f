"""Perch — a minimal HTTP request router for ASGI.

Maps a request's method and path to the first registered pattern that
matches it, capturing ``:name`` segments as path parameters.

Basic usage::

    from perch import App

    app = App()

    @app.route("/users/:id")
    def show_user(id: int):
        return {"id": id}

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "PerchError",
    "Request",
    "Response",
    "Route",
    "Router",
    "match",
]


# Public name -> defining module, resolved on first access
_LAZY_IMPORTS: dict[str, str] = {
    "App": "perch.app",
    "AppConfig": "perch.config",
    "ConfigurationError": "perch.errors",
    "HTTPError": "perch.errors",
    "NotFound": "perch.errors",
    "PerchError": "perch.errors",
    "Request": "perch.http.request",
    "Response": "perch.http.response",
    "Route": "perch.routing.route",
    "Router": "perch.routing.router",
    "match": "perch.routing.matcher",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
