"""Turn a ``"module:attribute"`` string into a perch App.

Used by both ``perch run`` and ``perch routes``.
"""

import importlib

from perch.app import App


def resolve_app(import_string: str) -> App:
    """Import *import_string* and return the App it names.

    The attribute defaults to ``app``, so ``"myapp"`` means ``"myapp:app"``.
    If the attribute is a callable other than an App it is treated as an
    app factory and called without arguments.

    Raises:
        ModuleNotFoundError: The module part does not import.
        AttributeError: The module has no such attribute.
        TypeError: The target is not an App, or the factory failed.
    """
    module_name, _, attribute = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attribute or "app")

    if not isinstance(target, App) and callable(target):
        try:
            target = target()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(target, App):
        return target

    msg = f"{import_string!r} resolved to {type(target).__name__}, not a perch.App instance"
    raise TypeError(msg)
