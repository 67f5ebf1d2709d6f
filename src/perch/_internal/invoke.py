"""Uniform calling of user callables that may or may not be coroutines.

Handlers and lifespan hooks can be plain functions or ``async def``;
callers go through ``invoke`` instead of checking themselves.
"""

import inspect
from typing import Any


async def invoke(func: Any, /, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and, when it hands back an awaitable, await it."""
    outcome = func(*args, **kwargs)
    return await outcome if inspect.isawaitable(outcome) else outcome
