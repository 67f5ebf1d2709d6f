"""Callable aliases for user code registered with an App."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Any signature: arguments are filled from the request and path params
Handler: TypeAlias = Callable[..., Any]

# Zero-argument, sync or async
Hook: TypeAlias = Callable[[], Any]
