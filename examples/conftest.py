"""Fixtures for the example apps.

Each example directory holds an ``app.py`` next to its tests. The
``example_app`` fixture executes that file under a fresh module name per
test, so every test starts from an uncompiled App.
"""

import importlib.util
import itertools
from pathlib import Path

import pytest

_counter = itertools.count()


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """The ``app`` object defined by the ``app.py`` beside the requesting test."""
    source = Path(request.path).with_name("app.py")
    module_name = f"perch_example_{source.parent.name}_{next(_counter)}"
    spec = importlib.util.spec_from_file_location(module_name, source)
    if spec is None or spec.loader is None:
        pytest.fail(f"cannot load {source}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app
