"""Shared pytest configuration for the curlyplate examples.

Each example directory (hello, loops, lenient_mode, error_diagnostics,
introspection) holds an ``app.py`` that builds templates and renders them at
import time, exposing results such as ``output`` as module attributes. The
``example_app`` fixture executes that file afresh for every test, so one
test cannot see renderers or data mutated by another.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    """Execute the app.py beside the requesting test and return its module."""
    app_path = Path(request.path).parent / "app.py"
    module_name = f"curlyplate_example_{app_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
