from __future__ import annotations

import json
import os
import platform
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from curlyplate import Environment

try:
    import importlib.metadata as importlib_metadata
except ModuleNotFoundError:  # pragma: no cover
    import importlib_metadata  # type: ignore


BASE_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = BASE_DIR / "templates"
BENCHMARK_OUTPUT_DIR = BASE_DIR.parent / ".benchmarks"
BENCHMARK_OUTPUT_DIR.mkdir(exist_ok=True)


def _version(dist: str) -> str:
    try:
        return importlib_metadata.version(dist)
    except importlib_metadata.PackageNotFoundError:
        return "unknown"


def collect_environment_metadata() -> dict[str, object]:
    """Capture reproducibility metadata for each benchmark run."""
    return {
        "python": {
            "version": platform.python_version(),
            "implementation": platform.python_implementation(),
            "executable": sys.executable,
        },
        "os": {
            "system": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
        },
        "cpu": {
            "processor": platform.processor(),
            "count": os.cpu_count(),
        },
        "curlyplate": _version("curlyplate"),
    }


@pytest.fixture(scope="session")
def environment_metadata() -> dict[str, object]:
    """Write environment metadata to .benchmarks for ingestion."""
    metadata = collect_environment_metadata()
    (BENCHMARK_OUTPUT_DIR / "environment.json").write_text(json.dumps(metadata, indent=2))
    return metadata


@pytest.fixture(scope="session")
def template_loader() -> Callable[[str], str]:
    """Load template source from benchmarks/templates/."""

    def _load(name: str) -> str:
        path = TEMPLATE_DIR / name
        if not path.exists():
            raise FileNotFoundError(f"Template not found: {path}")
        return path.read_text(encoding="utf-8")

    return _load


@pytest.fixture(scope="session")
def env() -> Environment:
    return Environment()


@pytest.fixture(scope="session")
def small_context() -> dict[str, Any]:
    return {
        "title": "Benchmark",
        "user": {"name": "Ada", "email": "ada@example.com"},
        "items": [f"Item {i}" for i in range(5)],
    }


@pytest.fixture(scope="session")
def medium_context() -> dict[str, Any]:
    """Ten categories of ten items each."""
    return {
        "site": {"name": "Shop", "footer": "Prices include tax."},
        "categories": [
            {
                "name": f"Category {c}",
                "items": [
                    {"id": i, "name": f"Item {i}", "price": i * 1.5, "featured": i % 3 == 0}
                    for i in range(c * 10, c * 10 + 10)
                ],
            }
            for c in range(10)
        ],
    }


@pytest.fixture(scope="session")
def large_context() -> dict[str, Any]:
    """1000 loop rows with nested lookups."""
    return {
        "rows": [
            {
                "id": i,
                "name": f"row-{i}",
                "owner": {"email": f"user{i}@example.com"},
                "active": i % 2 == 0,
            }
            for i in range(1000)
        ]
    }
