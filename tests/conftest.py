"""Pytest configuration and fixtures for curlyplate tests."""

import pytest

from curlyplate import Environment


@pytest.fixture
def env():
    """Create a strict-mode Environment (the default)."""
    return Environment()


@pytest.fixture
def env_lenient():
    """Create an Environment that renders bad data as empty text."""
    return Environment(strict_var_mode=False)


@pytest.fixture
def env_raw():
    """Create an Environment that leaves output whitespace untouched."""
    return Environment(normalize_output=False)


@pytest.fixture
def nested_data():
    """A data context exercising mappings, sequences and scalars."""
    return {
        "site": {"name": "Example", "owner": {"email": "ops@example.com"}},
        "user": {"name": "Ada", "isAdmin": True, "tasks": [{"title": "Write"}, {"title": "Ship"}]},
        "items": ["A", "B", "C"],
        "empty": [],
        "count": 0,
        "nothing": None,
    }


def assert_contains(template_result: str, *expected_parts: str) -> None:
    """Assert template result contains all expected parts.

    Args:
        template_result: The actual template rendering result.
        expected_parts: Strings that should all be present in the result.
    """
    for part in expected_parts:
        assert part in template_result, (
            f"Template output missing expected content:\n"
            f"  Missing: {part!r}\n"
            f"  Actual: {template_result!r}"
        )
