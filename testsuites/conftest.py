"""
================================================================================
Root Pytest Configuration
================================================================================

This module registers the project-wide markers and tags collected items by
the directory they live in.

================================================================================
"""

from pathlib import Path

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "positive: Happy-path cases expecting a 2xx response"
    )
    config.addinivalue_line(
        "markers", "negative: Cases expecting a 4xx response"
    )
    config.addinivalue_line(
        "markers", "unit: Offline framework tests"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "api: API-specific tests"
    )
    config.addinivalue_line(
        "markers", "users: Tests related to user management"
    )
    config.addinivalue_line(
        "markers", "requires_external: Tests requiring the external demo service"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-tag items by directory."""
    for item in items:
        path = Path(str(item.fspath))
        if "api_testing" in path.parts:
            item.add_marker(pytest.mark.api)
        if path.parent.name == "unit":
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "User Management API Test Suite",
        "=" * 60,
        "",
    ]
