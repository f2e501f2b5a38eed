"""
Repository-level pytest configuration.

Why this exists:
  - Configure loguru once from config/config.yaml before any test runs
  - Expose the repo root to fixtures that need to locate case files
"""

from __future__ import annotations

from pathlib import Path

import pytest

from autotest_tools.common import init_logger
from testsuites.api_testing.framework.config_loader import ConfigLoader


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    """Set up loguru sinks from the logging.* configuration keys."""
    config = ConfigLoader()
    init_logger(
        level=config.get("logging.level", "INFO"),
        log_file=config.get("logging.file"),
    )
