"""
================================================================================
API Testing Pytest Configuration
================================================================================

Shared fixtures for the live user API suite.

Fixtures:
    - suite_config: Immutable settings for this run
    - suite: Session-wide SuiteLifecycle context (report flushed at teardown)
    - case_runner: Runner bound to the shared client and report

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Generator

import pytest

from ..framework import CaseRunner, ConfigLoader, SuiteConfig, SuiteContext, SuiteLifecycle


# =============================================================================
# Session-Scoped Fixtures (Shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def config() -> ConfigLoader:
    """
    Provide configuration loader instance.

    Session-scoped to ensure configuration is loaded only once.
    """
    return ConfigLoader()


@pytest.fixture(scope="session")
def live_enabled(config: ConfigLoader) -> bool:
    return bool(config.get("suite.live", False))


@pytest.fixture(scope="session")
def suite_config(config: ConfigLoader) -> SuiteConfig:
    return SuiteConfig.from_loader(config)


@pytest.fixture(scope="session")
def suite(suite_config: SuiteConfig) -> Generator[SuiteContext, None, None]:
    """
    Set up the suite once, tear it down (and write the report) after the
    last test that used it, whatever the outcomes.
    """
    lifecycle = SuiteLifecycle(suite_config)
    context = lifecycle.set_up()
    yield context
    lifecycle.tear_down()


# =============================================================================
# Function-Scoped Fixtures
# =============================================================================

@pytest.fixture
def case_runner(request: pytest.FixtureRequest, live_enabled: bool) -> CaseRunner:
    # Checked before touching `suite` so a skipped run writes no report
    if not live_enabled:
        pytest.skip("live suite disabled; set SUITE_LIVE=true to run against the service")
    suite: SuiteContext = request.getfixturevalue("suite")
    return suite.runner


# =============================================================================
# Allure Reporting Hooks
# =============================================================================

def pytest_exception_interact(node, call, report):
    """Attach additional info on test failure."""
    import allure

    if report.failed:
        allure.attach(
            str(call.excinfo.value),
            name="Error Details",
            attachment_type=allure.attachment_type.TEXT
        )
