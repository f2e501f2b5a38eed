"""
Offline fixtures: the unit suite talks to fake_users_service through
httpx.MockTransport, never to the network.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator, List

import pytest

from autotest_tools.report_tools.html_report import HtmlReport
from testsuites.api_testing.framework.case_runner import CaseRunner
from testsuites.api_testing.framework.config_loader import ConfigLoader, SuiteConfig
from testsuites.api_testing.framework.http_client import HttpClient
from testsuites.api_testing.framework.test_case_loader import ApiTestCase, TestCaseLoader

from .fake_users_service import RecordingTransport


CASES_DIR = Path(__file__).resolve().parents[1] / "api_testing" / "cases"
FAKE_BASE_URL = "https://users.test"


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch) -> Generator[None, None, None]:
    """Keep env overrides and the ConfigLoader singleton out of unit tests."""
    for key in ("API_BASE_URL", "API_TIMEOUT", "REPORT_PATH", "REPORT_TITLE", "SUITE_LIVE"):
        monkeypatch.delenv(key, raising=False)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


@pytest.fixture(scope="session")
def user_cases() -> List[ApiTestCase]:
    return TestCaseLoader(CASES_DIR).load_all()


@pytest.fixture
def case_by_name(user_cases: List[ApiTestCase]) -> Callable[[str], ApiTestCase]:
    index = {case.name: case for case in user_cases}
    return index.__getitem__


@pytest.fixture
def suite_config(tmp_path: Path) -> SuiteConfig:
    return SuiteConfig(
        base_url=FAKE_BASE_URL,
        report_path=tmp_path / "reports" / "extentReport.html",
        report_title="Unit Test Report",
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def http_client(suite_config: SuiteConfig, transport: RecordingTransport) -> Generator[HttpClient, None, None]:
    with HttpClient(suite_config, transport=transport) as client:
        yield client


@pytest.fixture
def report(suite_config: SuiteConfig) -> HtmlReport:
    return HtmlReport(suite_config.report_path, title=suite_config.report_title)


@pytest.fixture
def runner(http_client: HttpClient, report: HtmlReport) -> CaseRunner:
    return CaseRunner(http_client, report)
