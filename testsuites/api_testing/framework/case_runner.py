"""
================================================================================
Case Runner
================================================================================

Executes one ApiTestCase end to end:

    build request → send → check status → check fields → record pass entry

Mismatches never raise. They come back as a CaseResult so the caller can
keep running the remaining cases and decide how to surface the failure.

================================================================================
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import allure
import httpx
from loguru import logger

from autotest_tools.report_tools.html_report import HtmlReport

from .assertion_executor import AssertionExecutor
from .http_client import HttpClient
from .test_case_loader import ApiTestCase


class Outcome(str, Enum):
    PASS = "pass"
    FAIL = "fail"


class FailureKind(str, Enum):
    STATUS_MISMATCH = "status_mismatch"
    FIELD_MISMATCH = "field_mismatch"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class CaseResult:
    """Outcome of a single case."""
    case_name: str
    outcome: Outcome
    failure_kind: Optional[FailureKind] = None
    reason: str = ""
    status_code: Optional[int] = None
    elapsed_ms: float = 0.0

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASS


class CaseRunner:
    """
    Runs cases through a shared HttpClient and records passes in a report.

    Example:
        with HttpClient(config) as client:
            runner = CaseRunner(client, report)
            result = runner.run(case)
            if not result.passed:
                print(result.reason)
    """

    def __init__(self, client: HttpClient, report: HtmlReport):
        self.client = client
        self.report = report

    def run(self, case: ApiTestCase) -> CaseResult:
        started = time.perf_counter()

        with allure.step(f"Send {case.method} {case.path}"):
            try:
                response = self.client.request(case.method, case.path, json_body=case.json_body)
            except httpx.HTTPError as e:
                return self._fail(
                    case, FailureKind.TRANSPORT_ERROR,
                    f"{case.method} {case.path} failed: {e.__class__.__name__}: {e}",
                    None, started,
                )

        with allure.step(f"Verify status code is {case.expected_status}"):
            if response.status_code != case.expected_status:
                return self._fail(
                    case, FailureKind.STATUS_MISMATCH,
                    f"Expected status code {case.expected_status}, got {response.status_code}",
                    response.status_code, started,
                )

        if case.assertions:
            executor = AssertionExecutor(self._decode(response))
            executor.execute_assertions(case.assertions)
            failures = executor.get_failures()
            if failures:
                return self._fail(
                    case, FailureKind.FIELD_MISMATCH, failures[0].message,
                    response.status_code, started,
                )

        self.report.record_pass(case.title, case.description, case.pass_message)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"✅ {case.name} passed ({response.status_code}, {elapsed_ms:.0f}ms)")
        return CaseResult(
            case_name=case.name,
            outcome=Outcome.PASS,
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
        )

    def _decode(self, response: httpx.Response) -> Any:
        # Non-JSON bodies make every field lookup miss
        try:
            return response.json()
        except ValueError:
            logger.warning(f"Response body is not JSON: {response.text[:200]!r}")
            return None

    def _fail(
        self,
        case: ApiTestCase,
        kind: FailureKind,
        reason: str,
        status_code: Optional[int],
        started: float,
    ) -> CaseResult:
        logger.warning(f"❌ {case.name} failed [{kind.value}]: {reason}")
        return CaseResult(
            case_name=case.name,
            outcome=Outcome.FAIL,
            failure_kind=kind,
            reason=reason,
            status_code=status_code,
            elapsed_ms=(time.perf_counter() - started) * 1000,
        )


__all__ = [
    "CaseResult",
    "CaseRunner",
    "FailureKind",
    "Outcome",
]
