"""
================================================================================
Suite Lifecycle
================================================================================

Owns the per-run resources of the user API suite:

    set_up()    → SuiteConfig snapshot, HtmlReport sink, open HttpClient
    tear_down() → flush the report to disk, close the client

Usage:
    lifecycle = SuiteLifecycle()
    context = lifecycle.set_up()
    try:
        summary = lifecycle.run_all(cases)
    finally:
        lifecycle.tear_down()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import httpx
from loguru import logger

from autotest_tools.report_tools.html_report import HtmlReport

from .case_runner import CaseResult, CaseRunner
from .config_loader import ConfigLoader, SuiteConfig
from .http_client import HttpClient
from .test_case_loader import ApiTestCase


class SuiteStateError(Exception):
    """Raised when set_up/tear_down are called out of order."""
    pass


@dataclass(frozen=True)
class SuiteContext:
    """Everything a case needs, handed out by set_up()."""
    config: SuiteConfig
    client: HttpClient
    report: HtmlReport
    runner: CaseRunner


@dataclass
class SuiteSummary:
    results: List[CaseResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0


class SuiteLifecycle:
    """
    Runs once before and once after all cases of a suite run.

    Args:
        config: Explicit settings; built from ConfigLoader when omitted
        transport: Optional httpx transport handed to the HttpClient
    """

    def __init__(
        self,
        config: Optional[SuiteConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._context: Optional[SuiteContext] = None

    @property
    def context(self) -> SuiteContext:
        if self._context is None:
            raise SuiteStateError("Suite is not set up; call set_up() first")
        return self._context

    def set_up(self) -> SuiteContext:
        if self._context is not None:
            raise SuiteStateError("Suite is already set up")

        config = self._config or SuiteConfig.from_loader(ConfigLoader())
        report = HtmlReport(config.report_path, title=config.report_title)
        client = HttpClient(config, transport=self._transport)
        client.open()

        self._context = SuiteContext(
            config=config,
            client=client,
            report=report,
            runner=CaseRunner(client, report),
        )
        logger.info(f"Suite set up against {config.base_url}, report → {config.report_path}")
        return self._context

    def run_all(self, cases: Iterable[ApiTestCase]) -> SuiteSummary:
        """Run every case in order; a failing case never stops the rest."""
        runner = self.context.runner
        summary = SuiteSummary()
        for case in cases:
            summary.results.append(runner.run(case))

        logger.info(f"Suite finished: {summary.passed} passed, {summary.failed} failed")
        return summary

    def tear_down(self) -> Path:
        """
        Flush the report and release the HTTP session.

        The client is closed even when the flush fails; the flush error
        itself propagates.
        """
        context = self.context
        try:
            path = context.report.flush()
        finally:
            context.client.close()
            self._context = None
        logger.info(f"Suite torn down, report at {path}")
        return path


__all__ = [
    "SuiteContext",
    "SuiteLifecycle",
    "SuiteStateError",
    "SuiteSummary",
]
