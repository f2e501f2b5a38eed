"""
================================================================================
HTML Report Sink
================================================================================

Collects one entry per passed test case during a suite run and writes them
to a single standalone HTML file at teardown.

Entries are append-only; flush() (over)writes the whole file each time it
is called.

================================================================================
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger


TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "report.html.j2"


class ReportStatus(str, Enum):
    """Outcome shown for a report entry."""
    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class ReportEntry:
    """A single test outcome as written to the report."""
    name: str
    description: str
    status: ReportStatus
    message: str
    timestamp: datetime = field(default_factory=datetime.now)


class HtmlReport:
    """
    Report sink bound to one output file.

    Example:
        report = HtmlReport("extentReport.html", title="User API Test Report")
        report.record_pass("Get User Test - Positive", "Test to get ...", "Retrieved user 2")
        report.flush()
    """

    def __init__(self, output_path: Union[str, Path], title: str = "API Test Report"):
        self.output_path = Path(output_path)
        self.title = title
        self.started_at = datetime.now()
        self._entries: List[ReportEntry] = []
        self._env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(["html", "xml", "j2"]),
        )

    @property
    def entries(self) -> List[ReportEntry]:
        return list(self._entries)

    def record(
        self,
        name: str,
        description: str,
        status: ReportStatus,
        message: str,
    ) -> ReportEntry:
        """Append an entry. Repeated names are kept as separate entries."""
        entry = ReportEntry(
            name=name,
            description=description,
            status=ReportStatus(status),
            message=message,
        )
        self._entries.append(entry)
        logger.debug(f"Report entry [{entry.status.value}] {name}: {message}")
        return entry

    def record_pass(self, name: str, description: str, message: str) -> ReportEntry:
        return self.record(name, description, ReportStatus.PASS, message)

    def render(self) -> str:
        """Render the report to an HTML string."""
        template = self._env.get_template(TEMPLATE_NAME)
        passed = sum(1 for e in self._entries if e.status is ReportStatus.PASS)
        return template.render(
            title=self.title,
            started_at=self.started_at,
            generated_at=datetime.now(),
            entries=self._entries,
            passed=passed,
            failed=len(self._entries) - passed,
        )

    def flush(self) -> Path:
        """
        Write all entries to output_path, replacing any previous file.

        Errors (unwritable path, template problems) propagate to the caller.
        """
        html = self.render()
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(html, encoding="utf-8")
        logger.info(f"HTML report written: {self.output_path} ({len(self._entries)} entries)")
        return self.output_path
