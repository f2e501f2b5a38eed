"""
Report tooling: the HTML report sink and Allure attachment helpers.
"""

from .html_report import HtmlReport, ReportEntry, ReportStatus

__all__ = [
    "HtmlReport",
    "ReportEntry",
    "ReportStatus",
]
