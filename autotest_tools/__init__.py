"""
================================================================================
Autotest Tools
================================================================================

Infrastructure shared by the user API suite.

Modules:
    - common: loguru logging setup
    - report_tools: HTML report sink and Allure attachment helpers

Example:
    from autotest_tools.common import init_logger
    from autotest_tools.report_tools import HtmlReport

    init_logger(level="DEBUG")
    report = HtmlReport("extentReport.html")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
