"""
================================================================================
API Testing Framework
================================================================================

Components of the user API suite.

Modules:
    - config_loader: YAML configuration and the immutable SuiteConfig
    - http_client: httpx client with Allure logging
    - test_case_loader: YAML case definitions
    - assertion_executor: field-equality checks on JSON responses
    - case_runner: per-case execution returning CaseResult
    - suite_lifecycle: setup/teardown of client and HTML report

Author: Automation Team
License: MIT
================================================================================
"""

from .case_runner import CaseResult, CaseRunner, FailureKind, Outcome
from .config_loader import ConfigLoader, ConfigurationError, SuiteConfig
from .http_client import HttpClient, HttpClientError
from .suite_lifecycle import SuiteContext, SuiteLifecycle, SuiteStateError, SuiteSummary
from .test_case_loader import ApiTestCase, FieldAssertion, TestCaseError, TestCaseLoader

__all__ = [
    "ApiTestCase",
    "CaseResult",
    "CaseRunner",
    "ConfigLoader",
    "ConfigurationError",
    "FailureKind",
    "FieldAssertion",
    "HttpClient",
    "HttpClientError",
    "Outcome",
    "SuiteConfig",
    "SuiteContext",
    "SuiteLifecycle",
    "SuiteStateError",
    "SuiteSummary",
    "TestCaseError",
    "TestCaseLoader",
]
