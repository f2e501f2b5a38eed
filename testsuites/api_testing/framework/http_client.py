"""
================================================================================
HTTP Client with Allure Integration
================================================================================

A thin synchronous HTTP client for the user API suite featuring:
    - One httpx session per suite run (context manager)
    - JSON bodies with an explicit Content-Type header
    - Allure reporting with cURL command generation
    - Timing of every round trip

Requests are sent exactly once: no retry, no authentication.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import httpx
from loguru import logger

from autotest_tools.report_tools.allure_utils import attach_request_response

from .config_loader import SuiteConfig


JSON_CONTENT_TYPE = "application/json"


class HttpClientError(Exception):
    """Base exception for HTTP client errors."""
    pass


class HttpClient:
    """
    HTTP client bound to the suite's base endpoint.

    Usage:
        >>> with HttpClient(SuiteConfig()) as client:
        ...     response = client.request("GET", "/api/users/2")
        ...     print(response.json())
    """

    def __init__(
        self,
        config: Optional[SuiteConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialize HTTP client with configuration.

        Args:
            config: Suite configuration. Defaults to SuiteConfig().
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.config = config or SuiteConfig()
        self.base_url = self.config.base_url
        self.timeout = self.config.timeout
        self._transport = transport

        self.session: Optional[httpx.Client] = None

    def __enter__(self) -> "HttpClient":
        """Enter context manager - initialize HTTP session."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager - close HTTP session."""
        self.close()

    def open(self) -> None:
        if self.session is not None:
            return
        kwargs: Dict[str, Any] = {"base_url": self.base_url}
        # Without api.timeout the httpx default applies
        if self.timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self.timeout)
        if self._transport is not None:
            kwargs["transport"] = self._transport
        self.session = httpx.Client(**kwargs)

    def close(self) -> None:
        if self.session:
            self.session.close()
            self.session = None

    def request(
        self,
        method: str,
        url: str,
        json_body: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Execute a single HTTP request and log it to Allure.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            url: Request path (relative to base_url)
            json_body: JSON object to send; sets Content-Type when present
            **kwargs: Additional arguments passed to httpx.Client.request

        Returns:
            httpx.Response object

        Raises:
            HttpClientError: When used outside of a context manager
            httpx.HTTPError: On transport failure
        """
        if self.session is None:
            raise HttpClientError(
                "HttpClient must be used within a context manager. "
                "Use 'with HttpClient() as client:'"
            )

        headers = dict(kwargs.pop("headers", None) or {})
        if json_body is not None:
            headers.setdefault("Content-Type", JSON_CONTENT_TYPE)
            kwargs["json"] = json_body

        logger.debug(f"→ {method} {url} body={json_body}")
        started = time.perf_counter()
        response = self.session.request(method, url, headers=headers, **kwargs)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(f"← {method} {url} {response.status_code} ({elapsed_ms:.1f}ms)")

        attach_request_response(
            request_url=self.full_url(url),
            request_method=method,
            request_headers=headers,
            request_body=json_body,
            response_status=response.status_code,
            response_text=response.text,
            response_time_ms=elapsed_ms,
        )
        return response

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Execute GET request."""
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        """Execute POST request."""
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> httpx.Response:
        """Execute PUT request."""
        return self.request("PUT", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        """Execute DELETE request."""
        return self.request("DELETE", url, **kwargs)

    def full_url(self, url: str) -> str:
        """Join base_url and a relative path."""
        return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"


__all__ = [
    "HttpClient",
    "HttpClientError",
]
