"""
================================================================================
Allure Report Utilities
================================================================================

Helpers for enriching the Allure step tree with request/response details
and report entries produced by the user API suite.

Features:
- JSON / text attachment helpers
- cURL command generation for request reproduction
- Response body truncation for large payloads

================================================================================
"""

import json
from typing import Any, Dict, Optional

import allure


# Maximum response length to include in Allure reports
MAX_RESPONSE_LENGTH = 3000


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """Attach text content to Allure report."""
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def build_curl_command(
    method: str,
    url: str,
    headers: Optional[Dict[str, str]] = None,
    body: Optional[Any] = None
) -> str:
    """
    Build a copy-paste ready cURL command.

    Args:
        method: HTTP method
        url: Full request URL
        headers: Request headers
        body: JSON request body
    """
    cmd_parts = [f"curl -X {method}"]

    for key, value in (headers or {}).items():
        cmd_parts.append(f"-H '{key}: {value}'")

    if body is not None:
        body_str = json.dumps(body, ensure_ascii=False) if isinstance(body, (dict, list)) else str(body)
        cmd_parts.append(f"-d '{body_str}'")

    cmd_parts.append(f"'{url}'")

    return " \\\n  ".join(cmd_parts)


def truncate(content: str, limit: int = MAX_RESPONSE_LENGTH) -> str:
    """Cut long payloads down to `limit` characters with a length marker."""
    if len(content) <= limit:
        return content
    return (
        f"{content[:limit]}\n\n"
        f"... [Truncated, full length: {len(content)} chars] ..."
    )


def attach_request_response(
    request_url: str,
    request_method: str,
    request_headers: Dict[str, str],
    request_body: Optional[Any],
    response_status: int,
    response_text: str,
    response_time_ms: Optional[float] = None
):
    """
    Attach complete request/response details under one step.

    Args:
        request_url: Full request URL
        request_method: HTTP method
        request_headers: Request headers
        request_body: JSON request body, if any
        response_status: Response status code
        response_text: Raw response body
        response_time_ms: Response time in milliseconds
    """
    status_emoji = "✅" if response_status < 400 else "❌"

    with allure.step(f"{status_emoji} {request_method} {request_url} → {response_status}"):
        attach_text(request_url, name="🔗 Request URL")

        if request_headers:
            attach_json(request_headers, name="📤 Request Headers")

        if request_body is not None:
            attach_json(request_body, name="📤 Request Body")

        attach_text(
            build_curl_command(request_method, request_url, request_headers, request_body),
            name="🔧 cURL Command"
        )

        attach_text(f"{status_emoji} {response_status}", name="📥 Response Status")

        if response_time_ms is not None:
            attach_text(f"{response_time_ms:.2f}ms", name="⏱️ Response Time")

        try:
            response_content = json.dumps(json.loads(response_text), indent=2, ensure_ascii=False)
        except ValueError:
            response_content = response_text or "<empty>"

        attach_text(truncate(response_content), name="📥 Response Body")
