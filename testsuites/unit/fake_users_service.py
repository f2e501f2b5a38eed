"""
In-process stand-in for the user management service, for httpx.MockTransport.

Honors the same fixture contract as the public demo service: user 2 exists,
user 99999 does not, and empty name/job payloads are rejected. Stateless, so
a DELETE does not affect later requests.
"""

from __future__ import annotations

import json
import re
from typing import Callable, List

import httpx


USER_PATH = re.compile(r"^/api/users/(\d+)$")
USERS = {
    2: {
        "id": 2,
        "email": "janet.weaver@reqres.in",
        "first_name": "Janet",
        "last_name": "Weaver",
    },
}


def _json(status: int, payload) -> httpx.Response:
    return httpx.Response(status, json=payload)


def _valid_user_payload(request: httpx.Request):
    try:
        body = json.loads(request.content or b"{}")
    except ValueError:
        return None
    if not isinstance(body, dict) or not body.get("name") or not body.get("job"):
        return None
    return body


def users_service(request: httpx.Request) -> httpx.Response:
    """Route a request the way the demo user service answers it."""
    path = request.url.path

    if path == "/api/users" and request.method == "POST":
        body = _valid_user_payload(request)
        if body is None:
            return _json(400, {"error": "Missing name or job"})
        return _json(201, {**body, "id": "731", "createdAt": "2026-10-19T08:00:00.000Z"})

    match = USER_PATH.match(path)
    if not match:
        return _json(404, {})

    user = USERS.get(int(match.group(1)))
    if user is None:
        return _json(404, {})

    if request.method == "GET":
        return _json(200, {"data": user})
    if request.method == "PUT":
        body = _valid_user_payload(request)
        if body is None:
            return _json(400, {"error": "Missing name or job"})
        return _json(200, {**body, "updatedAt": "2026-10-19T08:00:00.000Z"})
    if request.method == "DELETE":
        return httpx.Response(204)

    return _json(405, {})


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response] = users_service):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)
