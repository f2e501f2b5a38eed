import httpx
import pytest

from autotest_tools.report_tools.allure_utils import build_curl_command, truncate
from testsuites.api_testing.framework.config_loader import SuiteConfig
from testsuites.api_testing.framework.http_client import HttpClient, HttpClientError


def test_request_outside_context_raises(suite_config):
    client = HttpClient(suite_config)
    with pytest.raises(HttpClientError):
        client.get("/api/users/2")


def test_json_body_sets_content_type(http_client, transport):
    response = http_client.post("/api/users", json_body={"name": "John", "job": "leader"})

    assert response.status_code == 201
    sent = transport.requests[-1]
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.url == httpx.URL("https://users.test/api/users")
    assert sent.method == "POST"


def test_no_body_means_no_content_type(http_client, transport):
    http_client.get("/api/users/2")
    http_client.delete("/api/users/2")

    for sent in transport.requests:
        assert "Content-Type" not in sent.headers
        assert sent.content == b""


def test_put_sends_json_payload(http_client, transport):
    response = http_client.put("/api/users/2", json_body={"name": "John", "job": "manager"})

    assert response.json()["job"] == "manager"
    assert transport.requests[-1].method == "PUT"


def test_session_closed_after_context(suite_config, transport):
    client = HttpClient(suite_config, transport=transport)
    with client:
        assert client.session is not None
    assert client.session is None


def test_full_url_joins_base_and_path():
    client = HttpClient(SuiteConfig(base_url="https://reqres.in/"))
    assert client.full_url("/api/users/2") == "https://reqres.in/api/users/2"
    assert client.full_url("api/users") == "https://reqres.in/api/users"


def test_build_curl_command_includes_body_and_headers():
    cmd = build_curl_command(
        "POST",
        "https://reqres.in/api/users",
        {"Content-Type": "application/json"},
        {"name": "John", "job": "leader"},
    )
    assert cmd.startswith("curl -X POST")
    assert "-H 'Content-Type: application/json'" in cmd
    assert '-d \'{"name": "John", "job": "leader"}\'' in cmd
    assert cmd.endswith("'https://reqres.in/api/users'")


def test_truncate_marks_long_payloads():
    assert truncate("short", limit=10) == "short"
    cut = truncate("x" * 25, limit=10)
    assert cut.startswith("x" * 10 + "\n")
    assert "full length: 25 chars" in cut
