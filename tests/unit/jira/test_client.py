"""Tests for the authenticated Jira request client."""

import base64
import json
from unittest.mock import patch

import httpx
import pytest

from jira_mcp.exceptions import RemoteRequestError
from jira_mcp.jira.client import JiraClient, encode_component, encode_query


@pytest.fixture
async def jira_client(jira_config, fake_jira):
    client = JiraClient(jira_config, transport=fake_jira.transport)
    yield client
    await client.close()


async def test_request_sets_auth_and_negotiation_headers(jira_client, fake_jira):
    fake_jira.add("GET", "/rest/api/3/myself", json={"accountId": "abc"})

    await jira_client.request("GET", "/rest/api/3/myself")

    request = fake_jira.requests[0]
    expected = base64.b64encode(b"test@example.com:test-api-token").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Accept-Language"] == "en-US"
    assert "Content-Type" not in request.headers


async def test_request_with_body_sets_content_type(jira_client, fake_jira):
    fake_jira.add("POST", "/rest/api/3/issue", status_code=201, json={"key": "X-1"})

    result = await jira_client.request(
        "POST", "/rest/api/3/issue", json_body={"fields": {"summary": "s"}}
    )

    request = fake_jira.requests[0]
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"fields": {"summary": "s"}}
    assert result == {"key": "X-1"}


async def test_request_percent_encodes_query(jira_client, fake_jira):
    fake_jira.add("GET", "/rest/api/3/search", json={"issues": []})

    await jira_client.request(
        "GET",
        "/rest/api/3/search",
        params={"jql": "status = 'In Progress' AND assignee = currentUser()"},
    )

    url = fake_jira.requests[0].url
    assert str(url) == (
        "https://test.atlassian.net/rest/api/3/search?jql="
        "status%20%3D%20'In%20Progress'%20AND%20assignee%20%3D%20currentUser()"
    )
    assert url.params["jql"] == "status = 'In Progress' AND assignee = currentUser()"


async def test_request_404_keeps_body_verbatim_without_decoding(jira_client, fake_jira):
    fake_jira.add("GET", "/rest/api/3/project/search", status_code=404, text="not found")

    with patch.object(
        httpx.Response, "json", side_effect=AssertionError("body must not be decoded")
    ):
        with pytest.raises(RemoteRequestError) as exc_info:
            await jira_client.request(
                "GET", "/rest/api/3/project/search", action="list projects"
            )

    error = exc_info.value
    assert error.status_code == 404
    assert error.status_text == "Not Found"
    assert error.body == "not found"
    assert error.action == "list projects"
    assert "404" in str(error) and "Not Found" in str(error) and "not found" in str(error)


async def test_request_empty_success_body_returns_none(jira_client, fake_jira):
    fake_jira.add("PUT", "/rest/api/3/issue/X-1/assignee", status_code=204)

    result = await jira_client.request(
        "PUT", "/rest/api/3/issue/X-1/assignee", json_body={"accountId": "abc"}
    )

    assert result is None


async def test_request_does_not_retry(jira_client, fake_jira):
    fake_jira.add("GET", "/rest/api/3/myself", status_code=503, text="unavailable")

    with pytest.raises(RemoteRequestError):
        await jira_client.request("GET", "/rest/api/3/myself")

    assert len(fake_jira.requests) == 1


async def test_request_propagates_transport_errors(jira_config):
    def unreachable(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with JiraClient(
        jira_config, transport=httpx.MockTransport(unreachable)
    ) as client:
        with pytest.raises(httpx.ConnectError):
            await client.request("GET", "/rest/api/3/myself")


def test_encode_helpers_match_uri_component_encoding():
    assert encode_component("a b/c?d='e'") == "a%20b%2Fc%3Fd%3D'e'"
    assert encode_query({"jql": "x = 1"}) == "jql=x%20%3D%201"
