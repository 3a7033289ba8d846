"""Tests for the Jira REST client against a mocked transport."""

import json

import httpx
import pytest

from warroom.core import (
    AssignmentWriteException,
    ConfigurationException,
    JiraException,
    ResourceNotFoundException,
    TransientQueryException,
)
from warroom.infrastructure.jira import JiraClient


def make_client(handler, max_retries=3):
    return JiraClient(
        base_url="https://example.atlassian.net/",
        email="bot@example.com",
        api_token="secret",
        timeout=5,
        max_retries=max_retries,
        retry_base_delay=0,
        transport=httpx.MockTransport(handler),
    )


class Recorder:
    """Mock transport handler replaying a list of responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


def test_missing_credentials_raise():
    with pytest.raises(ConfigurationException):
        JiraClient(base_url="https://example.atlassian.net", email="", api_token="")


@pytest.mark.asyncio
async def test_get_issue_uses_v3_api_and_basic_auth():
    recorder = Recorder(httpx.Response(200, json={"key": "KAN-1", "fields": {}}))
    client = make_client(recorder)

    data = await client.get_issue("KAN-1")

    request = recorder.requests[0]
    assert data["key"] == "KAN-1"
    assert request.url.path == "/rest/api/3/issue/KAN-1"
    assert request.headers["Authorization"].startswith("Basic ")
    await client.close()


@pytest.mark.asyncio
async def test_get_issue_not_found():
    client = make_client(Recorder(httpx.Response(404, json={"errorMessages": ["nope"]})))
    with pytest.raises(ResourceNotFoundException):
        await client.get_issue("KAN-404")


@pytest.mark.asyncio
async def test_read_retried_after_server_error():
    recorder = Recorder(
        httpx.Response(503),
        httpx.Response(429),
        httpx.Response(200, json={"total": 4}),
    )
    client = make_client(recorder)

    assert await client.count_open_issues("abc") == 4
    assert len(recorder.requests) == 3


@pytest.mark.asyncio
async def test_read_retry_exhausted():
    recorder = Recorder(httpx.Response(500))
    client = make_client(recorder, max_retries=2)

    with pytest.raises(TransientQueryException):
        await client.count_open_issues("abc")
    assert len(recorder.requests) == 2


@pytest.mark.asyncio
async def test_network_error_on_read_is_retried():
    request = httpx.Request("GET", "https://example.atlassian.net")
    recorder = Recorder(
        httpx.ConnectError("boom", request=request),
        httpx.Response(200, json={"total": 0}),
    )
    client = make_client(recorder)

    assert await client.count_open_issues("abc") == 0
    assert len(recorder.requests) == 2


@pytest.mark.asyncio
async def test_client_error_not_retried():
    recorder = Recorder(httpx.Response(400, json={"errorMessages": ["bad jql"]}))
    client = make_client(recorder)

    with pytest.raises(JiraException) as exc_info:
        await client.search_issues("bad")
    assert exc_info.value.status_code == 400
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_open_issue_count_query():
    recorder = Recorder(httpx.Response(200, json={"total": 7, "issues": []}))
    client = make_client(recorder)

    await client.count_open_issues("acc-1")

    params = recorder.requests[0].url.params
    assert params["jql"] == 'assignee = "acc-1" AND statusCategory != Done'
    assert params["maxResults"] == "0"


@pytest.mark.asyncio
async def test_assign_is_attempted_once():
    recorder = Recorder(httpx.Response(503, text="unavailable"))
    client = make_client(recorder)

    with pytest.raises(AssignmentWriteException) as exc_info:
        await client.assign_issue("KAN-1", "acc-1")

    assert len(recorder.requests) == 1
    assert exc_info.value.status_code == 503
    assert json.loads(recorder.requests[0].content) == {"accountId": "acc-1"}


@pytest.mark.asyncio
async def test_assign_success():
    recorder = Recorder(httpx.Response(204))
    client = make_client(recorder)

    await client.assign_issue("KAN-1", "acc-1")

    request = recorder.requests[0]
    assert request.method == "PUT"
    assert request.url.path == "/rest/api/3/issue/KAN-1/assignee"


@pytest.mark.asyncio
async def test_create_issue_requires_201():
    client = make_client(Recorder(httpx.Response(400, json={"errors": {"summary": "required"}})))
    with pytest.raises(JiraException) as exc_info:
        await client.create_issue({"summary": ""})
    assert "Jira API 400" in exc_info.value.message


@pytest.mark.asyncio
async def test_user_groups():
    recorder = Recorder(httpx.Response(200, json=[{"name": "developers"}, {"name": "observers"}]))
    client = make_client(recorder)

    assert await client.get_user_groups("acc-1") == ["developers", "observers"]
    assert recorder.requests[0].url.params["accountId"] == "acc-1"
