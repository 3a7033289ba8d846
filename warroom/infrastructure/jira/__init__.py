"""
Jira Client Infrastructure
==========================

Async wrapper around the Jira Cloud REST API (v3).

This module abstracts the Jira client implementation following the
Dependency Inversion Principle - application services depend on the
``ITicketTracker`` interface, not on httpx.

Retry policy:
- Reads (GET) are retried on network errors, HTTP 429 and 5xx with
  exponential backoff and jitter
- Writes (PUT/POST) are attempted exactly once
"""

import asyncio
import random
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from warroom.config import settings
from warroom.core import (
    ConfigurationException,
    JiraException,
    TransientQueryException,
    AssignmentWriteException,
    ResourceNotFoundException,
)
from warroom.shared.infrastructure.logging import get_logger, log_latency

logger = get_logger(__name__)

API_PREFIX = "/rest/api/3"
RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class ITicketTracker(ABC):
    """
    Interface for ticket-tracker operations.

    Following Interface Segregation Principle - only the calls the
    agents actually script are defined.
    """

    @abstractmethod
    async def get_issue(self, issue_key: str) -> dict:
        """Fetch a single issue payload."""

    @abstractmethod
    async def get_assignable_users(self, issue_key: str) -> List[dict]:
        """List users that may be assigned the issue."""

    @abstractmethod
    async def count_open_issues(self, account_id: str) -> int:
        """Count issues assigned to the account that are not Done."""

    @abstractmethod
    async def assign_issue(self, issue_key: str, account_id: str) -> None:
        """Set the issue assignee."""

    @abstractmethod
    async def update_issue_fields(self, issue_key: str, fields: dict) -> None:
        """Overwrite issue fields."""

    @abstractmethod
    async def get_project(self, project_id: str) -> dict:
        """Fetch a project, including its issue types."""

    @abstractmethod
    async def create_issue(self, fields: dict) -> dict:
        """Create an issue and return Jira's ``{id, key, self}`` payload."""

    @abstractmethod
    async def add_comment(self, issue_key: str, body: dict) -> None:
        """Post an ADF comment on the issue."""

    @abstractmethod
    async def get_user_groups(self, account_id: str) -> List[str]:
        """List the names of groups the account belongs to."""


def _error_text(response: httpx.Response) -> str:
    """Extract Jira's error message from a failed response."""
    try:
        data = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    if isinstance(data, dict):
        if data.get("errors"):
            return str(data["errors"])
        if data.get("errorMessages"):
            return ", ".join(data["errorMessages"])
    return str(data)


class JiraClient(ITicketTracker):
    """
    httpx-based Jira Cloud client using basic auth (email + API token).

    One instance holds one connection pool; call ``close()`` on shutdown.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        email: Optional[str] = None,
        api_token: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_base_delay: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url or settings.jira_base_url
        email = email or settings.jira_email
        api_token = api_token or settings.jira_api_token

        missing = [
            name for name, value in (
                ("JIRA_BASE_URL", self._base_url),
                ("JIRA_EMAIL", email),
                ("JIRA_API_TOKEN", api_token),
            ) if not value
        ]
        if missing:
            raise ConfigurationException(
                f"Jira not configured, missing: {', '.join(missing)}"
            )

        self._max_retries = max_retries if max_retries is not None else settings.jira_max_retries
        self._retry_base_delay = (
            retry_base_delay if retry_base_delay is not None
            else settings.jira_retry_base_delay_seconds
        )
        self._http_client = httpx.AsyncClient(
            base_url=self._base_url.rstrip("/"),
            auth=(email, api_token),
            timeout=timeout or settings.jira_timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        """
        GET with bounded retry on transient failures.

        Returns the first non-transient response (which may be a 4xx).

        Raises:
            TransientQueryException: If every attempt failed transiently
        """
        last_error = ""

        for attempt in range(self._max_retries):
            try:
                with log_latency(logger, "jira_request", method="GET", path=path):
                    response = await self._http_client.get(API_PREFIX + path, params=params)
            except httpx.TransportError as e:
                last_error = f"{type(e).__name__}: {e}"
            else:
                if response.status_code not in RETRYABLE_STATUS_CODES:
                    return response
                last_error = f"HTTP {response.status_code}"

            logger.warning(
                "Jira read failed",
                extra={"path": path, "attempt": attempt + 1, "error": last_error}
            )

            if attempt < self._max_retries - 1:
                delay = self._retry_base_delay * (2 ** attempt)
                await asyncio.sleep(delay + random.uniform(0, self._retry_base_delay))

        raise TransientQueryException(
            f"GET {path} failed after {self._max_retries} attempts: {last_error}",
            details={"path": path}
        )

    async def _send(self, method: str, path: str, payload: dict) -> httpx.Response:
        """
        Single-attempt write.

        Raises:
            JiraException: On network failure
        """
        try:
            with log_latency(logger, "jira_request", method=method, path=path):
                return await self._http_client.request(
                    method, API_PREFIX + path, json=payload
                )
        except httpx.TransportError as e:
            raise JiraException(
                f"{method} {path} failed: {type(e).__name__}: {e}",
                details={"path": path}
            )

    async def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._get(path, params)
        if response.status_code != 200:
            raise JiraException(
                f"GET {path} returned {response.status_code}: {_error_text(response)}",
                status_code=response.status_code
            )
        return response.json()

    async def get_issue(self, issue_key: str) -> dict:
        """
        Fetch a single issue.

        Raises:
            ResourceNotFoundException: If Jira answers 404
        """
        response = await self._get(f"/issue/{issue_key}")
        if response.status_code == 404:
            raise ResourceNotFoundException("Ticket", issue_key)
        if response.status_code != 200:
            raise JiraException(
                f"Failed to fetch issue {issue_key}: {response.status_code} - {_error_text(response)}",
                status_code=response.status_code
            )
        return response.json()

    async def get_assignable_users(self, issue_key: str) -> List[dict]:
        data = await self._get_json("/user/assignable/search", {"issueKey": issue_key})
        return data if isinstance(data, list) else []

    async def search_issues(
        self,
        jql: str,
        max_results: int = 50,
        fields: Optional[str] = None
    ) -> dict:
        """Run a JQL search and return the raw page."""
        params: Dict[str, Any] = {"jql": jql, "maxResults": max_results}
        if fields:
            params["fields"] = fields
        return await self._get_json("/search", params)

    async def count_open_issues(self, account_id: str) -> int:
        """Count issues assigned to the account whose status category is not Done."""
        jql = f'assignee = "{account_id}" AND statusCategory != Done'
        data = await self.search_issues(jql, max_results=0)
        return int(data.get("total", 0))

    async def assign_issue(self, issue_key: str, account_id: str) -> None:
        """
        Set the issue assignee.

        Raises:
            AssignmentWriteException: If Jira rejects the write or is unreachable
        """
        try:
            response = await self._send(
                "PUT", f"/issue/{issue_key}/assignee", {"accountId": account_id}
            )
        except JiraException as e:
            raise AssignmentWriteException(e.reason, details=e.details)

        if response.status_code not in (200, 204):
            raise AssignmentWriteException(
                f"Assign failed: {response.status_code} - {_error_text(response)}",
                status_code=response.status_code,
                details={"issue_key": issue_key}
            )

    async def update_issue_fields(self, issue_key: str, fields: dict) -> None:
        response = await self._send("PUT", f"/issue/{issue_key}", {"fields": fields})
        if response.status_code not in (200, 204):
            raise JiraException(
                f"Update failed: {response.status_code} - {_error_text(response)}",
                status_code=response.status_code,
                details={"issue_key": issue_key}
            )

    async def get_project(self, project_id: str) -> dict:
        response = await self._get(f"/project/{project_id}")
        if response.status_code == 404:
            raise ResourceNotFoundException("Project", project_id)
        if response.status_code != 200:
            raise JiraException(
                f"Failed to fetch project {project_id}: {response.status_code}",
                status_code=response.status_code
            )
        return response.json()

    async def create_issue(self, fields: dict) -> dict:
        response = await self._send("POST", "/issue", {"fields": fields})
        if response.status_code != 201:
            raise JiraException(
                f"Jira API {response.status_code}: {_error_text(response)}",
                status_code=response.status_code
            )
        return response.json()

    async def add_comment(self, issue_key: str, body: dict) -> None:
        response = await self._send("POST", f"/issue/{issue_key}/comment", {"body": body})
        if response.status_code != 201:
            raise JiraException(
                f"Comment failed: {response.status_code}",
                status_code=response.status_code,
                details={"issue_key": issue_key}
            )

    async def get_user_groups(self, account_id: str) -> List[str]:
        data = await self._get_json("/user/groups", {"accountId": account_id})
        return [group["name"] for group in data if "name" in group]

    async def close(self) -> None:
        """Close HTTP client."""
        await self._http_client.aclose()
