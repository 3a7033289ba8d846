"""
Shared fixtures: an in-memory ticket tracker and Jira payload builders.
"""

from typing import Dict, List, Optional

import pytest

from warroom.core import JiraException, ResourceNotFoundException
from warroom.infrastructure.jira import ITicketTracker


def make_issue(
    key: str = "KAN-1",
    created: Optional[str] = "2024-01-15T10:00:00.000+0000",
    priority: Optional[str] = "High",
    status: str = "To Do",
    issue_type: str = "Task",
    subtask: bool = False,
    project: Optional[dict] = None,
) -> dict:
    """Build a ``GET /issue/{key}`` payload."""
    fields = {
        "summary": f"Summary of {key}",
        "status": {"name": status},
        "issuetype": {"name": issue_type, "subtask": subtask},
        "project": project if project is not None else {"id": "10000", "key": key.split("-")[0]},
    }
    if created is not None:
        fields["created"] = created
    if priority is not None:
        fields["priority"] = {"name": priority}
    return {"key": key, "fields": fields}


def make_user(account_id: str, name: Optional[str] = None, account_type: str = "atlassian") -> dict:
    return {
        "accountId": account_id,
        "displayName": name or account_id.title(),
        "accountType": account_type,
    }


class FakeTracker(ITicketTracker):
    """
    In-memory ITicketTracker recording every write.

    ``loads`` maps account id to open-ticket count; a value that is an
    exception instance is raised instead.
    """

    def __init__(self):
        self.issues: Dict[str, dict] = {}
        self.assignable: Dict[str, List[dict]] = {}
        self.loads: Dict[str, object] = {}
        self.projects: Dict[str, dict] = {}
        self.groups: Dict[str, object] = {}

        self.assign_error: Optional[Exception] = None
        self.update_error: Optional[Exception] = None
        self.comment_error: Optional[Exception] = None
        self.create_error_after: Optional[int] = None

        self.load_queries: List[str] = []
        self.assignments: List[tuple] = []
        self.updates: List[tuple] = []
        self.created: List[dict] = []
        self.comments: List[tuple] = []

    async def get_issue(self, issue_key: str) -> dict:
        if issue_key not in self.issues:
            raise ResourceNotFoundException("Ticket", issue_key)
        return self.issues[issue_key]

    async def get_assignable_users(self, issue_key: str) -> List[dict]:
        return self.assignable.get(issue_key, [])

    async def count_open_issues(self, account_id: str) -> int:
        self.load_queries.append(account_id)
        load = self.loads.get(account_id, 0)
        if isinstance(load, Exception):
            raise load
        return load

    async def assign_issue(self, issue_key: str, account_id: str) -> None:
        if self.assign_error is not None:
            raise self.assign_error
        self.assignments.append((issue_key, account_id))

    async def update_issue_fields(self, issue_key: str, fields: dict) -> None:
        if self.update_error is not None:
            raise self.update_error
        self.updates.append((issue_key, fields))

    async def get_project(self, project_id: str) -> dict:
        if project_id not in self.projects:
            raise ResourceNotFoundException("Project", project_id)
        return self.projects[project_id]

    async def create_issue(self, fields: dict) -> dict:
        if self.create_error_after is not None and len(self.created) >= self.create_error_after:
            raise JiraException("Jira API 400: rejected", status_code=400)
        self.created.append(fields)
        return {"key": f"{fields['parent']['key'].split('-')[0]}-{100 + len(self.created)}"}

    async def add_comment(self, issue_key: str, body: dict) -> None:
        if self.comment_error is not None:
            raise self.comment_error
        self.comments.append((issue_key, body))

    async def get_user_groups(self, account_id: str) -> List[str]:
        groups = self.groups.get(account_id, [])
        if isinstance(groups, Exception):
            raise groups
        return groups


@pytest.fixture
def tracker() -> FakeTracker:
    return FakeTracker()
