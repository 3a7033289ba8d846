"""
Shared Domain Entities
======================

The Jira ticket as seen by every agent, plus issue-key validation.

Following Domain-Driven Design principles, these entities are free of
infrastructure concerns: they are built from already-decoded Jira payloads.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from warroom.config import TERMINAL_STATUSES
from warroom.core import ValidationException

ISSUE_KEY_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*-\d+$")

_OFFSET_WITHOUT_COLON = re.compile(r"([+-]\d{2})(\d{2})$")


def validate_issue_key(issue_key: Any) -> str:
    """
    Validate a Jira issue key such as ``KAN-123``.

    Returns:
        The key, unchanged

    Raises:
        ValidationException: If the key is not a project prefix, a dash and a number
    """
    if not isinstance(issue_key, str) or not ISSUE_KEY_PATTERN.fullmatch(issue_key):
        raise ValidationException(
            f'Invalid Issue Key format: "{issue_key}". Expected format like "KAN-123".',
            {"issue_key": issue_key}
        )
    return issue_key


def parse_jira_datetime(value: Any) -> datetime:
    """
    Parse a Jira timestamp (``2024-01-15T10:00:00.000+0000``) into an aware datetime.

    Naive values are taken as UTC.

    Raises:
        ValidationException: If the value is missing or not a timestamp
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        text = _OFFSET_WITHOUT_COLON.sub(r"\1:\2", text)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationException(
                f"Invalid timestamp: {value!r}",
                {"value": value}
            )
    else:
        raise ValidationException(
            "Ticket creation timestamp is missing",
            {"value": value}
        )

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Ticket:
    """
    Ticket entity representing a Jira issue.

    Immutable once fetched; agents never cache it across requests.
    """

    key: str
    created: Optional[str]
    priority: Optional[str]
    status: str

    summary: Optional[str] = None
    issue_type: Optional[str] = None
    is_subtask: bool = False
    project_id: Optional[str] = None
    project_key: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        """Check if ticket is already Done or Closed."""
        return self.status in TERMINAL_STATUSES

    @property
    def created_at(self) -> datetime:
        """
        Creation time as an aware datetime.

        Raises:
            ValidationException: If Jira sent no usable timestamp
        """
        return parse_jira_datetime(self.created)

    @property
    def has_project(self) -> bool:
        return self.project_id is not None

    @classmethod
    def from_jira(cls, payload: dict) -> "Ticket":
        """
        Build a ticket from a ``GET /rest/api/3/issue/{key}`` response.

        Priority and creation time are kept as sent; only SLA
        classification needs them.
        """
        fields = payload.get("fields") or {}
        status = (fields.get("status") or {}).get("name") or "Unknown"
        priority = (fields.get("priority") or {}).get("name")
        issue_type = fields.get("issuetype") or {}
        project = fields.get("project") or {}

        return cls(
            key=payload.get("key", ""),
            created=fields.get("created"),
            priority=priority,
            status=status,
            summary=fields.get("summary"),
            issue_type=issue_type.get("name"),
            is_subtask=bool(issue_type.get("subtask", False)),
            project_id=project.get("id"),
            project_key=project.get("key"),
        )
