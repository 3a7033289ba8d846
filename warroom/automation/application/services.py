"""
Automation Application Services
===============================

Scripted sequences of Jira calls: description clean-up, subtask
generation, timeline comments and access resolution.

None of these retry writes; a failed write stops the sequence.
"""

from typing import List

from warroom.automation.domain import (
    EPIC_ISSUE_TYPE_NAME,
    ROLE_LABELS,
    SUBTASK_ISSUE_TYPE_NAME,
    SUBTASK_TITLES,
    UserAccess,
    get_primary_role,
    get_user_permissions,
    improved_description_document,
    paragraph_document,
    subtask_summary,
)
from warroom.core import ApplicationException, DomainException, TerminalStateException
from warroom.infrastructure.jira import ITicketTracker
from warroom.shared.domain import Ticket, validate_issue_key
from warroom.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class AutoFixService:
    """Rewrites a ticket description into the standard structure."""

    def __init__(self, tracker: ITicketTracker):
        self._tracker = tracker

    async def auto_fix(self, issue_key: str) -> str:
        """
        Replace the description of an open ticket.

        Returns:
            Human-readable success message

        Raises:
            ValidationException: Malformed issue key
            ResourceNotFoundException: Ticket does not exist
            TerminalStateException: Ticket is Done or Closed
            JiraException: The update was rejected
        """
        validate_issue_key(issue_key)

        ticket = Ticket.from_jira(await self._tracker.get_issue(issue_key))
        if ticket.is_terminal:
            raise TerminalStateException(issue_key, ticket.status, "Auto-fix")

        await self._tracker.update_issue_fields(
            issue_key, {"description": improved_description_document()}
        )

        logger.info("Ticket description improved", extra={"issue_key": issue_key})
        return f"Ticket {issue_key} improved with standardized structure."


class SubtaskService:
    """Creates the standard implementation/testing/docs subtasks."""

    def __init__(self, tracker: ITicketTracker):
        self._tracker = tracker

    async def generate_subtasks(self, issue_key: str) -> List[str]:
        """
        Create one subtask per entry of ``SUBTASK_TITLES``, in order.

        Returns:
            Keys of the created subtasks

        Raises:
            ValidationException: Malformed issue key
            TerminalStateException: Ticket is Done or Closed
            DomainException: Ticket cannot hold subtasks, or the project has no Subtask type
            JiraException: A create call was rejected (earlier subtasks stay created)
        """
        validate_issue_key(issue_key)

        ticket = Ticket.from_jira(await self._tracker.get_issue(issue_key))

        if not ticket.has_project:
            raise DomainException(
                "Issue data incomplete. Missing project field.",
                {"issue_key": issue_key}
            )
        if ticket.is_terminal:
            raise TerminalStateException(issue_key, ticket.status, "Subtask creation")
        if ticket.is_subtask:
            raise DomainException(
                f"Cannot create subtasks for an issue that is already a subtask ({issue_key}).",
                {"issue_key": issue_key}
            )
        if ticket.issue_type == EPIC_ISSUE_TYPE_NAME:
            raise DomainException(
                f"Cannot create subtasks for an Epic ({issue_key}). Use 'Child Issues' instead.",
                {"issue_key": issue_key}
            )

        subtask_type_id = await self._find_subtask_type(ticket)

        created = []
        for title in SUBTASK_TITLES:
            data = await self._tracker.create_issue({
                "project": {"id": ticket.project_id},
                "parent": {"key": issue_key},
                "summary": subtask_summary(title, issue_key),
                "issuetype": {"id": subtask_type_id},
            })
            created.append(data["key"])

        logger.info(
            "Subtasks created",
            extra={"issue_key": issue_key, "subtasks": created}
        )
        return created

    async def _find_subtask_type(self, ticket: Ticket) -> str:
        project = await self._tracker.get_project(ticket.project_id)
        issue_types = project.get("issueTypes") or []

        for issue_type in issue_types:
            if issue_type.get("name") == SUBTASK_ISSUE_TYPE_NAME and issue_type.get("subtask"):
                return issue_type["id"]

        logger.error(
            "Subtask issue type missing",
            extra={
                "project_key": ticket.project_key,
                "available_types": [it.get("name") for it in issue_types]
            }
        )
        raise DomainException(
            f"Could not find issue type '{SUBTASK_ISSUE_TYPE_NAME}' in project {ticket.project_key}.",
            {"project_key": ticket.project_key}
        )


class TimelineService:
    """Best-effort comments recording agent actions on a ticket."""

    def __init__(self, tracker: ITicketTracker):
        self._tracker = tracker

    async def add_timeline_comment(self, issue_key: str, text: str) -> bool:
        """
        Post ``text`` as a comment.

        Returns:
            True if Jira created the comment, False otherwise. Never raises
            for Jira failures so the calling operation is not undone.

        Raises:
            ValidationException: Malformed issue key
        """
        validate_issue_key(issue_key)

        try:
            await self._tracker.add_comment(issue_key, paragraph_document(text))
        except ApplicationException as e:
            logger.warning(
                "Timeline comment failed",
                extra={"issue_key": issue_key, "error": e.message}
            )
            return False

        logger.info("Timeline comment added", extra={"issue_key": issue_key})
        return True


class AccessService:
    """Resolves war-room role and permissions for a Jira account."""

    def __init__(self, tracker: ITicketTracker):
        self._tracker = tracker

    async def resolve_user_access(self, account_id: str) -> UserAccess:
        """
        Look up the account's groups and derive its role.

        A failed group lookup is treated as membership in no groups.
        """
        try:
            groups = await self._tracker.get_user_groups(account_id)
        except ApplicationException as e:
            logger.warning(
                "Group lookup failed, using default access",
                extra={"account_id": account_id, "error": e.message}
            )
            groups = []

        role = get_primary_role(groups)
        return UserAccess(
            account_id=account_id,
            groups=groups,
            primary_role=role,
            role_label=ROLE_LABELS.get(role) if role else None,
            permissions=get_user_permissions(groups),
        )
