"""
Assignment Domain Entities
==========================

Candidates, their measured workloads and the outcome of an assignment.
"""

from dataclasses import dataclass

from warroom.config import AccountType


@dataclass(frozen=True)
class Candidate:
    """A user Jira reports as assignable for a ticket."""

    account_id: str
    display_name: str
    account_type: str = AccountType.ATLASSIAN

    @property
    def is_human(self) -> bool:
        return self.account_type == AccountType.ATLASSIAN

    @classmethod
    def from_jira(cls, payload: dict) -> "Candidate":
        """Build from an entry of ``/user/assignable/search``."""
        account_id = payload.get("accountId", "")
        return cls(
            account_id=account_id,
            display_name=payload.get("displayName") or account_id,
            account_type=payload.get("accountType") or AccountType.ATLASSIAN,
        )


@dataclass(frozen=True)
class CandidateWorkload:
    """
    Open-ticket count for one candidate.

    ``load_known`` is False when the count is the unknown-workload sentinel.
    """

    candidate: Candidate
    open_ticket_count: int
    load_known: bool = True


@dataclass(frozen=True)
class AssignmentResult:
    """Outcome of a successful auto-assignment."""

    issue_key: str
    assignee: Candidate
    ticket_count: int
    candidates_considered: int

    @property
    def message(self) -> str:
        return (
            f"Assigned to {self.assignee.display_name}. "
            f"They have the lowest active load ({self.ticket_count} tickets)."
        )
