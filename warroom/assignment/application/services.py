"""
Assignment Application Services
===============================

Workload-based auto-assignment of Jira tickets.

Reads N candidate workloads, then writes one assignee. There is no
transaction around the reads and the write: if the write fails the loads
are discarded, and two concurrent calls for the same ticket are not
mutually excluded.
"""

import asyncio
from typing import List, Optional

from warroom.assignment.domain import (
    AssignmentResult,
    Candidate,
    CandidateWorkload,
    UNKNOWN_WORKLOAD_SENTINEL,
    filter_candidates,
    select_least_loaded,
)
from warroom.config import settings
from warroom.core import (
    AssignmentWriteException,
    JiraException,
    NoCandidatesException,
    TerminalStateException,
)
from warroom.infrastructure.jira import ITicketTracker
from warroom.shared.domain import Ticket, validate_issue_key
from warroom.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class AutoAssignService:
    """
    Assigns a ticket to the least-loaded eligible user.

    Workload queries run one at a time unless ``concurrent`` is set; both
    modes yield the same choice.
    """

    def __init__(
        self,
        tracker: ITicketTracker,
        candidate_limit: Optional[int] = None,
        humans_only: Optional[bool] = None,
        concurrent: Optional[bool] = None
    ):
        self._tracker = tracker
        self._candidate_limit = candidate_limit or settings.assign_candidate_limit
        self._humans_only = settings.assign_humans_only if humans_only is None else humans_only
        self._concurrent = (
            settings.assign_concurrent_load_queries if concurrent is None else concurrent
        )

    async def auto_assign(self, issue_key: str) -> AssignmentResult:
        """
        Assign ``issue_key`` to the candidate with the fewest open tickets.

        Raises:
            ValidationException: Malformed issue key
            ResourceNotFoundException: Ticket does not exist
            TerminalStateException: Ticket is Done or Closed
            NoCandidatesException: Nobody eligible; nothing is written
            AssignmentWriteException: The final write failed (not retried)
        """
        validate_issue_key(issue_key)
        logger.info("Auto-assign started", extra={"issue_key": issue_key})

        ticket = Ticket.from_jira(await self._tracker.get_issue(issue_key))
        if ticket.is_terminal:
            raise TerminalStateException(issue_key, ticket.status, "Assignment")

        users = await self._tracker.get_assignable_users(issue_key)
        candidates = filter_candidates(users, self._candidate_limit, self._humans_only)
        if not candidates:
            raise NoCandidatesException(issue_key)

        workloads = await self.measure_workloads(candidates)
        best = select_least_loaded(workloads)

        try:
            await self._tracker.assign_issue(issue_key, best.candidate.account_id)
        except AssignmentWriteException:
            raise
        except JiraException as e:
            raise AssignmentWriteException(e.reason, e.status_code, e.details)

        result = AssignmentResult(
            issue_key=issue_key,
            assignee=best.candidate,
            ticket_count=best.open_ticket_count,
            candidates_considered=len(candidates),
        )
        logger.info(
            "Ticket auto-assigned",
            extra={
                "issue_key": issue_key,
                "account_id": best.candidate.account_id,
                "ticket_count": best.open_ticket_count,
                "load_known": best.load_known,
                "candidates_considered": len(candidates)
            }
        )
        return result

    async def measure_workloads(self, candidates: List[Candidate]) -> List[CandidateWorkload]:
        """Read each candidate's open-ticket count, preserving input order."""
        if self._concurrent:
            return list(await asyncio.gather(*(self._workload_for(c) for c in candidates)))

        workloads = []
        for candidate in candidates:
            workloads.append(await self._workload_for(candidate))
        return workloads

    async def _workload_for(self, candidate: Candidate) -> CandidateWorkload:
        """Count one candidate's load; any failure scores as the sentinel."""
        try:
            count = await self._tracker.count_open_issues(candidate.account_id)
        except Exception as e:
            logger.warning(
                "Workload query failed, treating candidate as busy",
                extra={
                    "account_id": candidate.account_id,
                    "error": str(e),
                    "sentinel": UNKNOWN_WORKLOAD_SENTINEL
                }
            )
            return CandidateWorkload(candidate, UNKNOWN_WORKLOAD_SENTINEL, load_known=False)
        return CandidateWorkload(candidate, count)
