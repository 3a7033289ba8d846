"""
Assignment Value Objects
========================

Pure candidate filtering and least-loaded selection.
"""

from typing import Iterable, List, Sequence

from warroom.assignment.domain.entities import Candidate, CandidateWorkload

# Workload recorded for a candidate whose open-ticket count could not be read.
# Failures must make a candidate look busy, never idle.
UNKNOWN_WORKLOAD_SENTINEL = 999


def filter_candidates(
    users: Iterable[dict],
    limit: int,
    humans_only: bool = True
) -> List[Candidate]:
    """
    Turn assignable-user payloads into at most ``limit`` candidates.

    Filtering happens before the bound, so app accounts do not use up slots.
    Input order is preserved.
    """
    candidates = [Candidate.from_jira(user) for user in users if user.get("accountId")]
    if humans_only:
        candidates = [c for c in candidates if c.is_human]
    return candidates[:limit]


def select_least_loaded(workloads: Sequence[CandidateWorkload]) -> CandidateWorkload:
    """
    Pick the candidate with the fewest open tickets.

    Ties go to the earliest candidate in input order.

    Raises:
        ValueError: If workloads is empty
    """
    if not workloads:
        raise ValueError("no candidate workloads to choose from")
    # min() returns the first minimal element
    return min(workloads, key=lambda w: w.open_ticket_count)
