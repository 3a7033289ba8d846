"""
Assignment Domain Layer
=======================

Contains:
- Entities: Candidate, CandidateWorkload, AssignmentResult
- Value Objects & Services: candidate filtering and least-loaded selection

This layer has no dependencies on infrastructure - pure Python business logic.
"""

from warroom.assignment.domain.entities import (
    Candidate,
    CandidateWorkload,
    AssignmentResult,
)
from warroom.assignment.domain.value_objects import (
    UNKNOWN_WORKLOAD_SENTINEL,
    filter_candidates,
    select_least_loaded,
)

__all__ = [
    "Candidate",
    "CandidateWorkload",
    "AssignmentResult",
    "UNKNOWN_WORKLOAD_SENTINEL",
    "filter_candidates",
    "select_least_loaded",
]
