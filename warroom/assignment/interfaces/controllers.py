"""
Assignment Controllers (API Routes)
===================================

FastAPI route for workload-based auto-assignment.
"""

from fastapi import APIRouter, Depends, Query

from warroom.assignment.application import AssignmentResponse, AutoAssignService
from warroom.automation.application import TimelineService
from warroom.automation.interfaces.controllers import get_timeline_service
from warroom.infrastructure.jira import ITicketTracker
from warroom.shared.api.dependencies import get_ticket_tracker

router = APIRouter(prefix="/agents", tags=["Auto Assignment"])


def get_assign_service(
    tracker: ITicketTracker = Depends(get_ticket_tracker)
) -> AutoAssignService:
    """Get auto-assign service instance."""
    return AutoAssignService(tracker)


@router.post(
    "/assign/{issue_key}",
    response_model=AssignmentResponse,
    summary="Assign a ticket to the least-loaded eligible user",
    description="""
    Considers up to `ASSIGN_CANDIDATE_LIMIT` assignable users (humans only by default),
    counts each one's open tickets and assigns the ticket to the lowest count.
    Ties go to the first candidate in Jira's order. A failed workload query
    counts as 999 open tickets.
    """,
    responses={
        400: {"description": "Malformed issue key"},
        404: {"description": "Ticket not found"},
        409: {"description": "Ticket is Done or Closed"},
        422: {"description": "No eligible candidates"},
        502: {"description": "Jira rejected the assignment"}
    }
)
async def auto_assign(
    issue_key: str,
    timeline_note: bool = Query(False, description="Also post a timeline comment"),
    service: AutoAssignService = Depends(get_assign_service),
    timeline: TimelineService = Depends(get_timeline_service)
):
    result = await service.auto_assign(issue_key)

    comment_added = None
    if timeline_note:
        comment_added = await timeline.add_timeline_comment(
            issue_key, f"War Room: {result.message}"
        )

    return AssignmentResponse.from_result(result, comment_added)


# Export router for inclusion in main app
assignment_router = router
