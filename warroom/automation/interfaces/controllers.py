"""
Automation Controllers (API Routes)
===================================

FastAPI routes for the scripted ticket agents.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from warroom.automation.application import (
    AccessService,
    AgentActionResponse,
    AutoFixService,
    SprintPredictionRequest,
    SprintPredictionResponse,
    SubtaskService,
    SubtasksResponse,
    TimelineCommentRequest,
    TimelineCommentResponse,
    TimelineService,
    UserAccessResponse,
)
from warroom.automation.domain import predict_sprint_slippage
from warroom.infrastructure.jira import ITicketTracker
from warroom.shared.api.dependencies import get_ticket_tracker

router = APIRouter(prefix="/agents", tags=["Automation Agents"])


# ========== Dependencies ==========

def get_auto_fix_service(
    tracker: ITicketTracker = Depends(get_ticket_tracker)
) -> AutoFixService:
    return AutoFixService(tracker)


def get_subtask_service(
    tracker: ITicketTracker = Depends(get_ticket_tracker)
) -> SubtaskService:
    return SubtaskService(tracker)


def get_timeline_service(
    tracker: ITicketTracker = Depends(get_ticket_tracker)
) -> TimelineService:
    return TimelineService(tracker)


def get_access_service(
    tracker: ITicketTracker = Depends(get_ticket_tracker)
) -> AccessService:
    return AccessService(tracker)


# ========== Route Handlers ==========

@router.post(
    "/auto-fix/{issue_key}",
    response_model=AgentActionResponse,
    summary="Rewrite a ticket description into the standard structure",
    responses={
        400: {"description": "Malformed issue key"},
        404: {"description": "Ticket not found"},
        409: {"description": "Ticket is Done or Closed"}
    }
)
async def auto_fix(
    issue_key: str,
    timeline_note: bool = Query(False, description="Also post a timeline comment"),
    service: AutoFixService = Depends(get_auto_fix_service),
    timeline: TimelineService = Depends(get_timeline_service)
):
    message = await service.auto_fix(issue_key)

    comment_added = None
    if timeline_note:
        comment_added = await timeline.add_timeline_comment(
            issue_key, "War Room: description restructured by auto-fix agent."
        )

    return AgentActionResponse(
        issue_key=issue_key,
        message=message,
        timeline_comment_added=comment_added
    )


@router.post(
    "/subtasks/{issue_key}",
    response_model=SubtasksResponse,
    summary="Create Implementation, Unit Testing and Documentation subtasks",
    responses={
        400: {"description": "Malformed issue key"},
        409: {"description": "Ticket is Done or Closed"},
        422: {"description": "Ticket cannot hold subtasks"}
    }
)
async def generate_subtasks(
    issue_key: str,
    service: SubtaskService = Depends(get_subtask_service)
):
    created = await service.generate_subtasks(issue_key)
    return SubtasksResponse(issue_key=issue_key, created_subtasks=created)


@router.post(
    "/sprint-prediction",
    response_model=SprintPredictionResponse,
    summary="Forecast sprint slippage",
    description="Risk is HIGH when remaining points per day exceed a tenth of the velocity."
)
async def sprint_prediction(request: Optional[SprintPredictionRequest] = None):
    request = request or SprintPredictionRequest()
    forecast = predict_sprint_slippage(
        velocity=request.velocity,
        remaining_points=request.remaining_points,
        days_left=request.days_left
    )
    return SprintPredictionResponse.from_forecast(forecast)


@router.post(
    "/comments/{issue_key}",
    response_model=TimelineCommentResponse,
    summary="Post a timeline comment (best effort)"
)
async def add_timeline_comment(
    issue_key: str,
    request: TimelineCommentRequest,
    service: TimelineService = Depends(get_timeline_service)
):
    added = await service.add_timeline_comment(issue_key, request.text)
    return TimelineCommentResponse(issue_key=issue_key, added=added)


@router.get(
    "/permissions/{account_id}",
    response_model=UserAccessResponse,
    summary="Resolve war-room role and permissions for an account"
)
async def get_permissions(
    account_id: str,
    service: AccessService = Depends(get_access_service)
):
    access = await service.resolve_user_access(account_id)
    return UserAccessResponse.from_access(access)


# Export router for inclusion in main app
automation_router = router
