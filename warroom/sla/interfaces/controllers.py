"""
SLA Controllers (API Routes)
=============================

FastAPI routes for SLA risk prediction.

Controllers are thin - they delegate to application services.
"""

from fastapi import APIRouter, Depends

from warroom.infrastructure.jira import ITicketTracker
from warroom.shared.api.dependencies import get_ticket_tracker
from warroom.sla.application import (
    ClassifyRiskRequest,
    SLARiskResponse,
    SLAPredictionService,
    utc_now,
)
from warroom.sla.domain import SLARiskClassifier

router = APIRouter(prefix="/sla", tags=["SLA Prediction"])


# ========== Example payloads for Swagger ==========

SLA_RISK_RESPONSE_EXAMPLE = {
    "issue_key": "KAN-42",
    "priority": "Highest",
    "risk_level": "HIGH",
    "breach_probability": "80-99%",
    "age_hours": 3.1,
    "sla_limit_hours": 4,
    "elapsed_percent": 77.5,
    "budget_defaulted": False
}


# ========== Dependencies ==========

def get_sla_service(
    tracker: ITicketTracker = Depends(get_ticket_tracker)
) -> SLAPredictionService:
    """Get SLA prediction service instance."""
    return SLAPredictionService(tracker)


# ========== Route Handlers ==========

@router.get(
    "/risk/{issue_key}",
    response_model=SLARiskResponse,
    summary="Predict SLA breach risk for a Jira ticket",
    description="""
    Fetch the ticket and classify its breach risk.

    **SLA budgets (hours)**: Highest 4, High 24, Medium 48, Low 72, Lowest 120.
    Unknown priorities use the Medium budget and report `budget_defaulted: true`.

    **Risk levels** (share of budget elapsed, strict comparisons):
    `> 100%` BREACHED, `> 75%` HIGH, `> 50%` MEDIUM, otherwise LOW.
    """,
    responses={
        200: {
            "description": "Risk assessment",
            "content": {"application/json": {"example": SLA_RISK_RESPONSE_EXAMPLE}}
        },
        400: {"description": "Malformed issue key"},
        404: {"description": "Ticket not found"}
    }
)
async def predict_sla_risk(
    issue_key: str,
    service: SLAPredictionService = Depends(get_sla_service)
):
    assessment = await service.predict_sla_risk(issue_key)
    return SLARiskResponse.from_assessment(assessment, issue_key)


@router.post(
    "/classify",
    response_model=SLARiskResponse,
    summary="Classify SLA risk from raw inputs",
    description="Pure classifier: supply `priority` and either `created_at` or `age_hours`."
)
async def classify_sla_risk(request: ClassifyRiskRequest):
    if request.age_hours is not None:
        assessment = SLARiskClassifier.classify_age(request.age_hours, request.priority)
    else:
        assessment = SLARiskClassifier.classify(
            request.created_at, request.priority, request.now or utc_now()
        )
    return SLARiskResponse.from_assessment(assessment)


# Export router for inclusion in main app
sla_router = router
