"""
Automation Application DTOs
===========================

Pydantic models for the agent endpoints.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from warroom.automation.domain import SprintForecast, UserAccess


# ========== Request DTOs ==========

class SprintPredictionRequest(BaseModel):
    """Request model for sprint slippage prediction."""
    velocity: float = Field(default=25, gt=0, description="Story points per sprint")
    remaining_points: float = Field(default=32, ge=0, description="Points left in the sprint")
    days_left: float = Field(default=2, description="Working days left")


class TimelineCommentRequest(BaseModel):
    """Request model for a timeline comment."""
    text: str = Field(..., min_length=1, max_length=32000, description="Comment text")


# ========== Response DTOs ==========

class AgentActionResponse(BaseModel):
    """Generic response for a completed agent action."""
    success: bool = True
    issue_key: str
    message: str
    timeline_comment_added: Optional[bool] = Field(
        None, description="Set when a timeline comment was requested"
    )


class SubtasksResponse(BaseModel):
    """Response model for subtask generation."""
    success: bool = True
    issue_key: str
    created_subtasks: List[str]


class SprintPredictionResponse(BaseModel):
    """Response model for sprint slippage prediction."""
    success: bool = True
    velocity: float
    remaining_points: float
    days_left: float
    risk_level: Literal["LOW", "HIGH"]
    recommendation: str
    message: str

    @classmethod
    def from_forecast(cls, forecast: SprintForecast) -> "SprintPredictionResponse":
        return cls(
            velocity=forecast.velocity,
            remaining_points=forecast.remaining_points,
            days_left=forecast.days_left,
            risk_level=forecast.risk_level,
            recommendation=forecast.recommendation,
            message=forecast.message,
        )


class TimelineCommentResponse(BaseModel):
    """Response model for a timeline comment."""
    issue_key: str
    added: bool


class UserAccessResponse(BaseModel):
    """Response model for permission resolution."""
    account_id: str
    groups: List[str]
    primary_role: Optional[str]
    role_label: Optional[str]
    permissions: List[str]

    @classmethod
    def from_access(cls, access: UserAccess) -> "UserAccessResponse":
        return cls(
            account_id=access.account_id,
            groups=access.groups,
            primary_role=access.primary_role,
            role_label=access.role_label,
            permissions=access.permissions,
        )
