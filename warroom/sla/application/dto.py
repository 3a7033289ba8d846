"""
SLA Application DTOs
=====================

Data Transfer Objects for SLA API layer.

These Pydantic models handle serialization/deserialization and validation
for API requests and responses.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from warroom.sla.domain import SLARiskAssessment


# ========== Type Aliases for Literals ==========
RiskLevelStr = Literal["LOW", "MEDIUM", "HIGH", "BREACHED"]


# ========== Request DTOs ==========

class ClassifyRiskRequest(BaseModel):
    """
    Request model for the pure classifier.

    Exactly one of ``created_at`` or ``age_hours`` must be given.
    """
    priority: Optional[str] = Field(None, description="Jira priority name (unknown names use the Medium budget)")
    created_at: Optional[datetime] = Field(None, description="Ticket creation timestamp")
    age_hours: Optional[float] = Field(None, description="Ticket age in hours")
    now: Optional[datetime] = Field(None, description="Evaluation time (defaults to current time)")

    @model_validator(mode="after")
    def check_age_source(self) -> "ClassifyRiskRequest":
        if (self.created_at is None) == (self.age_hours is None):
            raise ValueError("provide exactly one of created_at or age_hours")
        return self


# ========== Response DTOs ==========

class SLARiskResponse(BaseModel):
    """Response model for an SLA risk assessment."""
    issue_key: Optional[str] = Field(None, description="Jira issue key, when classified from a live ticket")
    priority: str
    risk_level: RiskLevelStr
    breach_probability: str = Field(..., description="Coarse label, not a true probability")
    age_hours: float = Field(..., description="Ticket age, rounded to 1 decimal")
    sla_limit_hours: int
    elapsed_percent: float
    budget_defaulted: bool = Field(False, description="True when the priority was unknown")

    @classmethod
    def from_assessment(
        cls,
        assessment: SLARiskAssessment,
        issue_key: Optional[str] = None
    ) -> "SLARiskResponse":
        return cls(
            issue_key=issue_key,
            priority=assessment.priority,
            risk_level=assessment.risk_level,
            breach_probability=assessment.breach_probability,
            age_hours=assessment.age_hours,
            sla_limit_hours=assessment.sla_limit_hours,
            elapsed_percent=assessment.elapsed_percent,
            budget_defaulted=assessment.budget_defaulted,
        )
