"""
Assignment Application DTOs
===========================

Pydantic models for the assignment endpoint.
"""

from typing import Optional

from pydantic import BaseModel, Field

from warroom.assignment.domain import AssignmentResult


class AssignmentResponse(BaseModel):
    """Response model for an auto-assignment."""
    success: bool = True
    issue_key: str
    account_id: str
    assigned_to: str = Field(..., description="Display name of the new assignee")
    ticket_count: int = Field(..., description="Open tickets the assignee had when chosen")
    candidates_considered: int
    message: str
    timeline_comment_added: Optional[bool] = None

    @classmethod
    def from_result(
        cls,
        result: AssignmentResult,
        timeline_comment_added: Optional[bool] = None
    ) -> "AssignmentResponse":
        return cls(
            issue_key=result.issue_key,
            account_id=result.assignee.account_id,
            assigned_to=result.assignee.display_name,
            ticket_count=result.ticket_count,
            candidates_considered=result.candidates_considered,
            message=result.message,
            timeline_comment_added=timeline_comment_added,
        )
