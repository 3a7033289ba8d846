"""
Automation Value Objects
========================

Atlassian Document Format (ADF) builders, fixed subtask titles and the
sprint slippage rule.
"""

from typing import List

from warroom.automation.domain.entities import SprintForecast
from warroom.config import RiskLevel
from warroom.core import ValidationException

SUBTASK_TITLES = ["Implementation", "Unit Testing", "Documentation Update"]
SUBTASK_ISSUE_TYPE_NAME = "Subtask"
EPIC_ISSUE_TYPE_NAME = "Epic"

DEFAULT_SPRINT_VELOCITY = 25
DEFAULT_REMAINING_POINTS = 32
DEFAULT_DAYS_LEFT = 2


def _text(text: str) -> dict:
    return {"type": "text", "text": text}


def _paragraph(text: str) -> dict:
    return {"type": "paragraph", "content": [_text(text)]}


def _heading(text: str, level: int = 3) -> dict:
    return {"type": "heading", "attrs": {"level": level}, "content": [_text(text)]}


def _bullet_list(items: List[str]) -> dict:
    return {
        "type": "bulletList",
        "content": [{"type": "listItem", "content": [_paragraph(item)]} for item in items]
    }


def paragraph_document(text: str) -> dict:
    """Single-paragraph ADF document, as used for comments."""
    return {"type": "doc", "version": 1, "content": [_paragraph(text)]}


def improved_description_document() -> dict:
    """The standard ticket structure written by the auto-fix agent."""
    return {
        "type": "doc",
        "version": 1,
        "content": [
            _paragraph("✅ Improved by War Room Orchestrator"),
            _heading("📋 Acceptance Criteria"),
            _bullet_list(["Unit tests passed", "Code reviewed"]),
            _heading("🛠 Steps to Reproduce"),
            _paragraph("(Auto-generated structure for clarity)"),
        ]
    }


def subtask_summary(title: str, parent_key: str) -> str:
    return f"{title} - {parent_key}"


def predict_sprint_slippage(
    velocity: float = DEFAULT_SPRINT_VELOCITY,
    remaining_points: float = DEFAULT_REMAINING_POINTS,
    days_left: float = DEFAULT_DAYS_LEFT
) -> SprintForecast:
    """
    Forecast whether the sprint will slip.

    Risk is HIGH when the points still to burn per remaining day exceed a
    tenth of the sprint velocity.

    Raises:
        ValidationException: If days_left is not positive
    """
    if days_left <= 0:
        raise ValidationException(
            "days_left must be greater than zero",
            {"days_left": days_left}
        )

    if remaining_points / days_left > velocity / 10:
        risk_level = RiskLevel.HIGH
        recommendation = "Scope Cut Required: Remove low priority tickets."
    else:
        risk_level = RiskLevel.LOW
        recommendation = "On Track."

    return SprintForecast(
        velocity=velocity,
        remaining_points=remaining_points,
        days_left=days_left,
        risk_level=risk_level,
        recommendation=recommendation,
    )
