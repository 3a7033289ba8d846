"""
Automation Domain Entities
==========================

Result objects for the scripted ticket agents.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from warroom.automation.domain.permissions import has_permission


@dataclass(frozen=True)
class SprintForecast:
    """Sprint slippage forecast."""

    velocity: float
    remaining_points: float
    days_left: float
    risk_level: str
    recommendation: str

    @property
    def message(self) -> str:
        return f"Sprint Risk: {self.risk_level}. {self.recommendation}"


@dataclass(frozen=True)
class UserAccess:
    """Role and permitted actions resolved for a Jira account."""

    account_id: str
    groups: List[str] = field(default_factory=list)
    primary_role: Optional[str] = None
    role_label: Optional[str] = None
    permissions: List[str] = field(default_factory=list)

    def can(self, action: str) -> bool:
        return has_permission(self.permissions, action)
