"""
SLA Domain Entities
====================

Result objects produced by the SLA risk classifier.
"""

from dataclasses import dataclass

from warroom.config import RiskLevel


@dataclass(frozen=True)
class SLARiskAssessment:
    """
    Breach-risk classification for a single ticket.

    ``breach_probability`` is a coarse display label, not a probability.
    """

    risk_level: RiskLevel
    breach_probability: str
    age_hours: float
    sla_limit_hours: int
    elapsed_percent: float
    priority: str
    budget_defaulted: bool = False

    @property
    def is_breached(self) -> bool:
        return self.risk_level == RiskLevel.BREACHED

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "riskLevel": self.risk_level,
            "breachProbability": self.breach_probability,
            "ageHours": self.age_hours,
            "slaLimitHours": self.sla_limit_hours,
            "elapsedPercent": self.elapsed_percent,
            "priority": self.priority,
            "budgetDefaulted": self.budget_defaulted,
        }
