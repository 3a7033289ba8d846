"""
SLA Value Objects
==================

Pure SLA budget lookups and risk classification.

Everything here is a function of its inputs: the caller supplies ``now``.
"""

import math
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

from warroom.config import (
    RiskLevel, SLA_BUDGET_HOURS, DEFAULT_SLA_PRIORITY
)
from warroom.core import ValidationException
from warroom.sla.domain.entities import SLARiskAssessment

# Lower bounds are exclusive: exactly 75% is MEDIUM, not HIGH
RISK_THRESHOLDS = [
    (100.0, RiskLevel.BREACHED),
    (75.0, RiskLevel.HIGH),
    (50.0, RiskLevel.MEDIUM),
]

BREACH_PROBABILITY_LABELS: Dict[str, str] = {
    RiskLevel.BREACHED: "100%",
    RiskLevel.HIGH: "80-99%",
    RiskLevel.MEDIUM: "40-60%",
    RiskLevel.LOW: "Low",
}


class SLARiskClassifier:
    """
    Pure functions for SLA risk calculations.

    Stateless utility class - all risk bucketing logic in one place.
    """

    @staticmethod
    def budget_for(priority: Optional[str]) -> Tuple[int, bool]:
        """
        Look up the SLA budget for a priority label.

        Unknown or missing labels get the Medium budget.

        Returns:
            Tuple of (hours allowed, whether the default was applied)
        """
        if priority in SLA_BUDGET_HOURS:
            return SLA_BUDGET_HOURS[priority], False
        return SLA_BUDGET_HOURS[DEFAULT_SLA_PRIORITY], True

    @staticmethod
    def risk_level_for(elapsed_percent: float) -> RiskLevel:
        """Bucket an elapsed-budget percentage into a risk level."""
        for threshold, level in RISK_THRESHOLDS:
            if elapsed_percent > threshold:
                return level
        return RiskLevel.LOW

    @staticmethod
    def classify_age(age_hours: float, priority: Optional[str]) -> SLARiskAssessment:
        """
        Classify breach risk for a ticket of known age.

        Args:
            age_hours: Hours since the ticket was created
            priority: Jira priority name

        Raises:
            ValidationException: If age_hours is not a finite number
        """
        if isinstance(age_hours, bool) or not isinstance(age_hours, (int, float)) \
                or not math.isfinite(age_hours):
            raise ValidationException(
                f"Invalid ticket age: {age_hours!r}",
                {"age_hours": age_hours}
            )

        limit, defaulted = SLARiskClassifier.budget_for(priority)
        elapsed_percent = age_hours / limit * 100
        risk_level = SLARiskClassifier.risk_level_for(elapsed_percent)

        return SLARiskAssessment(
            risk_level=risk_level,
            breach_probability=BREACH_PROBABILITY_LABELS[risk_level],
            age_hours=round(age_hours, 1),
            sla_limit_hours=limit,
            elapsed_percent=round(elapsed_percent, 1),
            priority=priority if priority else DEFAULT_SLA_PRIORITY,
            budget_defaulted=defaulted,
        )

    @staticmethod
    def classify(
        created_at: Optional[datetime],
        priority: Optional[str],
        now: datetime
    ) -> SLARiskAssessment:
        """
        Classify breach risk from a creation timestamp.

        Naive datetimes are taken as UTC.

        Raises:
            ValidationException: If created_at is missing
        """
        if not isinstance(created_at, datetime):
            raise ValidationException(
                "Ticket creation timestamp is missing or invalid",
                {"created_at": created_at}
            )
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        age_hours = (now - created_at).total_seconds() / 3600
        return SLARiskClassifier.classify_age(age_hours, priority)
