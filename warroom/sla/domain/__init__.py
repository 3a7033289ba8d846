"""
SLA Domain Layer
================

Domain layer for SLA prediction.

Contains:
- Entities: SLARiskAssessment
- Value Objects & Services: SLARiskClassifier and its threshold tables

This layer has no dependencies on infrastructure - pure Python business logic.
"""

from warroom.sla.domain.entities import SLARiskAssessment
from warroom.sla.domain.value_objects import (
    SLARiskClassifier,
    RISK_THRESHOLDS,
    BREACH_PROBABILITY_LABELS,
)

__all__ = [
    "SLARiskAssessment",
    "SLARiskClassifier",
    "RISK_THRESHOLDS",
    "BREACH_PROBABILITY_LABELS",
]
