"""
SLA Application Layer
======================

Contains:
- Services: SLAPredictionService
- DTOs: Data transfer objects for API serialization
"""

from warroom.sla.application.dto import ClassifyRiskRequest, SLARiskResponse
from warroom.sla.application.services import SLAPredictionService, utc_now

__all__ = [
    "ClassifyRiskRequest",
    "SLARiskResponse",
    "SLAPredictionService",
    "utc_now",
]
