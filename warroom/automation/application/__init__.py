"""
Automation Application Layer
============================

Contains:
- Services: AutoFixService, SubtaskService, TimelineService, AccessService
- DTOs: Data transfer objects for API serialization
"""

from warroom.automation.application.dto import (
    SprintPredictionRequest,
    TimelineCommentRequest,
    AgentActionResponse,
    SubtasksResponse,
    SprintPredictionResponse,
    TimelineCommentResponse,
    UserAccessResponse,
)
from warroom.automation.application.services import (
    AutoFixService,
    SubtaskService,
    TimelineService,
    AccessService,
)

__all__ = [
    # DTOs
    "SprintPredictionRequest",
    "TimelineCommentRequest",
    "AgentActionResponse",
    "SubtasksResponse",
    "SprintPredictionResponse",
    "TimelineCommentResponse",
    "UserAccessResponse",
    # Services
    "AutoFixService",
    "SubtaskService",
    "TimelineService",
    "AccessService",
]
