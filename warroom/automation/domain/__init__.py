"""
Automation Domain Layer
=======================

Contains:
- Entities: SprintForecast, UserAccess
- Value Objects: ADF document builders, subtask titles, sprint slippage rule
- Permissions: war-room roles and their actions

This layer has no dependencies on infrastructure - pure Python business logic.
"""

from warroom.automation.domain.entities import SprintForecast, UserAccess
from warroom.automation.domain.value_objects import (
    SUBTASK_TITLES,
    SUBTASK_ISSUE_TYPE_NAME,
    EPIC_ISSUE_TYPE_NAME,
    paragraph_document,
    improved_description_document,
    subtask_summary,
    predict_sprint_slippage,
)
from warroom.automation.domain.permissions import (
    ROLES,
    ROLE_LABELS,
    get_user_permissions,
    get_primary_role,
    has_permission,
)

__all__ = [
    "SprintForecast",
    "UserAccess",
    "SUBTASK_TITLES",
    "SUBTASK_ISSUE_TYPE_NAME",
    "EPIC_ISSUE_TYPE_NAME",
    "paragraph_document",
    "improved_description_document",
    "subtask_summary",
    "predict_sprint_slippage",
    "ROLES",
    "ROLE_LABELS",
    "get_user_permissions",
    "get_primary_role",
    "has_permission",
]
