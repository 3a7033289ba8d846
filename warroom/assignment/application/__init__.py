"""
Assignment Application Layer
============================

Contains:
- Services: AutoAssignService
- DTOs: AssignmentResponse
"""

from warroom.assignment.application.dto import AssignmentResponse
from warroom.assignment.application.services import AutoAssignService

__all__ = ["AssignmentResponse", "AutoAssignService"]
