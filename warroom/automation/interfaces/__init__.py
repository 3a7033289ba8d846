"""
Automation Interfaces Layer
===========================

Contains:
- Controllers: FastAPI routes for the agent endpoints
"""

from warroom.automation.interfaces.controllers import automation_router

__all__ = ["automation_router"]
