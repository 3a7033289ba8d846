"""
Assignment Interfaces Layer
===========================

FastAPI route handlers for auto-assignment.
"""

from warroom.assignment.interfaces.controllers import assignment_router

__all__ = ["assignment_router"]
