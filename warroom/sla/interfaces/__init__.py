"""
SLA Interfaces Layer
====================

FastAPI route handlers for SLA prediction. Delegates to application services.
"""

from warroom.sla.interfaces.controllers import sla_router

__all__ = ["sla_router"]
