"""
Shared API Dependencies
=======================

FastAPI dependencies resolving services stored on application state.
"""

from fastapi import Request

from warroom.infrastructure.jira import ITicketTracker, JiraClient
from warroom.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def get_ticket_tracker(request: Request) -> ITicketTracker:
    """
    Get the Jira client, creating it on first use.

    The lifespan normally creates it at startup. Serverless handlers run
    without a lifespan, so the first request builds and caches it instead.

    Raises:
        ConfigurationException: If Jira credentials are not configured
    """
    tracker = getattr(request.app.state, "jira_client", None)
    if tracker is None:
        tracker = JiraClient()
        request.app.state.jira_client = tracker
        logger.info("Jira client initialized on first request")
    return tracker
