"""
SLA Application Services
=========================

Application services orchestrate the classifier and the ticket tracker.
"""

from datetime import datetime, timezone
from typing import Callable

from warroom.infrastructure.jira import ITicketTracker
from warroom.shared.domain import Ticket, validate_issue_key
from warroom.shared.infrastructure.logging import get_logger
from warroom.sla.domain import SLARiskAssessment, SLARiskClassifier

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SLAPredictionService:
    """
    Service for predicting SLA breach risk of live Jira tickets.

    ``clock`` is injectable so repeated calls with a fixed time are identical.
    """

    def __init__(
        self,
        tracker: ITicketTracker,
        clock: Callable[[], datetime] = utc_now
    ):
        self._tracker = tracker
        self._clock = clock

    async def predict_sla_risk(self, issue_key: str) -> SLARiskAssessment:
        """
        Classify breach risk for a ticket fetched from Jira.

        Raises:
            ValidationException: Malformed key or unusable creation timestamp
            ResourceNotFoundException: Ticket does not exist
        """
        validate_issue_key(issue_key)

        payload = await self._tracker.get_issue(issue_key)
        ticket = Ticket.from_jira(payload)

        assessment = SLARiskClassifier.classify(ticket.created_at, ticket.priority, self._clock())

        if assessment.budget_defaulted:
            logger.warning(
                "Unknown priority, applying default SLA budget",
                extra={"issue_key": issue_key, "priority": ticket.priority}
            )

        logger.info(
            "SLA risk predicted",
            extra={
                "issue_key": issue_key,
                "risk_level": assessment.risk_level,
                "elapsed_percent": assessment.elapsed_percent
            }
        )
        return assessment
