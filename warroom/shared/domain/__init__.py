"""
Shared Domain
=============

Ticket entity and issue-key validation shared by all bounded contexts.
"""

from warroom.shared.domain.entities import (
    Ticket,
    ISSUE_KEY_PATTERN,
    validate_issue_key,
    parse_jira_datetime,
)

__all__ = [
    "Ticket",
    "ISSUE_KEY_PATTERN",
    "validate_issue_key",
    "parse_jira_datetime",
]
