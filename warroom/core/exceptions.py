"""
Core Exceptions
================

Custom exceptions for the application following clean architecture principles.

These exceptions define domain-specific errors that can be caught and handled
appropriately at the application boundaries.
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DomainException(ApplicationException):
    """Base exception for domain logic violations."""


class ValidationException(ApplicationException):
    """Exception for validation errors."""


class ResourceNotFoundException(ApplicationException):
    """Exception when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[str] = None,
        details: Optional[dict] = None
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type}"
        if resource_id:
            message += f" {resource_id}"
        message += " not found"
        super().__init__(message, details)


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""


class TerminalStateException(DomainException):
    """Raised when an agent is asked to act on a Done/Closed ticket."""

    def __init__(self, issue_key: str, status: str, action: str = "Action"):
        self.issue_key = issue_key
        self.status = status
        super().__init__(
            f"Ticket {issue_key} is already {status}. {action} skipped.",
            {"issue_key": issue_key, "status": status}
        )


class NoCandidatesException(DomainException):
    """Raised when no assignable user is available for a ticket."""

    def __init__(self, issue_key: str):
        self.issue_key = issue_key
        super().__init__(
            f"No assignable users found for ticket {issue_key}",
            {"issue_key": issue_key}
        )


class ExternalServiceException(ApplicationException):
    """Base exception for external service failures."""

    def __init__(
        self,
        service_name: str,
        message: str,
        details: Optional[dict] = None
    ):
        self.service_name = service_name
        self.reason = message
        super().__init__(f"{service_name}: {message}", details)


class JiraException(ExternalServiceException):
    """Exception for Jira API failures."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict] = None
    ):
        self.status_code = status_code
        super().__init__("Jira", message, details)


class TransientQueryException(JiraException):
    """A Jira read failed in a way that may succeed on a later attempt."""


class AssignmentWriteException(JiraException):
    """Writing the selected assignee back to Jira failed."""
