"""
Core Module
============

Shared core utilities and abstractions used across the application.

This module contains framework-agnostic code that defines the fundamental
building blocks of the system.
"""

from warroom.core.exceptions import (
    ApplicationException,
    DomainException,
    ValidationException,
    ResourceNotFoundException,
    ConfigurationException,
    TerminalStateException,
    NoCandidatesException,
    ExternalServiceException,
    JiraException,
    TransientQueryException,
    AssignmentWriteException,
)

__all__ = [
    "ApplicationException",
    "DomainException",
    "ValidationException",
    "ResourceNotFoundException",
    "ConfigurationException",
    "TerminalStateException",
    "NoCandidatesException",
    "ExternalServiceException",
    "JiraException",
    "TransientQueryException",
    "AssignmentWriteException",
]
