"""
Configuration Module
====================

Application settings and configuration management using Pydantic.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from functools import lru_cache
from typing import Dict, List, Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety.
    """

    # ========== Application ==========
    app_name: str = Field(default="incident-war-room", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # ========== Server ==========
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port", ge=1, le=65535)

    # ========== Jira Cloud ==========
    jira_base_url: Optional[str] = Field(
        default=None,
        description="Jira Cloud site URL (e.g., https://your-site.atlassian.net)"
    )
    jira_email: Optional[str] = Field(
        default=None,
        description="Account email used for Jira basic auth"
    )
    jira_api_token: Optional[str] = Field(
        default=None,
        description="Jira API token paired with jira_email"
    )
    jira_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for Jira API calls",
        ge=0.1,
        le=60
    )
    jira_max_retries: int = Field(
        default=3,
        description="Attempts for idempotent Jira reads (writes are never retried)",
        ge=1,
        le=10
    )
    jira_retry_base_delay_seconds: float = Field(
        default=0.5,
        description="Base delay for exponential backoff between read attempts",
        ge=0.0
    )

    # ========== Workload Assignment ==========
    assign_candidate_limit: int = Field(
        default=5,
        description="Max assignable users whose workload is checked",
        ge=1,
        le=50
    )
    assign_humans_only: bool = Field(
        default=True,
        description="Only consider human (atlassian) accounts as candidates"
    )
    assign_concurrent_load_queries: bool = Field(
        default=False,
        description="Query candidate workloads concurrently instead of one by one"
    )

    # ========== CORS ==========
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is one of allowed values."""
        allowed = {"development", "staging", "production"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @field_validator("jira_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        return v.rstrip("/") if v else v


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


# ========== Constants ==========

class Priority(str):
    """Jira priority names."""
    HIGHEST = "Highest"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    LOWEST = "Lowest"


class TicketStatus(str):
    """Jira status names with special meaning to the agents."""
    DONE = "Done"
    CLOSED = "Closed"


class RiskLevel(str):
    """SLA breach risk buckets."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    BREACHED = "BREACHED"


class AccountType(str):
    """Jira account types."""
    ATLASSIAN = "atlassian"  # human user
    APP = "app"
    CUSTOMER = "customer"


# ========== Lists for validation ==========

VALID_PRIORITIES = [
    Priority.HIGHEST, Priority.HIGH, Priority.MEDIUM,
    Priority.LOW, Priority.LOWEST
]
TERMINAL_STATUSES = [TicketStatus.DONE, TicketStatus.CLOSED]
RISK_LEVELS = [RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH, RiskLevel.BREACHED]

# Hours allowed before a ticket of the given priority is breached
SLA_BUDGET_HOURS: Dict[str, int] = {
    Priority.HIGHEST: 4,
    Priority.HIGH: 24,
    Priority.MEDIUM: 48,
    Priority.LOW: 72,
    Priority.LOWEST: 120,
}

# Budget applied to priority labels missing from SLA_BUDGET_HOURS
DEFAULT_SLA_PRIORITY = Priority.MEDIUM
