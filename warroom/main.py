"""
Incident War Room - Main Application
====================================

Jira automation service for incident response.

Modules:
- SLA Prediction: Classify breach risk from ticket age and priority
- Assignment: Route tickets to the least-loaded eligible user
- Automation: Description auto-fix, subtasks, sprint forecast, timeline, permissions

Clean Architecture Layers:
- Interfaces: FastAPI controllers
- Application: Services and DTOs
- Domain: Entities and value objects
- Infrastructure: Jira Cloud REST client
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# Configuration and Core
from warroom.config import settings
from warroom.core import ApplicationException, ConfigurationException

# Infrastructure
from warroom.infrastructure.jira import JiraClient

# Module Routers
from warroom.sla.interfaces import sla_router
from warroom.assignment.interfaces import assignment_router
from warroom.automation.interfaces import automation_router

# Middleware and Logging
from warroom.shared.api.middleware import (
    CorrelationIDMiddleware,
    MetricsMiddleware,
    LoggingMiddleware,
    application_exception_handler,
    global_exception_handler,
)
from warroom.shared.infrastructure.logging import setup_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    STARTUP:
    1. Setup structured logging
    2. Create the Jira client (the service still starts without credentials)

    SHUTDOWN:
    1. Close the Jira client
    """
    # === STARTUP ===
    setup_logging(settings.log_level, settings.environment)
    logger.info("Starting War Room Service", extra={
        "version": settings.app_version,
        "environment": settings.environment
    })

    app.state.settings = settings

    try:
        app.state.jira_client = JiraClient()
        logger.info("Jira client initialized", extra={"jira_base_url": settings.jira_base_url})
    except ConfigurationException as e:
        logger.warning(f"Jira client not available - running in degraded mode: {e.message}")
        app.state.jira_client = None

    logger.info("War Room Service started successfully")

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("Shutting down War Room Service")

    if app.state.jira_client is not None:
        await app.state.jira_client.close()

    logger.info("War Room Service shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Incident War Room API",
    description="""
    ## Jira Automation for Incident Response

    ---

    ### ⏱ SLA Prediction

    - `GET /sla/risk/{issue_key}` - Breach risk for a live ticket
    - `POST /sla/classify` - Breach risk from raw priority and age

    | Priority | Budget (hours) |
    |----------|----------------|
    | Highest  | 4   |
    | High     | 24  |
    | Medium   | 48  |
    | Low      | 72  |
    | Lowest   | 120 |

    ---

    ### 👥 Assignment

    - `POST /agents/assign/{issue_key}` - Assign to the least-loaded eligible user

    ---

    ### 🤖 Automation Agents

    - `POST /agents/auto-fix/{issue_key}` - Standardize the ticket description
    - `POST /agents/subtasks/{issue_key}` - Create the standard subtasks
    - `POST /agents/sprint-prediction` - Sprint slippage forecast
    - `POST /agents/comments/{issue_key}` - Timeline comment
    - `GET /agents/permissions/{account_id}` - War-room role and permissions

    ---
    """,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# === CORS Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# === Custom Middleware (from shared) ===
# Last added runs first: the correlation id must be set before request logging
app.add_middleware(LoggingMiddleware)
app.add_middleware(MetricsMiddleware)
app.add_middleware(CorrelationIDMiddleware)
app.add_exception_handler(ApplicationException, application_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# === Include Module Routers ===
app.include_router(sla_router)
app.include_router(assignment_router)
app.include_router(automation_router)


# === Health Check Endpoint ===

@app.get("/health", tags=["Health"], responses={
    200: {
        "description": "Service is healthy",
        "content": {
            "application/json": {
                "example": {
                    "status": "healthy",
                    "version": "1.0.0",
                    "environment": "development",
                    "checks": {"jira_client": "configured"}
                }
            }
        }
    }
})
async def health_check(request: Request):
    """
    Health check endpoint for load balancers and orchestrators.

    Reports whether Jira credentials were configured; Jira itself is not called.
    """
    jira_client = getattr(request.app.state, "jira_client", None)
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment,
        "checks": {
            "jira_client": "configured" if jira_client is not None else "not_configured"
        }
    }


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "service": "Incident War Room",
        "version": settings.app_version,
        "architecture": "Clean Architecture / Modular Monolith",
        "docs": "/docs",
        "health": "/health",
        "modules": {
            "sla": {
                "prefix": "/sla",
                "endpoints": [
                    "GET /sla/risk/{issue_key} - Predict SLA risk",
                    "POST /sla/classify - Classify raw inputs"
                ]
            },
            "assignment": {
                "prefix": "/agents",
                "endpoints": ["POST /agents/assign/{issue_key} - Auto-assign ticket"]
            },
            "automation": {
                "prefix": "/agents",
                "endpoints": [
                    "POST /agents/auto-fix/{issue_key} - Standardize description",
                    "POST /agents/subtasks/{issue_key} - Generate subtasks",
                    "POST /agents/sprint-prediction - Sprint slippage forecast",
                    "POST /agents/comments/{issue_key} - Timeline comment",
                    "GET /agents/permissions/{account_id} - Resolve permissions"
                ]
            }
        }
    }


# === Development Entry Point ===

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "warroom.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level="info"
    )
