"""
Serverless entry point for the Incident War Room API
"""
import os

# Serverless defaults
os.environ.setdefault("ENVIRONMENT", "production")

from mangum import Mangum
from warroom.config import settings
from warroom.main import app
from warroom.shared.infrastructure.logging import setup_logging

# Lifespan is off, so configure logging here; the Jira client is built on first request
setup_logging(settings.log_level, settings.environment)

# Lambda handler for ASGI app (disable lifespan for serverless)
handler = Mangum(app, lifespan="off")
