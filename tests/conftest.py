"""
Shared test fixtures and configuration.

Environment strategy:
- All tests use .env.test (isolated, no real infra needed), loaded before the
  app package is imported so module-level settings pick it up.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

ENV_FILE = Path(__file__).parent.parent / ".env.test"

load_dotenv(ENV_FILE, override=True)

from testing_app.domain.health import ServiceInfo
from testing_app.service import HealthService, create_health_service

SERVICE_NAME = "Testing App"
SERVICE_VERSION = "1.0.0"
ENVIRONMENT = "development"
UPTIME = "Available since startup"
OK_MESSAGE = "All systems operational"


@pytest.fixture
def service_info() -> ServiceInfo:
    """ServiceInfo matching .env.test."""
    return ServiceInfo(
        name=SERVICE_NAME,
        version=SERVICE_VERSION,
        environment=ENVIRONMENT,
        uptime=UPTIME,
        ok_message=OK_MESSAGE,
    )


@pytest.fixture
def health_service(service_info: ServiceInfo) -> HealthService:
    """HealthService with no registered checks."""
    return create_health_service(info=service_info)
