"""Service layer exports."""

from .health import HealthCheck, HealthService, create_health_service

__all__ = ["HealthCheck", "HealthService", "create_health_service"]
