"""API dependency wiring."""

from functools import lru_cache

from ..config import settings
from ..domain.health import ServiceInfo
from ..service import HealthService, create_health_service


@lru_cache(maxsize=1)
def get_service_info() -> ServiceInfo:
    """Deployment metadata built once from settings (cached singleton)."""
    return ServiceInfo.from_settings(settings)


@lru_cache(maxsize=1)
def get_health_service() -> HealthService:
    """
    Create health service (cached singleton).

    Service factory handles all construction logic - deps.py is just thin DI glue.
    Register readiness/liveness checks here as dependencies appear.
    """
    return create_health_service(info=get_service_info())
