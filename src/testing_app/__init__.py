"""App package exports."""

from .config import Settings, settings
from .domain import HealthState, HealthStatus, ServiceInfo
from .service import HealthService

__all__ = [
    "HealthService",
    "HealthState",
    "HealthStatus",
    "ServiceInfo",
    "Settings",
    "settings",
]
