"""API router exports"""

from .health import HEALTHCHECK_PATH
from .health import router as health_router

__all__ = ["HEALTHCHECK_PATH", "health_router"]
