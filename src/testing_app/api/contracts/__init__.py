from .error import ErrorResponse
from .health import HealthResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
]
