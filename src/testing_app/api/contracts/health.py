"""Health check response model"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

from ...domain.domain_type import HealthState
from ...domain.health import HealthStatus, format_timestamp


class HealthResponse(BaseModel):
    """API health check response"""

    status: HealthState = Field(description="UP or DOWN", examples=["UP"])
    timestamp: datetime = Field(
        description="Snapshot time, second precision",
        examples=["2024-01-15T10:30:00"],
    )
    service: str = Field(examples=["Testing App"])
    version: str = Field(examples=["1.0.0"])
    environment: str | None = Field(default=None, examples=["development"])
    uptime: str | None = Field(default=None, examples=["Available since startup"])
    details: str | None = Field(default=None, examples=["All systems operational"])

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def from_status(cls, snapshot: HealthStatus) -> HealthResponse:
        return cls(
            status=snapshot.status,
            timestamp=snapshot.timestamp,
            service=snapshot.service,
            version=snapshot.version,
            environment=snapshot.environment,
            uptime=snapshot.uptime,
            details=snapshot.details,
        )
