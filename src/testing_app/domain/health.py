"""Health Domain - Point-in-Time Health Snapshots.

A HealthStatus is built fresh for every request, serialized once, and thrown
away. It has no identity and is never persisted.

Architecture:
    - ServiceInfo: immutable deployment metadata, built once from Settings
    - HealthStatus: immutable snapshot stamped with its construction time
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_serializer

from ..config import Settings
from .domain_type import HealthState

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


def now_seconds() -> datetime:
    """Current local wall-clock time truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


class ServiceInfo(BaseModel):
    """Static Deployment Metadata.

    Everything a health snapshot reports that does not change while the
    process runs. Constructed once at startup and shared by reference.

    Usage:
        >>> info = ServiceInfo.from_settings(settings)
        >>> info.name
        'Testing App'
    """

    name: NonEmptyStr
    version: NonEmptyStr
    environment: NonEmptyStr | None = None
    uptime: NonEmptyStr | None = None
    ok_message: NonEmptyStr | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> ServiceInfo:
        return cls(
            name=settings.app_name,
            version=settings.app_version,
            environment=settings.environment,
            uptime=settings.health_uptime,
            ok_message=settings.health_ok_message,
        )


class HealthStatus(BaseModel):
    """Health Snapshot of the Service.

    Attributes:
        status: UP or DOWN
        timestamp: Construction time, second precision, never changed afterwards
        service: Service name (non-empty)
        version: Service version (non-empty)
        environment: Deployment environment label
        uptime: Free-text uptime description (not a duration)
        details: Free-text human message

    Note:
        Frozen so a snapshot cannot be altered between construction and
        serialization.
    """

    status: HealthState
    timestamp: datetime = Field(default_factory=now_seconds)
    service: NonEmptyStr
    version: NonEmptyStr
    environment: NonEmptyStr | None = None
    uptime: NonEmptyStr | None = None
    details: NonEmptyStr | None = None

    model_config = ConfigDict(frozen=True)

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    @property
    def is_up(self) -> bool:
        return self.status is HealthState.UP

    @classmethod
    def basic(cls, info: ServiceInfo, status: HealthState = HealthState.UP) -> HealthStatus:
        """Snapshot with the essential fields plus environment."""
        return cls(
            status=status,
            service=info.name,
            version=info.version,
            environment=info.environment,
        )

    @classmethod
    def detailed(
        cls,
        info: ServiceInfo,
        status: HealthState = HealthState.UP,
        details: str | None = None,
    ) -> HealthStatus:
        """Snapshot with every field populated.

        ``details`` defaults to the configured OK message.
        """
        return cls(
            status=status,
            service=info.name,
            version=info.version,
            environment=info.environment,
            uptime=info.uptime,
            details=details if details is not None else info.ok_message,
        )


__all__ = ["HealthStatus", "ServiceInfo", "format_timestamp", "now_seconds"]
