"""Domain Layer - Health Snapshots and Their Vocabulary.

Key Components:
    - HealthStatus: Immutable point-in-time health snapshot
    - ServiceInfo: Immutable deployment metadata reported by every snapshot
    - HealthState / ProbeKind: Type-safe enumerations

Design Principles:
    - Immutable by Default: All domain models use frozen=True
    - Explicit Dependencies: Metadata is passed in, never read from globals
"""

from .domain_type import HealthState, ProbeKind
from .health import HealthStatus, ServiceInfo

__all__ = [
    "HealthState",
    "HealthStatus",
    "ProbeKind",
    "ServiceInfo",
]
