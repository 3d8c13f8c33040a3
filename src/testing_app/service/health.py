"""Health service - decides what "healthy" means."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from ..domain.domain_type import HealthState, ProbeKind
from ..domain.health import HealthStatus, ServiceInfo

logger = logging.getLogger(__name__)

HealthCheck = Callable[[], bool]


class HealthService:
    """
    Builds health snapshots and answers orchestrator probes.

    Service responsibilities:
    1. Own the ServiceInfo reported in every snapshot
    2. Run the registered liveness and readiness checks
    3. Translate any check failure into DOWN / False, never into an exception

    No checks are registered by default, so every query currently reports
    a healthy service.
    """

    def __init__(
        self,
        info: ServiceInfo,
        readiness_checks: Mapping[str, HealthCheck] | None = None,
        liveness_checks: Mapping[str, HealthCheck] | None = None,
    ):
        self.info = info
        self._readiness_checks = dict(readiness_checks or {})
        self._liveness_checks = dict(liveness_checks or {})

    def get_basic_status(self) -> HealthStatus:
        """Snapshot with status, service, version, environment and timestamp."""
        state = HealthState.UP if self.is_alive() else HealthState.DOWN
        return HealthStatus.basic(self.info, status=state)

    def get_detailed_status(self) -> HealthStatus:
        """
        Snapshot with uptime and details on top of the basic fields.

        Both liveness and readiness checks contribute; failing check names
        are reported in ``details``.
        """
        failed = self._failed_checks(ProbeKind.LIVENESS, self._liveness_checks)
        failed += self._failed_checks(ProbeKind.READINESS, self._readiness_checks)
        if failed:
            return HealthStatus.detailed(
                self.info,
                status=HealthState.DOWN,
                details=f"Failing checks: {', '.join(failed)}",
            )
        return HealthStatus.detailed(self.info)

    def is_ready(self) -> bool:
        """Whether the process should currently receive traffic."""
        return not self._failed_checks(ProbeKind.READINESS, self._readiness_checks)

    def is_alive(self) -> bool:
        """Whether the process itself is functioning."""
        return not self._failed_checks(ProbeKind.LIVENESS, self._liveness_checks)

    @staticmethod
    def _failed_checks(kind: ProbeKind, checks: Mapping[str, HealthCheck]) -> list[str]:
        failed: list[str] = []
        for name, check in checks.items():
            try:
                passed = bool(check())
            except Exception:
                logger.exception("%s check %r raised", kind, name)
                passed = False
            if not passed:
                logger.warning("%s check %r failed", kind, name)
                failed.append(name)
        return failed


def create_health_service(
    info: ServiceInfo,
    readiness_checks: Mapping[str, HealthCheck] | None = None,
    liveness_checks: Mapping[str, HealthCheck] | None = None,
) -> HealthService:
    """
    Factory function for creating HealthService.

    Args:
        info: Deployment metadata reported in every snapshot
        readiness_checks: Named predicates gating traffic admission
        liveness_checks: Named predicates gating restarts

    Returns:
        Configured HealthService ready for use
    """
    return HealthService(
        info=info,
        readiness_checks=readiness_checks,
        liveness_checks=liveness_checks,
    )


__all__ = ["HealthCheck", "HealthService", "create_health_service"]
