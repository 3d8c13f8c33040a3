"""Domain Type System - Core Enumerations.

Defines type-safe constants using Python's StrEnum for domain concepts.
Using StrEnum instead of plain Enum provides automatic string coercion
and better JSON serialization without custom encoders.
"""

from enum import StrEnum


class HealthState(StrEnum):
    """Reported Health of the Service.

    The value carried in the ``status`` field of every health snapshot.

    States:
        UP: Service is functioning and all registered checks pass
        DOWN: At least one registered check failed

    Note:
        DOWN is still delivered with HTTP 200; the snapshot itself signals
        degradation, the transport does not.
    """

    UP = "UP"
    DOWN = "DOWN"


class ProbeKind(StrEnum):
    """Orchestrator Probe Categories.

    LIVENESS answers "should this process be restarted?";
    READINESS answers "should this process receive traffic?".
    """

    LIVENESS = "liveness"
    READINESS = "readiness"
