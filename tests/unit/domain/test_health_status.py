"""
Tests for the HealthStatus and ServiceInfo domain models.

These tests demonstrate:
- Testing construction behavior (timestamp stamping, factories)
- Testing the wire format of the timestamp
- Testing immutability as a business rule (snapshots never change)
"""

import re
from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from testing_app.config import Settings
from testing_app.domain import HealthState, HealthStatus, ServiceInfo

TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$")


def test_timestamp_is_set_at_construction(service_info: ServiceInfo):
    """
    Demonstrates: Testing constructor defaults.

    A snapshot is stamped with "now" when built, truncated to seconds.
    """
    before = datetime.now().replace(microsecond=0)
    snapshot = HealthStatus.basic(service_info)
    after = datetime.now()

    assert before <= snapshot.timestamp <= after
    assert snapshot.timestamp.microsecond == 0


def test_basic_factory_sets_essential_fields_only(service_info: ServiceInfo):
    snapshot = HealthStatus.basic(service_info)

    assert snapshot.status == HealthState.UP
    assert snapshot.service == service_info.name
    assert snapshot.version == service_info.version
    assert snapshot.environment == service_info.environment
    assert snapshot.uptime is None
    assert snapshot.details is None


def test_detailed_factory_defaults_details_to_ok_message(service_info: ServiceInfo):
    snapshot = HealthStatus.detailed(service_info)

    assert snapshot.uptime == service_info.uptime
    assert snapshot.details == service_info.ok_message


def test_detailed_factory_accepts_explicit_details(service_info: ServiceInfo):
    snapshot = HealthStatus.detailed(service_info, status=HealthState.DOWN, details="Failing checks: db")

    assert snapshot.status == HealthState.DOWN
    assert snapshot.details == "Failing checks: db"
    assert not snapshot.is_up


def test_timestamp_serializes_with_second_precision(service_info: ServiceInfo):
    """
    Demonstrates: Testing the serialized contract, not the Python value.

    Consumers see yyyy-MM-ddTHH:mm:ss with no fraction and no offset.
    """
    snapshot = HealthStatus(
        status=HealthState.UP,
        timestamp=datetime(2024, 1, 15, 10, 30, 5),
        service=service_info.name,
        version=service_info.version,
    )

    data = snapshot.model_dump(mode="json")

    assert data["timestamp"] == "2024-01-15T10:30:05"
    assert TIMESTAMP_PATTERN.match(data["timestamp"])
    assert data["status"] == "UP"


def test_snapshot_cannot_be_mutated(service_info: ServiceInfo):
    """
    Demonstrates: Testing immutability as a business rule.

    Nothing may alter a snapshot between construction and serialization.
    """
    snapshot = HealthStatus.basic(service_info)

    with pytest.raises(ValidationError):
        snapshot.status = HealthState.DOWN  # type: ignore[misc]


def test_empty_service_name_is_rejected():
    with pytest.raises(ValidationError):
        HealthStatus(status=HealthState.UP, service="", version="1.0.0")


def test_service_info_from_settings():
    settings = Settings.model_validate(
        {
            "APP_NAME": "Other App",
            "APP_VERSION": "2.3.4",
            "ENVIRONMENT": "staging",
            "HEALTH_UPTIME": "up a while",
            "HEALTH_OK_MESSAGE": "fine",
        }
    )

    info = ServiceInfo.from_settings(settings)

    assert info == ServiceInfo(
        name="Other App",
        version="2.3.4",
        environment="staging",
        uptime="up a while",
        ok_message="fine",
    )


def test_snapshots_are_independent(service_info: ServiceInfo):
    first = HealthStatus.basic(service_info)
    second = HealthStatus.basic(service_info)

    assert first is not second
    assert second.timestamp - first.timestamp < timedelta(seconds=5)


@pytest.mark.parametrize("field", ["environment", "uptime", "ok_message"])
def test_service_info_rejects_empty_optional_text(field: str):
    with pytest.raises(ValidationError):
        ServiceInfo(name="Testing App", version="1.0.0", **{field: ""})


def test_detailed_snapshot_rejects_empty_details(service_info: ServiceInfo):
    with pytest.raises(ValidationError):
        HealthStatus.detailed(service_info, details="")


@pytest.mark.parametrize("alias", ["APP_NAME", "APP_VERSION", "HEALTH_UPTIME", "HEALTH_OK_MESSAGE"])
def test_settings_reject_empty_reported_values(alias: str):
    """
    Demonstrates: Misconfiguration fails when settings load, not on a request.
    """
    with pytest.raises(ValidationError):
        Settings.model_validate({alias: ""})


def test_settings_debug_is_off_unless_requested():
    assert Settings.model_validate({}).debug is False
    assert Settings.model_validate({"DEBUG": "true"}).debug is True
