import pytest

from enums.enums import AlertSeverityEnum, PerformanceStatusEnum
from services.performance_service import (
    calculate_deviation_percent,
    calculate_performance_index,
    classify_status,
    determine_alert,
    needs_attention,
)


def test_index_and_status_behind():
    index = calculate_performance_index(1800, 2000)
    assert index == pytest.approx(90.0)
    assert classify_status(index) == PerformanceStatusEnum.behind


@pytest.mark.parametrize("index,status", [
    (94.99, PerformanceStatusEnum.behind),
    (95.0, PerformanceStatusEnum.on_track),
    (105.0, PerformanceStatusEnum.on_track),
    (105.01, PerformanceStatusEnum.ahead),
])
def test_status_boundaries_are_inclusive(index, status):
    assert classify_status(index) == status


def test_non_positive_expected_weight():
    assert calculate_performance_index(500, 0) is None
    assert calculate_performance_index(500, -10) is None
    assert calculate_deviation_percent(500, 0) is None


def test_deviation_percent_sign():
    assert calculate_deviation_percent(2200, 2000) == pytest.approx(10.0)
    assert calculate_deviation_percent(1800, 2000) == pytest.approx(-10.0)


def test_needs_attention_window():
    assert needs_attention(89.9)
    assert needs_attention(110.1)
    assert not needs_attention(90)
    assert not needs_attention(110)
    assert not needs_attention(None)


@pytest.mark.parametrize("index,severity", [
    (75, AlertSeverityEnum.critical),
    (85, AlertSeverityEnum.warning),
    (115, AlertSeverityEnum.info),
])
def test_alert_severity(index, severity):
    alert = determine_alert(index)
    assert alert.severity == severity
    assert f"{index:.1f}%" in alert.recommendation


def test_no_alert_in_normal_range():
    assert determine_alert(100) is None
    assert determine_alert(None) is None
