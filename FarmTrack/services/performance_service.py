# services/performance_service.py
"""
Comparación peso real vs. peso esperado.

Índice de desempeño = peso_actual / peso_esperado × 100 (precisión completa;
el redondeo es cosa de presentación).
"""
from __future__ import annotations

from typing import Optional

from enums.enums import AlertSeverityEnum, PerformanceStatusEnum
from schemas.projection import PerformanceAlert

# Umbrales de estado (límites inclusivos para on_track)
AHEAD_THRESHOLD = 105.0
BEHIND_THRESHOLD = 95.0

# Lotes que requieren atención en dashboards
ATTENTION_LOW = 90.0
ATTENTION_HIGH = 110.0

# Alertas de desviación
CRITICAL_THRESHOLD = 80.0
WARNING_THRESHOLD = 90.0
EARLY_HARVEST_THRESHOLD = 110.0


def calculate_performance_index(current_weight_g: float, expected_weight_g: float) -> Optional[float]:
    """None cuando el peso esperado es <= 0 (nunca NaN/Infinity)."""
    if expected_weight_g is None or expected_weight_g <= 0:
        return None
    return current_weight_g / expected_weight_g * 100


def calculate_deviation_percent(current_weight_g: float, expected_weight_g: float) -> Optional[float]:
    """Desviación % vs. esperado (positivo = adelantado)."""
    if expected_weight_g is None or expected_weight_g <= 0:
        return None
    return (current_weight_g - expected_weight_g) / expected_weight_g * 100


def classify_status(performance_index: float) -> PerformanceStatusEnum:
    if performance_index > AHEAD_THRESHOLD:
        return PerformanceStatusEnum.ahead
    if performance_index < BEHIND_THRESHOLD:
        return PerformanceStatusEnum.behind
    return PerformanceStatusEnum.on_track


def needs_attention(performance_index: Optional[float]) -> bool:
    if performance_index is None:
        return False
    return performance_index < ATTENTION_LOW or performance_index > ATTENTION_HIGH


def determine_alert(performance_index: Optional[float]) -> Optional[PerformanceAlert]:
    """
    Alerta de desviación para notificaciones.

    - critical: índice < 80
    - warning:  índice < 90
    - info:     índice > 110 (oportunidad de cosecha anticipada)
    """
    if performance_index is None:
        return None

    if performance_index < CRITICAL_THRESHOLD:
        return PerformanceAlert(
            severity=AlertSeverityEnum.critical,
            title="Crítico: crecimiento del lote muy rezagado",
            recommendation=(
                f"El lote está al {performance_index:.1f}% del peso esperado. "
                "Revise sanidad, calidad del alimento y densidad de inmediato."
            ),
        )
    if performance_index < WARNING_THRESHOLD:
        return PerformanceAlert(
            severity=AlertSeverityEnum.warning,
            title="Advertencia: crecimiento por debajo de lo programado",
            recommendation=(
                f"El lote está al {performance_index:.1f}% del peso esperado. "
                "Verifique consumo de alimento y agua."
            ),
        )
    if performance_index > EARLY_HARVEST_THRESHOLD:
        return PerformanceAlert(
            severity=AlertSeverityEnum.info,
            title="Info: oportunidad de cosecha anticipada",
            recommendation=(
                f"El lote está al {performance_index:.1f}% del peso esperado. "
                "Evalúe adelantar la cosecha."
            ),
        )
    return None
