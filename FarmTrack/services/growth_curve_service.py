# services/growth_curve_service.py
"""
Resolución de peso esperado sobre la curva estándar de crecimiento.

Reglas:
- Interpolación lineal entre los dos puntos que rodean la edad.
- Antes del primer punto: se fija el peso del primer punto (nunca se
  extrapola hacia atrás); la pendiente reportada es la del primer segmento.
- Después del último punto: se extrapola con la pendiente del último segmento.
- Curva de un solo punto: peso constante, pendiente cero.
- La curva se asume no decreciente, pero no se exige: segmentos con pendiente
  negativa se interpolan igual y el peso extrapolado nunca baja de 0.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from schemas.projection import ExpectedWeight, GrowthPoint


# ==================== HELPERS ====================

def normalize_curve(curve: Sequence[GrowthPoint]) -> List[Tuple[int, float]]:
    """
    Ordena la curva por edad. Si hay edades repetidas gana el último punto.
    """
    by_age = {}
    for point in curve:
        by_age[int(point.age_days)] = float(point.expected_weight_g)
    return sorted(by_age.items())


def _segment_slope(p1: Tuple[int, float], p2: Tuple[int, float]) -> float:
    return (p2[1] - p1[1]) / (p2[0] - p1[0])


def _bracketing_segment(points: List[Tuple[int, float]], age: float) -> Tuple[int, int]:
    """
    Índices (i, i+1) del segmento que contiene la edad.
    En un punto exacto se usa el segmento que arranca en él;
    en el último punto, el segmento final.
    """
    last = len(points) - 1
    for i in range(last):
        if points[i][0] <= age < points[i + 1][0]:
            return i, i + 1
    return last - 1, last


# ==================== API ====================

def resolve_expected_weight(curve: Sequence[GrowthPoint], age_days: float) -> Optional[ExpectedWeight]:
    """
    Peso esperado y ADG esperado a una edad.

    Retorna None si la curva está vacía.
    """
    points = normalize_curve(curve)
    if not points:
        return None

    if len(points) == 1:
        return ExpectedWeight(expected_weight_g=points[0][1], expected_adg_grams_per_day=0.0)

    first, last = points[0], points[-1]

    if age_days <= first[0]:
        return ExpectedWeight(
            expected_weight_g=first[1],
            expected_adg_grams_per_day=_segment_slope(points[0], points[1]),
        )

    if age_days >= last[0]:
        slope = _segment_slope(points[-2], last)
        weight = last[1] + slope * (age_days - last[0])
        return ExpectedWeight(
            expected_weight_g=max(0.0, weight),
            expected_adg_grams_per_day=slope,
        )

    i, j = _bracketing_segment(points, age_days)
    slope = _segment_slope(points[i], points[j])
    weight = points[i][1] + slope * (age_days - points[i][0])
    return ExpectedWeight(expected_weight_g=weight, expected_adg_grams_per_day=slope)


def curve_slope_at(curve: Sequence[GrowthPoint], age_days: float) -> float:
    """Pendiente local de la curva (g/día) a la edad dada. 0 si no hay curva."""
    expected = resolve_expected_weight(curve, age_days)
    return expected.expected_adg_grams_per_day if expected else 0.0
