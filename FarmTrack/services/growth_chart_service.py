# services/growth_chart_service.py
"""Serie peso esperado vs. real para la gráfica de crecimiento del lote."""
from __future__ import annotations

from datetime import date
from typing import List, Sequence

from schemas.projection import ChartPoint, GrowthPoint, WeightSampleIn
from services.growth_curve_service import normalize_curve
from services.performance_service import calculate_deviation_percent
from utils.datetime_utils import days_between


def generate_chart_data(
        acquisition_date: date,
        current_age_days: int,
        curve: Sequence[GrowthPoint],
        samples: Sequence[WeightSampleIn],
        projection_days: int = 14
) -> List[ChartPoint]:
    """
    Un punto por cada día de la curva hasta edad actual + projection_days.
    El peso real es el muestreo tomado exactamente ese día de edad (si hay
    varios el mismo día, el último).
    """
    max_day = current_age_days + projection_days
    by_day = {days_between(acquisition_date, s.date): float(s.average_weight_g) for s in samples}

    points: List[ChartPoint] = []
    for day, expected in normalize_curve(curve):
        if day > max_day:
            break
        actual = by_day.get(day)
        points.append(ChartPoint(
            day=day,
            expected_weight_g=expected,
            actual_weight_g=actual,
            deviation_percent=(
                calculate_deviation_percent(actual, expected) if actual is not None else None
            ),
        ))
    return points
