# services/harvest_projection_service.py
"""
Proyección de fecha de cosecha desde peso actual y ADG.

Fórmula:
    remanente_g  = max(0, peso_objetivo - peso_actual)
    dias         = ceil(remanente_g / ADG)
    fecha        = hoy + dias

La fecha objetivo capturada por el usuario (target_harvest_date) se evalúa
aparte: si ya pasó se reporta como "overdue" y no altera days_remaining.
"""
from __future__ import annotations

import math
from datetime import date
from typing import Optional, Union

from enums.enums import UnavailableReasonEnum
from schemas.projection import HarvestProjection, ProjectionUnavailable, TargetDateStatus
from utils.datetime_utils import add_days, days_between


def remaining_grams(current_weight_g: float, target_weight_g: float) -> float:
    return max(0.0, target_weight_g - current_weight_g)


def no_target_weight() -> ProjectionUnavailable:
    return ProjectionUnavailable(
        reason=UnavailableReasonEnum.no_target_weight,
        detail="Datos insuficientes: el lote no tiene peso objetivo",
    )


def project_harvest(
        current_weight_g: float,
        adg_grams_per_day: float,
        target_weight_g: Optional[float],
        today: date
) -> Union[HarvestProjection, ProjectionUnavailable]:
    if target_weight_g is None:
        return no_target_weight()

    remaining = remaining_grams(current_weight_g, target_weight_g)
    if remaining == 0:
        return HarvestProjection(remaining_grams=0.0, projected_harvest_date=today, days_remaining=0)

    if adg_grams_per_day <= 0:
        return ProjectionUnavailable(
            reason=UnavailableReasonEnum.cannot_reach_target,
            detail="No se puede proyectar la cosecha: el lote no está ganando peso",
        )

    days = math.ceil(remaining / adg_grams_per_day)
    return HarvestProjection(
        remaining_grams=remaining,
        projected_harvest_date=add_days(today, days),
        days_remaining=days,
    )


def evaluate_target_date(target_harvest_date: Optional[date], today: date) -> TargetDateStatus:
    if target_harvest_date is None or target_harvest_date >= today:
        return TargetDateStatus(overdue=False)
    return TargetDateStatus(overdue=True, days_overdue=days_between(target_harvest_date, today))
