# services/adg_service.py
"""
Estimación de ganancia diaria promedio (ADG, g/día) a partir de muestreos.

Precedencia de métodos:
1. two_samples    -> los dos muestreos más recientes con fechas distintas
2. single_sample  -> un muestreo vs. peso inicial de la especie
3. curve_estimate -> pendiente local de la curva estándar

El ADG reportado nunca es negativo: una pérdida de peso se recorta a 0
(el valor crudo queda en raw_adg_grams_per_day).
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from enums.enums import AdgMethodEnum
from schemas.projection import AdgEstimate, GrowthPoint, WeightSampleIn
from services.growth_curve_service import curve_slope_at, normalize_curve
from utils.datetime_utils import days_between
from utils.errors import InputValidationError

logger = logging.getLogger(__name__)

# Peso típico al ingreso (día 0) por especie, en gramos
SPECIES_START_WEIGHT_G = {
    "broiler": 42.0,  # pollito de un día
    "layer": 38.0,
    "catfish": 5.0,  # alevín
    "tilapia": 1.0,
}


# ==================== VALIDACIÓN ====================

def validate_samples(samples: Sequence[WeightSampleIn]) -> None:
    """
    Verifica muestreos al ingresar al motor.

    Lanza InputValidationError si hay peso o tamaño de muestra negativo, o si
    las fechas no vienen en orden ascendente. Fechas iguales sí se permiten.
    """
    errors = []
    previous: Optional[date] = None

    for idx, sample in enumerate(samples):
        if sample.average_weight_g is None or sample.average_weight_g < 0:
            errors.append({
                "loc": ["samples", idx, "average_weight_g"],
                "msg": "El peso promedio no puede ser negativo",
                "input": sample.average_weight_g,
            })
        if sample.sample_size is not None and sample.sample_size < 0:
            errors.append({
                "loc": ["samples", idx, "sample_size"],
                "msg": "El tamaño de muestra no puede ser negativo",
                "input": sample.sample_size,
            })
        if previous is not None and sample.date < previous:
            errors.append({
                "loc": ["samples", idx, "date"],
                "msg": f"Muestreos fuera de orden: {sample.date} es anterior a {previous}",
                "input": sample.date.isoformat(),
            })
        previous = sample.date

    if errors:
        logger.warning("Muestreos rechazados: %s", errors)
        raise InputValidationError(errors)


def resolve_start_weight(species: Optional[str], curve: Sequence[GrowthPoint]) -> float:
    """
    Peso inicial para el método single_sample.

    Prioridad: tabla por especie -> primer punto de la curva -> 0.
    """
    if species:
        default = SPECIES_START_WEIGHT_G.get(species.strip().lower())
        if default is not None:
            return default

    points = normalize_curve(curve)
    if points:
        return points[0][1]
    return 0.0


# ==================== ESTIMADOR ====================

def _estimate(raw: float, method: AdgMethodEnum) -> AdgEstimate:
    return AdgEstimate(
        adg_grams_per_day=max(0.0, raw),
        raw_adg_grams_per_day=raw,
        method=method,
    )


def _two_samples(samples: Sequence[WeightSampleIn]) -> Optional[AdgEstimate]:
    latest = samples[-1]
    for previous in reversed(samples[:-1]):
        days = days_between(previous.date, latest.date)
        if days > 0:
            raw = (float(latest.average_weight_g) - float(previous.average_weight_g)) / days
            return _estimate(raw, AdgMethodEnum.two_samples)
    return None


def _single_sample(
        sample: WeightSampleIn,
        acquisition_date: date,
        start_weight_g: float
) -> Optional[AdgEstimate]:
    days = days_between(acquisition_date, sample.date)
    if days <= 0:
        return None
    raw = (float(sample.average_weight_g) - start_weight_g) / days
    return _estimate(raw, AdgMethodEnum.single_sample)


def estimate_adg(
        samples: Sequence[WeightSampleIn],
        acquisition_date: date,
        start_weight_g: float,
        curve: Sequence[GrowthPoint],
        age_days: int
) -> Optional[AdgEstimate]:
    """
    ADG por precedencia de métodos. `samples` debe venir ascendente por fecha.

    Retorna None solo si no hay muestreo utilizable ni curva.
    """
    if len(samples) >= 2:
        result = _two_samples(samples)
        if result:
            return result
        logger.debug("Muestreos con la misma fecha, se usa single_sample")

    if samples:
        result = _single_sample(samples[-1], acquisition_date, start_weight_g)
        if result:
            return result
        logger.debug("Muestreo no posterior a la adquisición, se usa la curva")

    if not curve:
        return None

    return _estimate(curve_slope_at(curve, age_days), AdgMethodEnum.curve_estimate)
