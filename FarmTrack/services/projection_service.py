# services/projection_service.py
"""
Orquestador de la proyección de crecimiento y financiera de un lote.

Pipeline:
    muestreos -> ADG -> peso esperado -> desempeño -> cosecha -> finanzas

Cálculo puro: no lee ni escribe en BD. Cada llamada es independiente y con
las mismas entradas (incluida la fecha `today`) produce el mismo resultado.

Resultado:
- Projection: todos los campos de crecimiento; cosecha y finanzas pueden venir
  como ProjectionUnavailable si falta peso objetivo, precio o FCR.
- ProjectionUnavailable: no hay base para comparar (sin curva, sin muestreos,
  peso esperado inválido, lote inactivo).
- InputValidationError (excepción): muestreos malformados.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from config.settings import settings
from enums.enums import BatchStatusEnum, UnavailableReasonEnum
from schemas.projection import Projection, ProjectionInputs, ProjectionUnavailable
from services.adg_service import estimate_adg, resolve_start_weight, validate_samples
from services.financial_projection_service import project_financials, resolve_feed_cost_per_kg
from services.growth_curve_service import resolve_expected_weight
from services.growth_standard_lookup import GrowthStandardLookup
from services.harvest_projection_service import (
    evaluate_target_date,
    project_harvest,
    remaining_grams,
)
from services.performance_service import (
    calculate_deviation_percent,
    calculate_performance_index,
    classify_status,
)
from utils.datetime_utils import age_in_days, today_farm

logger = logging.getLogger(__name__)


def _unavailable(batch_id, reason: UnavailableReasonEnum, detail: str) -> ProjectionUnavailable:
    logger.info("Proyección no disponible (lote=%s): %s", batch_id, reason.value)
    return ProjectionUnavailable(reason=reason, detail=detail)


def build_projection(
        inputs: ProjectionInputs,
        lookup: Optional[GrowthStandardLookup] = None,
        today: Optional[date] = None,
        default_feed_cost_per_kg: Optional[float] = None
) -> Union[Projection, ProjectionUnavailable]:
    """
    Calcula la proyección completa de un lote.

    Args:
        inputs: Snapshot del lote, muestreos (ascendentes), curva y alimento
        lookup: Estrategia para resolver la curva si inputs.growth_standard viene vacía
        today: Fecha de referencia (prioridad: argumento > inputs.today > hoy en la granja)
        default_feed_cost_per_kg: Costo/kg si no hay compras de alimento registradas
    """
    batch = inputs.batch
    as_of = today or inputs.today or today_farm()

    if batch.status != BatchStatusEnum.active:
        return _unavailable(
            batch.batch_id, UnavailableReasonEnum.batch_inactive,
            f"El lote no está activo (estado: {batch.status.value})",
        )

    samples = list(inputs.samples)
    validate_samples(samples)

    curve = list(inputs.growth_standard)
    if not curve and lookup is not None:
        curve = lookup.get_curve(batch)

    if not curve:
        if not samples:
            return _unavailable(
                batch.batch_id, UnavailableReasonEnum.insufficient_samples,
                "Datos insuficientes: sin muestreos de peso ni curva estándar",
            )
        return _unavailable(
            batch.batch_id, UnavailableReasonEnum.no_growth_standard,
            f"No hay curva estándar para la especie '{batch.species}'",
        )

    age = age_in_days(batch.acquisition_date, as_of)
    start_weight = resolve_start_weight(batch.species, curve)

    adg = estimate_adg(samples, batch.acquisition_date, start_weight, curve, age)
    if adg is None:
        return _unavailable(
            batch.batch_id, UnavailableReasonEnum.insufficient_samples,
            "Datos insuficientes: sin muestreos utilizables",
        )

    expected = resolve_expected_weight(curve, age)
    current_weight = float(samples[-1].average_weight_g) if samples else expected.expected_weight_g

    performance_index = calculate_performance_index(current_weight, expected.expected_weight_g)
    if performance_index is None:
        return _unavailable(
            batch.batch_id, UnavailableReasonEnum.invalid_expected_weight,
            f"Peso esperado no válido a los {age} días",
        )

    logger.debug(
        "Lote %s: edad=%s actual=%.2f esperado=%.2f adg=%.3f (%s)",
        batch.batch_id, age, current_weight, expected.expected_weight_g,
        adg.adg_grams_per_day, adg.method.value,
    )

    harvest = project_harvest(current_weight, adg.adg_grams_per_day, batch.target_weight_g, as_of)

    remaining = (
        remaining_grams(current_weight, batch.target_weight_g)
        if batch.target_weight_g is not None else None
    )
    if default_feed_cost_per_kg is None:
        default_feed_cost_per_kg = settings.DEFAULT_FEED_COST_PER_KG
    financials = project_financials(
        remaining_grams=remaining,
        target_price_per_unit=batch.target_price_per_unit,
        current_quantity=batch.current_quantity,
        fcr=inputs.feed.fcr,
        feed_cost_per_kg=resolve_feed_cost_per_kg(inputs.feed, default_feed_cost_per_kg),
        total_cost=batch.total_cost,
    )

    target_date = evaluate_target_date(batch.target_harvest_date, as_of)

    return Projection(
        batch_id=batch.batch_id,
        as_of=as_of,
        age_days=age,
        current_weight_g=current_weight,
        expected_weight_g=expected.expected_weight_g,
        performance_index=performance_index,
        deviation_percent=calculate_deviation_percent(current_weight, expected.expected_weight_g),
        current_status=classify_status(performance_index),
        adg_grams_per_day=adg.adg_grams_per_day,
        adg_method=adg.method,
        expected_adg_grams_per_day=expected.expected_adg_grams_per_day,
        harvest=harvest,
        financials=financials,
        target_harvest_overdue=target_date.overdue,
        days_overdue=target_date.days_overdue,
    )
