# services/financial_projection_service.py
"""
Proyección financiera al peso objetivo.

Fórmulas:
    ingreso          = cantidad_actual × precio_objetivo
    alimento_futuro  = (remanente_g / 1000 × FCR × costo_kg) × cantidad_actual
    utilidad         = ingreso - costo_total - alimento_futuro

No se modela mortalidad en la ventana de proyección: se asume que la
cantidad actual llega completa al peso objetivo.
"""
from __future__ import annotations

from typing import Optional, Union

from enums.enums import UnavailableReasonEnum
from schemas.projection import FeedAggregate, FinancialProjection, ProjectionUnavailable
from services.harvest_projection_service import no_target_weight


def resolve_feed_cost_per_kg(feed: FeedAggregate, default_cost_per_kg: float) -> float:
    """Costo promedio pagado por kg; si no hay compras registradas, el default."""
    if feed.total_kg and feed.total_kg > 0:
        return feed.total_cost / feed.total_kg
    return default_cost_per_kg


def project_financials(
        remaining_grams: Optional[float],
        target_price_per_unit: Optional[float],
        current_quantity: int,
        fcr: Optional[float],
        feed_cost_per_kg: float,
        total_cost: float
) -> Union[FinancialProjection, ProjectionUnavailable]:
    """
    `remaining_grams` es None cuando el lote no tiene peso objetivo.
    Ningún dato faltante se sustituye por 0: se reporta la ausencia.
    """
    if remaining_grams is None:
        return no_target_weight()
    if target_price_per_unit is None:
        return ProjectionUnavailable(
            reason=UnavailableReasonEnum.no_target_price,
            detail="Datos insuficientes: el lote no tiene precio objetivo por unidad",
        )
    if fcr is None:
        return ProjectionUnavailable(
            reason=UnavailableReasonEnum.no_fcr,
            detail="Datos insuficientes: no hay conversión alimenticia (FCR) para el lote",
        )

    revenue = current_quantity * target_price_per_unit
    feed_cost = (remaining_grams / 1000 * fcr * feed_cost_per_kg) * current_quantity
    return FinancialProjection(
        projected_revenue=revenue,
        projected_feed_cost=feed_cost,
        estimated_profit=revenue - total_cost - feed_cost,
        fcr=fcr,
        feed_cost_per_kg=feed_cost_per_kg,
    )
