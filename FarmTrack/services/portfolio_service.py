# services/portfolio_service.py
"""
Consultas sobre todos los lotes activos para dashboards:
- cosechas próximas
- lotes que requieren atención por desviación de crecimiento
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from schemas.projection import AttentionBatchOut, HarvestProjection, Projection, UpcomingHarvestOut
from services.performance_service import determine_alert, needs_attention
from services.projection_repository import list_active_batches, load_projection_inputs
from services.projection_service import build_projection


def _projection_for(db: Session, batch_id: int, today: date) -> Optional[Projection]:
    inputs = load_projection_inputs(db, batch_id)
    if inputs is None:
        return None
    result = build_projection(inputs, today=today)
    return result if isinstance(result, Projection) else None


def get_upcoming_harvests(
        db: Session,
        today: date,
        days_ahead: int = 14,
        farm_id: Optional[int] = None,
        limit: int = 5
) -> List[UpcomingHarvestOut]:
    """Lotes con cosecha proyectada dentro de `days_ahead` días, los más cercanos primero."""
    items: List[UpcomingHarvestOut] = []
    for batch in list_active_batches(db, farm_id=farm_id, require_target_weight=True):
        projection = _projection_for(db, batch.batch_id, today)
        if projection is None or not isinstance(projection.harvest, HarvestProjection):
            continue
        if not 0 <= projection.harvest.days_remaining <= days_ahead:
            continue
        items.append(UpcomingHarvestOut(
            batch_id=batch.batch_id,
            batch_name=batch.batch_name,
            species=batch.species,
            current_quantity=batch.current_quantity,
            target_weight_g=float(batch.target_weight_g),
            projected_harvest_date=projection.harvest.projected_harvest_date,
            days_remaining=projection.harvest.days_remaining,
        ))

    items.sort(key=lambda item: (item.days_remaining, item.batch_id))
    return items[:limit]


def get_batches_needing_attention(
        db: Session,
        today: date,
        farm_id: Optional[int] = None,
        limit: int = 5
) -> List[AttentionBatchOut]:
    """Lotes con índice < 90 o > 110, ordenados por mayor desviación."""
    items: List[AttentionBatchOut] = []
    for batch in list_active_batches(db, farm_id=farm_id):
        projection = _projection_for(db, batch.batch_id, today)
        if projection is None or not needs_attention(projection.performance_index):
            continue
        items.append(AttentionBatchOut(
            batch_id=batch.batch_id,
            batch_name=batch.batch_name,
            species=batch.species,
            current_quantity=batch.current_quantity,
            performance_index=projection.performance_index,
            deviation=abs(100 - projection.performance_index),
            alert=determine_alert(projection.performance_index),
        ))

    items.sort(key=lambda item: (-item.deviation, item.batch_id))
    return items[:limit]
