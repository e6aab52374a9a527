# services/projection_repository.py
"""
Carga del snapshot de un lote para el motor de proyección.

Todas las lecturas usan la misma sesión para que lote, muestreos, curva y
alimento correspondan al mismo momento.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.batch import Batch
from models.feed import Expense, FeedRecord
from models.weight_sample import WeightSample
from schemas.projection import BatchSnapshot, FeedAggregate, ProjectionInputs, WeightSampleIn
from services.adg_service import SPECIES_START_WEIGHT_G, validate_samples
from services.growth_standard_lookup import SqlGrowthStandardLookup
from utils.errors import InputValidationError

logger = logging.getLogger(__name__)


def _load_samples(db: Session, batch_id: int) -> List[WeightSampleIn]:
    rows = db.scalars(
        select(WeightSample)
        .where(WeightSample.batch_id == batch_id)
        .order_by(WeightSample.date.asc(), WeightSample.weight_sample_id.asc())
    )
    samples = []
    for idx, row in enumerate(rows):
        try:
            samples.append(WeightSampleIn.model_validate(row))
        except ValidationError as exc:
            logger.warning("Muestreo %s del lote %s inválido", row.weight_sample_id, batch_id)
            raise InputValidationError(
                [{**err, "loc": ["samples", idx, *err["loc"]]} for err in exc.errors()]
            ) from exc
    validate_samples(samples)
    return samples


def _sum(db: Session, column, batch_id_column, batch_id: int) -> float:
    total = db.scalar(select(func.coalesce(func.sum(column), 0)).where(batch_id_column == batch_id))
    return float(total or 0)


def _positive_or_none(value) -> Optional[float]:
    """Un peso objetivo en 0 o negativo equivale a no tener peso objetivo."""
    if value is None or value <= 0:
        return None
    return float(value)


def _resolve_fcr(
        batch: Batch,
        samples: List[WeightSampleIn],
        feed_kg: float
) -> Optional[float]:
    """
    FCR real del lote si hay alimento y ganancia de peso registrados;
    si no, el FCR típico de la línea genética. None si no hay ninguno.
    """
    start = SPECIES_START_WEIGHT_G.get(batch.species.strip().lower())
    if feed_kg > 0 and samples and start is not None and batch.current_quantity > 0:
        gain_kg = (float(samples[-1].average_weight_g) - start) / 1000 * batch.current_quantity
        if gain_kg > 0:
            return feed_kg / gain_kg

    if batch.breed_id is not None:
        breed = batch.breed
        if breed is not None and breed.typical_fcr is not None:
            return float(breed.typical_fcr)
    return None


def load_projection_inputs(db: Session, batch_id: int) -> Optional[ProjectionInputs]:
    """None si el lote no existe."""
    batch = db.get(Batch, batch_id)
    if not batch:
        return None

    samples = _load_samples(db, batch_id)

    feed_kg = _sum(db, FeedRecord.quantity_kg, FeedRecord.batch_id, batch_id)
    feed_cost = _sum(db, FeedRecord.cost, FeedRecord.batch_id, batch_id)
    expenses = _sum(db, Expense.amount, Expense.batch_id, batch_id)

    snapshot = BatchSnapshot(
        batch_id=batch.batch_id,
        batch_name=batch.batch_name,
        species=batch.species,
        breed_id=batch.breed_id,
        breed_name=batch.breed.name if batch.breed is not None else None,
        status=batch.status,
        acquisition_date=batch.acquisition_date,
        initial_quantity=batch.initial_quantity,
        current_quantity=batch.current_quantity,
        total_cost=float(batch.total_cost or 0) + expenses,
        target_weight_g=_positive_or_none(batch.target_weight_g),
        target_harvest_date=batch.target_harvest_date,
        target_price_per_unit=(
            float(batch.target_price_per_unit) if batch.target_price_per_unit is not None else None
        ),
    )

    return ProjectionInputs(
        batch=snapshot,
        samples=samples,
        growth_standard=SqlGrowthStandardLookup(db).get_curve(snapshot),
        feed=FeedAggregate(
            total_kg=feed_kg,
            total_cost=feed_cost,
            fcr=_resolve_fcr(batch, samples, feed_kg),
        ),
    )


def list_active_batches(
        db: Session,
        farm_id: Optional[int] = None,
        require_target_weight: bool = False
) -> List[Batch]:
    stmt = select(Batch).where(Batch.status == "active")
    if farm_id is not None:
        stmt = stmt.where(Batch.farm_id == farm_id)
    if require_target_weight:
        stmt = stmt.where(Batch.target_weight_g > 0)
    return list(db.scalars(stmt.order_by(Batch.batch_id.asc())))
