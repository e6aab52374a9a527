from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from config.settings import settings
from schemas.projection import GrowthChartOut, ProjectionInputs, ProjectionOutcome
from services.growth_chart_service import generate_chart_data
from services.projection_repository import load_projection_inputs
from services.projection_service import build_projection
from utils.datetime_utils import age_in_days, today_farm
from utils.db import get_db

router = APIRouter(prefix="/batches", tags=["batches"])


def _load_or_404(db: Session, batch_id: int) -> ProjectionInputs:
    inputs = load_projection_inputs(db, batch_id)
    if inputs is None:
        raise HTTPException(status_code=404, detail="Lote no encontrado")
    return inputs


@router.get(
    "/{batch_id}/projection",
    response_model=ProjectionOutcome,
    summary="Proyección de crecimiento y financiera del lote",
    description=(
        "Calcula ADG, índice de desempeño, fecha de cosecha proyectada y finanzas al peso objetivo.\n\n"
        "- `kind=projection`: resultado completo; `harvest` y `financials` pueden venir con "
        "`kind=unavailable` si falta peso objetivo, precio o FCR.\n"
        "- `kind=unavailable`: no hay base de comparación (sin curva estándar, sin muestreos, lote inactivo).\n"
        "- Muestreos malformados en BD responden **422**."
    )
)
def get_batch_projection(
        batch_id: int = Path(..., gt=0, description="ID del lote"),
        db: Session = Depends(get_db)
):
    inputs = _load_or_404(db, batch_id)
    return build_projection(inputs, today=today_farm())


@router.get(
    "/{batch_id}/growth-chart",
    response_model=GrowthChartOut,
    summary="Curva esperada vs. pesos reales",
)
def get_batch_growth_chart(
        batch_id: int = Path(..., gt=0, description="ID del lote"),
        projection_days: int | None = Query(None, ge=0, le=365, description="Días a proyectar"),
        db: Session = Depends(get_db)
):
    inputs = _load_or_404(db, batch_id)
    age = age_in_days(inputs.batch.acquisition_date, today_farm())

    if projection_days is None:
        projection_days = settings.CHART_PROJECTION_DAYS

    return GrowthChartOut(
        batch_id=batch_id,
        age_days=age,
        points=generate_chart_data(
            inputs.batch.acquisition_date,
            age,
            inputs.growth_standard,
            inputs.samples,
            projection_days,
        ),
    )
