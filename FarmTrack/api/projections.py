"""
Router de proyecciones: cálculo sin estado y vistas de portafolio.
"""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from config.settings import settings
from schemas.projection import (
    AttentionBatchOut,
    ProjectionInputs,
    ProjectionOutcome,
    UpcomingHarvestOut,
)
from services.growth_standard_lookup import InMemoryGrowthStandardLookup
from services.portfolio_service import get_batches_needing_attention, get_upcoming_harvests
from services.projection_service import build_projection
from utils.datetime_utils import today_farm
from utils.db import get_db

router = APIRouter(prefix="/projections", tags=["projections"])

_reference_lookup = InMemoryGrowthStandardLookup.from_reference_curves()


@router.post(
    "/compute",
    response_model=ProjectionOutcome,
    summary="Calcular proyección desde un snapshot",
    description=(
        "Calcula la proyección con los datos enviados, sin leer la BD.\n\n"
        "- Si `growth_standard` viene vacío se usa la curva de referencia de la especie "
        "(o la de la línea genética indicada en `batch.breed_name`, p. ej. `cobb_500`).\n"
        "- `today` es opcional; enviarlo hace el resultado reproducible.\n"
        "- Muestreos fuera de orden o con valores negativos responden **422**."
    )
)
def compute_projection(payload: ProjectionInputs):
    return build_projection(payload, lookup=_reference_lookup)


@router.get(
    "/upcoming-harvests",
    response_model=List[UpcomingHarvestOut],
    summary="Lotes con cosecha próxima",
)
def list_upcoming_harvests(
        days_ahead: int | None = Query(None, ge=0, le=365),
        farm_id: int | None = Query(None, gt=0),
        db: Session = Depends(get_db)
):
    return get_upcoming_harvests(
        db,
        today=today_farm(),
        days_ahead=settings.UPCOMING_HARVEST_DAYS if days_ahead is None else days_ahead,
        farm_id=farm_id,
        limit=settings.UPCOMING_HARVEST_LIMIT,
    )


@router.get(
    "/attention",
    response_model=List[AttentionBatchOut],
    summary="Lotes que requieren atención",
    description="Lotes activos con índice de desempeño < 90 o > 110, ordenados por mayor desviación."
)
def list_batches_needing_attention(
        limit: int | None = Query(None, ge=1, le=100),
        farm_id: int | None = Query(None, gt=0),
        db: Session = Depends(get_db)
):
    return get_batches_needing_attention(
        db,
        today=today_farm(),
        farm_id=farm_id,
        limit=settings.ATTENTION_LIMIT if limit is None else limit,
    )
