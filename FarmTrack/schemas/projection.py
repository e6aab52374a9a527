from __future__ import annotations

import datetime as dt
from typing import Annotated, List, Literal, Optional, Union

from pydantic import Field

from enums.enums import (
    AdgMethodEnum,
    AlertSeverityEnum,
    BatchStatusEnum,
    PerformanceStatusEnum,
    UnavailableReasonEnum,
)
from schemas.shared import ORMModel, ResultModel

# =====================================================
# 🟢 INPUT SCHEMAS
# =====================================================

class WeightSampleIn(ORMModel):
    """
    Muestreo de peso promedio de un lote.

    Los valores negativos no se rechazan aquí: los rechaza validate_samples
    junto con el orden de fechas, siempre como InputValidationError.
    """
    date: dt.date
    average_weight_g: float = Field(..., description="Peso promedio por animal en gramos")
    sample_size: int = Field(0, description="Animales pesados en el muestreo")


class GrowthPoint(ORMModel):
    """Punto de la curva estándar: peso esperado a una edad"""
    age_days: int = Field(..., ge=0)
    expected_weight_g: float = Field(..., ge=0)


class BatchSnapshot(ORMModel):
    """Campos del lote relevantes para la proyección"""
    batch_id: Optional[int] = None
    batch_name: Optional[str] = None
    species: str = Field(..., min_length=1, max_length=60)
    breed_id: Optional[int] = None
    breed_name: Optional[str] = Field(None, max_length=80, description="Clave de la línea genética, p. ej. cobb_500")
    status: BatchStatusEnum = BatchStatusEnum.active

    acquisition_date: dt.date
    initial_quantity: int = Field(..., ge=0)
    current_quantity: int = Field(..., ge=0)
    total_cost: float = Field(0, ge=0, description="Costo incurrido a la fecha (compra + gastos)")

    target_weight_g: Optional[float] = Field(None, gt=0)
    target_harvest_date: Optional[dt.date] = None
    target_price_per_unit: Optional[float] = Field(None, ge=0)


class FeedAggregate(ORMModel):
    """Alimento acumulado del lote a la fecha (lo provee el llamador)"""
    total_kg: float = Field(0, ge=0)
    total_cost: float = Field(0, ge=0)
    fcr: Optional[float] = Field(None, gt=0, description="kg de alimento por kg de peso ganado")


class ProjectionInputs(ORMModel):
    """
    Snapshot completo para calcular la proyección de un lote.

    `today` es opcional: si no se envía se usa la fecha actual de la granja.
    Enviarlo hace el cálculo reproducible.
    """
    batch: BatchSnapshot
    samples: List[WeightSampleIn] = Field(default_factory=list, description="Ascendente por fecha")
    growth_standard: List[GrowthPoint] = Field(default_factory=list)
    feed: FeedAggregate = Field(default_factory=FeedAggregate)
    today: Optional[dt.date] = None


# =====================================================
# 🟣 STAGE RESULTS
# =====================================================

class AdgEstimate(ResultModel):
    adg_grams_per_day: float = Field(..., ge=0)
    raw_adg_grams_per_day: float
    method: AdgMethodEnum


class ExpectedWeight(ResultModel):
    expected_weight_g: float
    expected_adg_grams_per_day: float


class ProjectionUnavailable(ResultModel):
    """Ausencia tipada: falta un dato de negocio esperado (no es un error)."""
    kind: Literal["unavailable"] = "unavailable"
    reason: UnavailableReasonEnum
    detail: str


class HarvestProjection(ResultModel):
    kind: Literal["harvest"] = "harvest"
    remaining_grams: float = Field(..., ge=0)
    projected_harvest_date: dt.date
    days_remaining: int = Field(..., ge=0)


class TargetDateStatus(ResultModel):
    """Señal independiente: la fecha objetivo de cosecha ya pasó."""
    overdue: bool
    days_overdue: Optional[int] = None


class FinancialProjection(ResultModel):
    kind: Literal["financials"] = "financials"
    projected_revenue: float
    projected_feed_cost: float
    estimated_profit: float
    fcr: float
    feed_cost_per_kg: float


HarvestOutcome = Annotated[Union[HarvestProjection, ProjectionUnavailable], Field(discriminator="kind")]
FinancialOutcome = Annotated[Union[FinancialProjection, ProjectionUnavailable], Field(discriminator="kind")]


# =====================================================
# 🔵 OUTPUT SCHEMAS
# =====================================================

class Projection(ResultModel):
    kind: Literal["projection"] = "projection"
    batch_id: Optional[int] = None
    as_of: dt.date
    age_days: int = Field(..., ge=1)

    current_weight_g: float
    expected_weight_g: float
    performance_index: float
    deviation_percent: float
    current_status: PerformanceStatusEnum

    adg_grams_per_day: float = Field(..., ge=0)
    adg_method: AdgMethodEnum
    expected_adg_grams_per_day: float

    harvest: HarvestOutcome
    financials: FinancialOutcome

    target_harvest_overdue: bool = False
    days_overdue: Optional[int] = None


ProjectionOutcome = Annotated[Union[Projection, ProjectionUnavailable], Field(discriminator="kind")]


class ChartPoint(ResultModel):
    day: int
    expected_weight_g: float
    actual_weight_g: Optional[float] = None
    deviation_percent: Optional[float] = None


class GrowthChartOut(ResultModel):
    batch_id: Optional[int] = None
    age_days: int
    points: List[ChartPoint]


class PerformanceAlert(ResultModel):
    severity: AlertSeverityEnum
    title: str
    recommendation: str


class UpcomingHarvestOut(ResultModel):
    batch_id: int
    batch_name: str
    species: str
    current_quantity: int
    target_weight_g: float
    projected_harvest_date: dt.date
    days_remaining: int


class AttentionBatchOut(ResultModel):
    batch_id: int
    batch_name: str
    species: str
    current_quantity: int
    performance_index: float
    deviation: float
    alert: Optional[PerformanceAlert] = None
