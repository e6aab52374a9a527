# services/growth_standard_lookup.py
"""
Estrategias intercambiables para obtener la curva estándar de un lote.

Regla común: curva de la línea genética si existe; si no, la curva genérica
de la especie (breed_id NULL). Lista vacía si no hay ninguna.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models.growth_standard import GrowthStandard
from schemas.projection import BatchSnapshot, GrowthPoint
from services.reference_curves import BREED_REFERENCES, species_curves


class GrowthStandardLookup(Protocol):
    def get_curve(self, batch: BatchSnapshot) -> List[GrowthPoint]:
        ...


def _to_points(pairs: Iterable[Tuple[int, float]]) -> List[GrowthPoint]:
    return [GrowthPoint(age_days=age, expected_weight_g=weight) for age, weight in pairs]


class InMemoryGrowthStandardLookup:
    """
    Curvas en memoria indexadas por (especie, clave de línea genética).
    La clave puede ser el breed_id o el nombre (cobb_500); None es la curva
    genérica de la especie.
    """

    def __init__(self, curves: Dict[Tuple[str, Optional[object]], Iterable[Tuple[int, float]]]):
        self._curves = {
            (species.lower(), breed): _to_points(points)
            for (species, breed), points in curves.items()
        }

    @classmethod
    def from_reference_curves(cls) -> "InMemoryGrowthStandardLookup":
        """Curvas de referencia indexadas por nombre de línea genética."""
        curves: Dict[Tuple[str, Optional[object]], Iterable[Tuple[int, float]]] = {
            (ref["species"], ref["name"]): ref["curve"] for ref in BREED_REFERENCES
        }
        for species, points in species_curves().items():
            curves[(species, None)] = points
        return cls(curves)

    def get_curve(self, batch: BatchSnapshot) -> List[GrowthPoint]:
        species = batch.species.lower()
        for breed_key in (batch.breed_id, batch.breed_name):
            if breed_key is None:
                continue
            breed_curve = self._curves.get((species, breed_key))
            if breed_curve:
                return list(breed_curve)
        return list(self._curves.get((species, None), []))


class SqlGrowthStandardLookup:
    """Curvas desde la tabla growth_standard (por breed_id; especie sin distinguir mayúsculas)."""

    def __init__(self, db: Session):
        self.db = db

    def _query(self, species: str, breed_id: Optional[int]) -> List[GrowthStandard]:
        stmt = select(GrowthStandard).where(func.lower(GrowthStandard.species) == species.strip().lower())
        if breed_id is None:
            stmt = stmt.where(GrowthStandard.breed_id.is_(None))
        else:
            stmt = stmt.where(GrowthStandard.breed_id == breed_id)
        return list(self.db.scalars(stmt.order_by(GrowthStandard.age_days.asc())))

    def get_curve(self, batch: BatchSnapshot) -> List[GrowthPoint]:
        rows: List[GrowthStandard] = []
        if batch.breed_id is not None:
            rows = self._query(batch.species, batch.breed_id)
        if not rows:
            rows = self._query(batch.species, None)
        return [
            GrowthPoint(age_days=row.age_days, expected_weight_g=float(row.expected_weight_g))
            for row in rows
        ]
