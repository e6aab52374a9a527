from __future__ import annotations

from sqlalchemy import BigInteger, ForeignKey, String, Numeric, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base, BigIntPK


class GrowthStandard(Base):
    """
    Punto de la curva de crecimiento de referencia.

    breed_id NULL => curva genérica de la especie (fallback cuando la línea
    genética no tiene curva propia).
    """
    __tablename__ = "growth_standard"
    __table_args__ = (
        UniqueConstraint("species", "breed_id", "age_days", name="uq_growth_standard_point"),
    )

    growth_standard_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    species: Mapped[str] = mapped_column(String(60), nullable=False, index=True)
    breed_id: Mapped[int | None] = mapped_column(BigInteger, ForeignKey("breed.breed_id"), index=True)

    age_days: Mapped[int] = mapped_column(Integer, nullable=False)
    expected_weight_g: Mapped[float] = mapped_column(Numeric(10, 2), nullable=False)
