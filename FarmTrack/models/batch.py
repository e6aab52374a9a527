from __future__ import annotations

from datetime import datetime, date
from sqlalchemy import (
    BigInteger, Date, DateTime, ForeignKey, String, Numeric, Integer, UniqueConstraint
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_farm


class Breed(Base):
    __tablename__ = "breed"
    __table_args__ = (
        UniqueConstraint("species", "name", name="uq_breed_species_name"),
    )

    breed_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    species: Mapped[str] = mapped_column(String(60), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(120))

    # Referencias del manual de la línea genética
    typical_fcr: Mapped[float | None] = mapped_column(Numeric(5, 2))
    typical_market_weight_g: Mapped[float | None] = mapped_column(Numeric(10, 2))
    typical_days_to_market: Mapped[int | None] = mapped_column(Integer)


class Batch(Base):
    __tablename__ = "batch"

    batch_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    farm_id: Mapped[int | None] = mapped_column(BigInteger, index=True)
    batch_name: Mapped[str] = mapped_column(String(120), nullable=False)

    species: Mapped[str] = mapped_column(String(60), nullable=False)
    breed_id: Mapped[int | None] = mapped_column(BigInteger, ForeignKey("breed.breed_id"))

    # active / depleted / sold
    status: Mapped[str] = mapped_column(String(16), default="active", nullable=False)

    acquisition_date: Mapped[date] = mapped_column(Date, nullable=False)
    initial_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    current_quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    cost_per_unit: Mapped[float | None] = mapped_column(Numeric(12, 2))
    total_cost: Mapped[float] = mapped_column(Numeric(14, 2), default=0, nullable=False)

    # Objetivos de cosecha (opcionales)
    target_weight_g: Mapped[float | None] = mapped_column(Numeric(10, 2))
    target_harvest_date: Mapped[date | None] = mapped_column(Date)
    target_price_per_unit: Mapped[float | None] = mapped_column(Numeric(12, 2))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_farm, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        default=now_farm,
        onupdate=now_farm,
        nullable=False
    )

    breed: Mapped["Breed"] = relationship("Breed", foreign_keys=[breed_id])
    weight_samples: Mapped[list["WeightSample"]] = relationship(
        "WeightSample", back_populates="batch", cascade="all, delete-orphan",
        order_by="WeightSample.date"
    )
