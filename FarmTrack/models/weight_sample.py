from __future__ import annotations

import datetime as dt
from sqlalchemy import BigInteger, Date, DateTime, ForeignKey, String, Numeric, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_farm


class WeightSample(Base):
    """Muestreo de peso de un lote. Inmutable una vez registrado."""
    __tablename__ = "weight_sample"

    weight_sample_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    batch_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("batch.batch_id"), nullable=False, index=True)

    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    average_weight_g: Mapped[float] = mapped_column(Numeric(10, 3), nullable=False)
    sample_size: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[str | None] = mapped_column(String(255))

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=False), default=now_farm, nullable=False)

    batch: Mapped["Batch"] = relationship("Batch", back_populates="weight_samples")
