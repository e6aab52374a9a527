from __future__ import annotations

import datetime as dt
from sqlalchemy import BigInteger, Date, DateTime, ForeignKey, String, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_farm


class FeedRecord(Base):
    """Consumo de alimento registrado para un lote."""
    __tablename__ = "feed_record"

    feed_record_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    batch_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("batch.batch_id"), nullable=False, index=True)

    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    feed_type: Mapped[str | None] = mapped_column(String(60))
    quantity_kg: Mapped[float] = mapped_column(Numeric(12, 3), nullable=False)
    cost: Mapped[float] = mapped_column(Numeric(14, 2), default=0, nullable=False)

    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=False), default=now_farm, nullable=False)


class Expense(Base):
    """Gasto operativo imputado a un lote (medicamentos, mano de obra, etc.)."""
    __tablename__ = "expense"

    expense_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    batch_id: Mapped[int | None] = mapped_column(BigInteger, ForeignKey("batch.batch_id"), index=True)

    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    category: Mapped[str | None] = mapped_column(String(60))
    amount: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(String(255))
