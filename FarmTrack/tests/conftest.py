"""
Fixtures compartidas: BD SQLite en memoria por test y TestClient de FastAPI
con get_db apuntando a esa BD.
"""
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from models import Base, Batch, FeedRecord, WeightSample
from scripts.seed_growth_standards import seed_growth_standards
from utils.datetime_utils import today_farm
from utils.db import get_db


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def seeded_db(db):
    seed_growth_standards(db)
    db.commit()
    return db


@pytest.fixture
def client(db):
    def _override():
        yield db

    app.dependency_overrides[get_db] = _override
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def today() -> date:
    return today_farm()


@pytest.fixture
def make_batch(db, today):
    """
    Crea un lote activo de engorde con `age_days` de edad y los muestreos
    indicados como [(edad_días, peso_g), ...].
    """
    def _make(
            age_days=30,
            samples=(),
            feed=(),
            species="Broiler",
            breed_id=None,
            **fields
    ) -> Batch:
        acquisition = today - timedelta(days=age_days)
        data = dict(
            batch_name=f"Lote {species} {age_days}d",
            species=species,
            breed_id=breed_id,
            acquisition_date=acquisition,
            initial_quantity=1000,
            current_quantity=1000,
            total_cost=500000,
        )
        data.update(fields)
        batch = Batch(**data)
        db.add(batch)
        db.flush()

        for day, weight in samples:
            db.add(WeightSample(
                batch_id=batch.batch_id,
                date=acquisition + timedelta(days=day),
                average_weight_g=weight,
                sample_size=50,
            ))
        for day, kg, cost in feed:
            db.add(FeedRecord(
                batch_id=batch.batch_id,
                date=acquisition + timedelta(days=day),
                quantity_kg=kg,
                cost=cost,
            ))
        db.commit()
        return batch

    return _make
