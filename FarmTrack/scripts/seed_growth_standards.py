# Ejecuta desde la carpeta FarmTrack:
#   python -m scripts.seed_growth_standards [--create-tables]
#
# Carga las líneas genéticas de referencia y sus curvas de crecimiento.
# Es idempotente: las líneas existentes se actualizan y sus curvas se reemplazan.

import logging
from argparse import ArgumentParser

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from models import Base, Breed, GrowthStandard
from services.reference_curves import BREED_REFERENCES, species_curves
from utils.db import engine
from utils.transactions import uow

logger = logging.getLogger(__name__)


def _replace_curve(db: Session, species: str, breed_id, points) -> None:
    stmt = delete(GrowthStandard).where(GrowthStandard.species == species)
    if breed_id is None:
        stmt = stmt.where(GrowthStandard.breed_id.is_(None))
    else:
        stmt = stmt.where(GrowthStandard.breed_id == breed_id)
    db.execute(stmt)

    db.add_all([
        GrowthStandard(species=species, breed_id=breed_id, age_days=age, expected_weight_g=weight)
        for age, weight in points
    ])


def upsert_breed(db: Session, ref: dict) -> Breed:
    breed = db.scalar(
        select(Breed).where(Breed.species == ref["species"], Breed.name == ref["name"])
    )
    if breed is None:
        breed = Breed(species=ref["species"], name=ref["name"])
        db.add(breed)

    breed.display_name = ref["display_name"]
    breed.typical_fcr = ref["typical_fcr"]
    breed.typical_market_weight_g = ref["typical_market_weight_g"]
    breed.typical_days_to_market = ref["typical_days_to_market"]
    db.flush()
    return breed


def seed_growth_standards(db: Session) -> int:
    """Carga líneas y curvas. Retorna el número de líneas procesadas."""
    for ref in BREED_REFERENCES:
        breed = upsert_breed(db, ref)
        _replace_curve(db, ref["species"], breed.breed_id, ref["curve"])
        logger.info("Curva cargada: %s (%s puntos)", ref["display_name"], len(ref["curve"]))

    # Curva genérica por especie (breed_id NULL)
    for species, points in species_curves().items():
        _replace_curve(db, species, None, points)

    return len(BREED_REFERENCES)


if __name__ == "__main__":
    ap = ArgumentParser()
    ap.add_argument("--create-tables", action="store_true", help="Crea las tablas antes de cargar")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO)

    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    with uow() as db:
        total = seed_growth_standards(db)
    print(f"[OK] {total} líneas genéticas cargadas")
