# utils/transactions.py
import logging
from contextlib import contextmanager
from sqlalchemy.orm import Session
from utils.db import SessionLocal

logger = logging.getLogger(__name__)


@contextmanager
def uow(session: Session | None = None):
    """
    Unidad de trabajo para scripts (seeds, cargas masivas).

    Uso:
        with uow() as db:
            ... # inserts
        # commit/rollback automático
    Si ya traes una sesión abierta, pásala para no abrir otra.
    """
    owns_session = session is None
    db = session or SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        logger.warning("Rollback de unidad de trabajo", exc_info=True)
        db.rollback()
        raise
    finally:
        if owns_session:
            db.close()
