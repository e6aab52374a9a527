# schemas/shared.py
from __future__ import annotations

from pydantic import BaseModel


# -------------------------------------------------------------------
# Base común para todos los schemas (Pydantic v2)
# -------------------------------------------------------------------
class ORMModel(BaseModel):
    """
    Modelo base para schemas de entrada.
    - from_attributes=True: permite construir el schema desde objetos ORM.
    - populate_by_name=True: habilita usar 'alias' si decides nombrar distinto.
    - str_strip_whitespace=True: limpia espacios en strings.
    """
    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }


class ResultModel(BaseModel):
    """
    Modelo base para resultados calculados.
    - frozen=True: un resultado se crea por llamada y nunca se modifica.
    """
    model_config = {
        "frozen": True,
    }


__all__ = [
    "ORMModel",
    "ResultModel",
]
