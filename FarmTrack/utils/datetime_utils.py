"""
Utilidades centralizadas para manejo de fechas.
Todas las operaciones usan la zona horaria de la granja (settings.FARM_TIMEZONE).

Convención del sistema:
- Las proyecciones trabajan con fechas (date), nunca con datetimes.
- "Hoy" siempre se calcula en la zona horaria de la granja, no la del servidor.
"""
from datetime import datetime, date, timedelta
from zoneinfo import ZoneInfo

from config.settings import settings


def farm_tz() -> ZoneInfo:
    return ZoneInfo(settings.FARM_TIMEZONE)


def today_farm() -> date:
    """
    Retorna la fecha actual (date) en la zona horaria de la granja.
    """
    return datetime.now(farm_tz()).date()


def days_between(start: date, end: date) -> int:
    """
    Días calendario completos entre dos fechas (end - start). Puede ser negativo.
    """
    return (end - start).days


def age_in_days(acquisition_date: date, today: date) -> int:
    """
    Edad del lote en días desde la adquisición.

    Regla: mínimo 1 día (evita divisiones entre cero en lotes recién llegados
    o con fecha de adquisición futura).
    """
    return max(1, days_between(acquisition_date, today))


def add_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def now_farm() -> datetime:
    """
    Retorna el datetime actual en la zona de la granja (naive, para columnas DATETIME).
    """
    return datetime.now(farm_tz()).replace(tzinfo=None, microsecond=0)
