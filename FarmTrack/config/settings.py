# config/settings.py
"""
Configuración centralizada de la aplicación usando Pydantic Settings.
Las variables se cargan desde el archivo .env
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Base de datos
    DATABASE_URL: str = "sqlite:///./farmtrack.db"

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = ["http://localhost:3000"]

    # Zona horaria de la granja (define qué es "hoy" para las proyecciones)
    FARM_TIMEZONE: str = "Africa/Lagos"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Proyecciones
    DEFAULT_FEED_COST_PER_KG: float = 1000.0  # Se usa si no hay compras de alimento registradas
    CHART_PROJECTION_DAYS: int = 14  # Días hacia adelante en la gráfica de crecimiento
    UPCOMING_HARVEST_DAYS: int = 14  # Ventana para "cosechas próximas"
    UPCOMING_HARVEST_LIMIT: int = 5
    ATTENTION_LIMIT: int = 5  # Máximo de lotes en "requieren atención"


settings = Settings()
