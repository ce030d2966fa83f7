# backend/beautyshop/core/config.py
"""
Este archivo contiene la configuración de la aplicación.

Todas las variables se leen del entorno (o de un fichero .env) al arrancar.
Las credenciales de la base de datos llegan por DB_HOST, DB_USER,
DB_PASSWORD y DB_NAME, igual que en el despliegue original.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Variables sensibles desde .env, defaults seguros para el resto.
    """
    # Configuración general del proyecto
    API_PREFIX: str = ""
    PROJECT_NAME: str = "Beauty Shop API"
    PROJECT_VERSION: str = "1.0.0"

    # Configuración de la base de datos
    DB_DRIVER: str = "postgresql+asyncpg"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "user"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "beautyshop_db"
    # Si se define, tiene prioridad sobre los campos DB_* anteriores
    DATABASE_URL: Optional[str] = None

    # Pool de conexiones: límite fijo, las peticiones extra esperan en cola
    DB_CONNECTION_LIMIT: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: Optional[float] = None
    DB_CREATE_TABLES: bool = False

    @property
    def DATABASE_URI(self) -> str:
        """URL de conexión a la base de datos asíncrona."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"{self.DB_DRIVER}://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    class Config:
        env_file = ".env"
        case_sensitive = False

# Instancia global de la configuración
settings = Settings()
