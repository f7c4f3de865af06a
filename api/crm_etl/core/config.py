"""
Configuracion central de la aplicacion.
Gestiona variables de entorno y configuraciones globales.
Soporta configuracion dinamica para desarrollo (ENVIRONMENT=development)
y produccion (ENVIRONMENT=production).
"""
import json
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field


class Settings(BaseSettings):
    """
    Clase de configuracion de la aplicacion.
    Lee variables de entorno y proporciona valores por defecto.

    - DATABASE_URL se puede especificar completa o por componentes
    - HUBSPOT_ACCESS_TOKEN es obligatorio para sincronizar (private app token)
    """

    # Configuracion de la aplicacion
    APP_NAME: str = Field(default="CRM ETL")
    APP_VERSION: str = Field(default="2.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Configuracion del servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)

    # Base de datos - Componentes separados (recomendado para flexibilidad)
    DATABASE_HOST: str = Field(default="localhost")
    DATABASE_PORT: int = Field(default=5432)
    DATABASE_USER: str = Field(default="crm_user")
    DATABASE_PASSWORD: str = Field(default="crm_pass")
    DATABASE_NAME: str = Field(default="crm_etl")

    # Base de datos - URL completa (override de componentes si se proporciona)
    DATABASE_URL: str = Field(default="")
    DB_POOL_SIZE: int = Field(default=5)
    DB_MAX_OVERFLOW: int = Field(default=10)

    # CORS (acepta lista JSON o "*" para todos los origenes)
    CORS_ORIGINS: str = Field(default="*")

    # HubSpot CRM
    HUBSPOT_ACCESS_TOKEN: str = Field(default="")
    HUBSPOT_API_BASE_URL: str = Field(default="https://api.hubapi.com")
    HUBSPOT_TIMEOUT_S: float = Field(default=30.0)
    # 100 es el maximo permitido por la API de objetos CRM v3
    HUBSPOT_PAGE_SIZE: int = Field(default=100)
    HUBSPOT_PAGE_DELAY_MS: int = Field(default=100)

    # Sync: tope de mensajes de error guardados por corrida
    SYNC_MAX_ERRORS: int = Field(default=1000)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/app.log")

    @computed_field
    @property
    def effective_database_url(self) -> str:
        """
        Retorna la URL de base de datos efectiva.
        Si DATABASE_URL esta definida, la usa directamente.
        Si no, construye la URL desde los componentes individuales.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )

    @computed_field
    @property
    def is_development(self) -> bool:
        """Indica si el entorno es de desarrollo."""
        return self.ENVIRONMENT.lower() == "development"

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra del .env


def get_cors_origins(cors_string: str) -> List[str]:
    """
    Parsea la configuracion de CORS.
    Acepta "*" para todos los origenes o una lista JSON.
    """
    if cors_string == "*":
        return ["*"]
    try:
        return json.loads(cors_string)
    except json.JSONDecodeError:
        # Si no es JSON valido, retornar como lista simple
        return [origin.strip() for origin in cors_string.split(",")]


def validate_settings(config: Settings) -> List[str]:
    """
    Valida la configuracion critica.

    Lanza ValueError para valores que impiden funcionar y retorna
    una lista de advertencias para los que solo degradan el servicio.
    """
    if not 0 < config.PORT <= 65535:
        raise ValueError("PORT debe estar entre 1 y 65535")
    if not config.HUBSPOT_API_BASE_URL.startswith("http"):
        raise ValueError("HUBSPOT_API_BASE_URL debe ser una URL valida")
    if not 0 < config.HUBSPOT_PAGE_SIZE <= 100:
        raise ValueError("HUBSPOT_PAGE_SIZE debe estar entre 1 y 100")
    if config.HUBSPOT_PAGE_DELAY_MS < 0:
        raise ValueError("HUBSPOT_PAGE_DELAY_MS no puede ser negativo")
    if config.SYNC_MAX_ERRORS <= 0:
        raise ValueError("SYNC_MAX_ERRORS debe ser positivo")

    warnings = []
    if not config.HUBSPOT_ACCESS_TOKEN:
        warnings.append("HUBSPOT_ACCESS_TOKEN no configurado - la sincronizacion fallara")
    return warnings


# Instancia global de configuracion
settings = Settings()
