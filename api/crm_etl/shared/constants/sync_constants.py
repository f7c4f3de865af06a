"""
Constantes del pipeline de sincronizacion CRM.
"""
from enum import Enum


class SyncState(str, Enum):
    """
    Estados de una corrida de sincronizacion.

    Transiciones validas:
        IDLE | COMPLETED | FAILED -> RUNNING -> COMPLETED | FAILED
    """
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class HubSpotResource(str, Enum):
    """Objetos CRM v3 que se sincronizan."""
    COMPANIES = "companies"
    CONTACTS = "contacts"


# Propiedades pedidas a HubSpot por recurso
COMPANY_PROPERTIES = ["name", "domain"]
CONTACT_PROPERTIES = ["firstname", "lastname", "email", "associatedcompanyid"]

# Valores por defecto para empresas incompletas (una empresa nunca se descarta)
DEFAULT_COMPANY_NAME = "Unknown Company"
DEFAULT_COMPANY_DOMAIN = "unknown.com"

# Frecuencia de logs de progreso
COMPANY_PROGRESS_EVERY = 10
CONTACT_PROGRESS_EVERY = 50
