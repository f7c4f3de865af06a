"""
Errores del pipeline de sincronizacion HubSpot -> base local.

Nivel corrida (se propagan al caller y quedan reflejados en el estado):
- SyncConflictError: ya hay una corrida en curso.
- UpstreamUnavailableError: el health check previo fallo.
- FatalPipelineError: fallo fuera del manejo por registro.

Nivel registro (nunca salen del loop de la fase):
- TransientRecordError
"""
from typing import Optional

from crm_etl.shared.exceptions.base import AppException


class SyncConflictError(AppException):
    """Se pidio una corrida mientras otra esta en estado running."""

    def __init__(self):
        super().__init__(
            message="La sincronizacion ETL ya esta en curso",
            status_code=409,
            error_code="SYNC_ALREADY_RUNNING"
        )


class UpstreamUnavailableError(AppException):
    """La API de HubSpot no respondio al health check previo."""

    def __init__(self, message: str = "La API de HubSpot no esta accesible"):
        super().__init__(
            message=message,
            status_code=502,
            error_code="UPSTREAM_UNAVAILABLE"
        )


class FatalPipelineError(AppException):
    """Fallo inesperado que aborta las fases restantes de la corrida."""

    def __init__(self, cause: Optional[BaseException] = None):
        details = {"cause": str(cause)} if cause else None
        super().__init__(
            message="La sincronizacion ETL fallo por un error inesperado",
            status_code=500,
            error_code="SYNC_FAILED",
            details=details
        )


class TransientRecordError(Exception):
    """Fallo al transformar o persistir un registro individual."""

    def __init__(self, entity_name: str, external_id: str, cause: BaseException):
        self.entity_name = entity_name
        self.external_id = external_id
        self.cause = cause
        super().__init__(f"Failed to sync {entity_name} {external_id}: {cause}")
