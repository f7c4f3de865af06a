"""
Servicios de aplicacion.

Contiene la logica de negocio reutilizable que no pertenece
a un caso de uso especifico.
"""
from crm_etl.application.services.record_transformer import RecordTransformer, CompanyLookup
from crm_etl.application.services.sync_status_store import SyncStatusStore

__all__ = [
    "RecordTransformer",
    "CompanyLookup",
    "SyncStatusStore",
]
