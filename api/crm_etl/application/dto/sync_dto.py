"""
DTOs del pipeline ETL (corrida, estado, salud e historial).
"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from crm_etl.shared.constants.sync_constants import SyncState


class SyncSummaryDTO(BaseModel):
    """Resultado de POST /etl/sync-crm."""

    message: str = "CRM data synced successfully"
    contacts_synced: int
    companies_synced: int
    synced_at: datetime


class SyncStatusDTO(BaseModel):
    """Snapshot del estado de la corrida actual o de la ultima."""

    status: SyncState
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    companies_processed: int = 0
    contacts_processed: int = 0
    contacts_skipped: int = 0
    unresolved_company_refs: int = 0
    errors: List[str] = Field(default_factory=list)
    errors_truncated: int = 0
    last_error: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)


class SyncCountsDTO(BaseModel):
    contact_count: int
    company_count: int


class SyncHealthDTO(BaseModel):
    is_running: bool
    last_sync_info: Optional[SyncCountsDTO] = None


class SyncRunDTO(BaseModel):
    """Registro historico de una corrida."""

    id: int
    status: SyncState
    started_at: Optional[datetime]
    completed_at: Optional[datetime]
    companies_processed: int
    contacts_processed: int
    contacts_skipped: int
    error_count: int
    last_error: Optional[str] = None

    class Config:
        from_attributes = True
