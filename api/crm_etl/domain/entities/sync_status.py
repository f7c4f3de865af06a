"""
Entidades del estado de sincronizacion.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from crm_etl.shared.constants.sync_constants import SyncState


@dataclass
class SyncStatus:
    """
    Snapshot de la corrida actual o de la ultima.

    Los contadores solo crecen durante una corrida; errors y warnings
    son append-only y se reemplazan completos al iniciar la siguiente.
    errors_truncated cuenta los errores que no entraron por el tope;
    last_error guarda siempre el ultimo, haya entrado o no.
    """

    state: SyncState = SyncState.IDLE
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    companies_processed: int = 0
    contacts_processed: int = 0
    contacts_skipped: int = 0
    unresolved_company_refs: int = 0
    errors: List[str] = field(default_factory=list)
    errors_truncated: int = 0
    last_error: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def is_running(self) -> bool:
        return self.state == SyncState.RUNNING


@dataclass(frozen=True)
class SyncCounts:
    """Totales en la base local."""

    contact_count: int
    company_count: int


@dataclass(frozen=True)
class SyncSummary:
    """Resultado de una corrida completada."""

    contacts_synced: int
    companies_synced: int
    synced_at: datetime


@dataclass(frozen=True)
class SyncHealth:
    is_running: bool
    last_sync_info: Optional[SyncCounts]


@dataclass(frozen=True)
class SyncRun:
    """Registro historico de una corrida finalizada."""

    id: Optional[int]
    status: SyncState
    started_at: Optional[datetime]
    completed_at: Optional[datetime]
    companies_processed: int
    contacts_processed: int
    contacts_skipped: int
    error_count: int
    last_error: Optional[str] = None
