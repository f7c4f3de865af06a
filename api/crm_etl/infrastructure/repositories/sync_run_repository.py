"""
Repositorio del historial de corridas de sincronizacion (tabla sync_runs).
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from crm_etl.domain.entities.sync_status import SyncRun, SyncStatus
from crm_etl.infrastructure.database.models import SyncRunModel
from crm_etl.shared.constants.sync_constants import SyncState
from crm_etl.shared.utils.datetime_utils import DateTimeUtils


class SyncRunRepository:
    """
    Gestiona la tabla sync_runs.

    El caller controla el commit.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def record_run(self, status: SyncStatus) -> SyncRun:
        """Guarda el snapshot final de una corrida."""
        db_run = SyncRunModel(
            status=status.state.value,
            started_at=status.started_at,
            completed_at=status.completed_at,
            companies_processed=status.companies_processed,
            contacts_processed=status.contacts_processed,
            contacts_skipped=status.contacts_skipped,
            error_count=len(status.errors) + status.errors_truncated,
            # Truncado para no guardar trazas enormes
            last_error=status.last_error[:2000] if status.last_error else None,
        )
        self.db.add(db_run)
        await self.db.flush()
        return self._to_entity(db_run)

    async def get_recent(self, limit: int = 20) -> List[SyncRun]:
        """Corridas mas recientes primero."""
        result = await self.db.execute(
            select(SyncRunModel).order_by(SyncRunModel.id.desc()).limit(limit)
        )
        return [self._to_entity(r) for r in result.scalars().all()]

    @staticmethod
    def _to_entity(db_run: SyncRunModel) -> SyncRun:
        return SyncRun(
            id=db_run.id,
            status=SyncState(db_run.status),
            started_at=DateTimeUtils.ensure_utc(db_run.started_at) if db_run.started_at else None,
            completed_at=DateTimeUtils.ensure_utc(db_run.completed_at) if db_run.completed_at else None,
            companies_processed=db_run.companies_processed,
            contacts_processed=db_run.contacts_processed,
            contacts_skipped=db_run.contacts_skipped,
            error_count=db_run.error_count,
            last_error=db_run.last_error,
        )
