"""
Orquestador de la sincronizacion HubSpot -> base local.

Flujo de una corrida:
    health check -> fase empresas -> fase contactos -> cierre

- Las empresas se confirman antes de empezar con los contactos, asi
  associatedcompanyid puede resolverse contra la base local.
- Cada registro se confirma por separado: un fallo se revierte, queda
  anotado en el estado y la fase sigue con el siguiente.
- Un fallo fuera del manejo por registro aborta la corrida.
"""
import asyncio
from contextlib import aclosing
from typing import Callable, List, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from crm_etl.application.services.record_transformer import RecordTransformer
from crm_etl.application.services.sync_status_store import SyncStatusStore
from crm_etl.domain.entities.sync_status import (
    SyncCounts,
    SyncHealth,
    SyncRun,
    SyncStatus,
    SyncSummary,
)
from crm_etl.infrastructure.external.hubspot.hubspot_client import HubSpotClient
from crm_etl.infrastructure.repositories.company_repository import CompanyRepository
from crm_etl.infrastructure.repositories.contact_repository import ContactRepository
from crm_etl.infrastructure.repositories.sync_run_repository import SyncRunRepository
from crm_etl.shared.constants.sync_constants import (
    COMPANY_PROGRESS_EVERY,
    COMPANY_PROPERTIES,
    CONTACT_PROGRESS_EVERY,
    CONTACT_PROPERTIES,
    HubSpotResource,
    SyncState,
)
from crm_etl.shared.exceptions.sync import (
    FatalPipelineError,
    SyncConflictError,
    TransientRecordError,
    UpstreamUnavailableError,
)
from crm_etl.shared.utils.datetime_utils import DateTimeUtils
from crm_etl.shared.utils.text_utils import format_error


SessionFactory = Callable[[], AsyncSession]


class CrmSyncUseCases:
    """
    Casos de uso del pipeline ETL.

    Una sola instancia por proceso: es la duena del estado de la corrida.
    """

    def __init__(
        self,
        session_factory: SessionFactory,
        client: HubSpotClient,
        *,
        transformer: Optional[RecordTransformer] = None,
        status_store: Optional[SyncStatusStore] = None,
        page_size: int = 100,
        max_errors: int = 1000,
    ):
        """
        Args:
            session_factory: Crea una AsyncSession por corrida / consulta
            client: Cliente de HubSpot
            transformer: Normalizador de registros
            status_store: Estado compartido de la corrida
            page_size: Registros por pagina pedidos a HubSpot
            max_errors: Tope de mensajes de error guardados por corrida
        """
        self._session_factory = session_factory
        self._client = client
        self._transformer = transformer or RecordTransformer()
        self._status = status_store or SyncStatusStore(max_errors=max_errors)
        self._page_size = page_size

    async def start_sync(self) -> SyncSummary:
        """
        Ejecuta una corrida completa.

        Raises:
            SyncConflictError: Ya hay una corrida en curso
            UpstreamUnavailableError: HubSpot no responde al health check
            FatalPipelineError: La corrida se aborto
        """
        if not self._status.try_begin(DateTimeUtils.now_utc()):
            logger.warning("Se pidio una sincronizacion ETL mientras otra esta en curso")
            raise SyncConflictError()

        logger.info("Iniciando sincronizacion ETL HubSpot -> base local")

        try:
            healthy = await self._client.health_check()
            if not healthy:
                await self._fail("HubSpot API is not accessible")
                raise UpstreamUnavailableError()

            async with self._session_factory() as session:
                companies_repo = CompanyRepository(session)
                contacts_repo = ContactRepository(session)
                await self._sync_companies(session, companies_repo)
                await self._sync_contacts(session, companies_repo, contacts_repo)

        except UpstreamUnavailableError:
            raise
        except asyncio.CancelledError:
            # Una corrida cancelada no puede quedar en RUNNING
            logger.warning("Sincronizacion ETL cancelada")
            await self._fail("ETL sync cancelled")
            raise
        except Exception as e:
            logger.exception(f"Sincronizacion ETL abortada: {e}")
            await self._fail(f"ETL sync failed: {format_error(e)}")
            raise FatalPipelineError(e) from e

        final = self._status.finish(SyncState.COMPLETED, DateTimeUtils.now_utc())
        await self._record_run(final)

        logger.success(
            f"Sincronizacion ETL completada: {final.companies_processed} empresas, "
            f"{final.contacts_processed} contactos, {final.contacts_skipped} omitidos, "
            f"{len(final.errors) + final.errors_truncated} errores"
        )
        return SyncSummary(
            contacts_synced=final.contacts_processed,
            companies_synced=final.companies_processed,
            synced_at=final.completed_at,
        )

    def get_status(self) -> SyncStatus:
        return self._status.get_status()

    async def get_health(self) -> SyncHealth:
        return SyncHealth(
            is_running=self._status.get_status().is_running,
            last_sync_info=await self.get_last_sync_info(),
        )

    async def get_last_sync_info(self) -> Optional[SyncCounts]:
        """Totales actuales en la base local; None si no se pudieron leer."""
        try:
            async with self._session_factory() as session:
                return SyncCounts(
                    contact_count=await ContactRepository(session).count(),
                    company_count=await CompanyRepository(session).count(),
                )
        except Exception as e:
            logger.error(f"No se pudo obtener la informacion de la ultima sincronizacion: {e}")
            return None

    async def list_runs(self, limit: int = 20) -> List[SyncRun]:
        async with self._session_factory() as session:
            return await SyncRunRepository(session).get_recent(limit)

    async def _sync_companies(self, session: AsyncSession, companies_repo: CompanyRepository) -> None:
        logger.info("Sincronizando empresas...")

        pages = self._client.iter_pages(
            HubSpotResource.COMPANIES.value,
            page_size=self._page_size,
            properties=COMPANY_PROPERTIES,
        )
        async with aclosing(pages):
            async for page in pages:
                for record in page:
                    try:
                        data = self._transformer.transform_company(record)
                        await companies_repo.upsert_by_external_id(data)
                        await session.commit()
                    except Exception as e:
                        await session.rollback()
                        self._record_failure(TransientRecordError("company", record.external_id, e))
                        continue

                    processed = self._status.increment("companies_processed")
                    if processed % COMPANY_PROGRESS_EVERY == 0:
                        logger.debug(f"Empresas procesadas: {processed}")

        logger.info(f"Fase de empresas terminada ({self._status.get_status().companies_processed})")

    async def _sync_contacts(
        self,
        session: AsyncSession,
        companies_repo: CompanyRepository,
        contacts_repo: ContactRepository,
    ) -> None:
        logger.info("Sincronizando contactos...")

        pages = self._client.iter_pages(
            HubSpotResource.CONTACTS.value,
            page_size=self._page_size,
            properties=CONTACT_PROPERTIES,
        )
        async with aclosing(pages):
            async for page in pages:
                for record in page:
                    try:
                        data = await self._transformer.transform_contact(
                            record, companies_repo.find_by_external_id
                        )
                        if data is None:
                            self._status.increment("contacts_skipped")
                            self._status.add_warning(f"Skipped contact {record.external_id}: missing email")
                            logger.warning(f"Contacto {record.external_id} omitido: sin email")
                            continue

                        await contacts_repo.upsert_by_external_id(data)
                        await session.commit()
                    except Exception as e:
                        await session.rollback()
                        self._record_failure(TransientRecordError("contact", record.external_id, e))
                        continue

                    if data.has_unresolved_company:
                        self._status.increment("unresolved_company_refs")
                        logger.debug(
                            f"Contacto {record.external_id} guardado sin empresa "
                            f"(referencia {data.company_external_id} sin resolver)"
                        )

                    processed = self._status.increment("contacts_processed")
                    if processed % CONTACT_PROGRESS_EVERY == 0:
                        logger.debug(f"Contactos procesados: {processed}")

        logger.info(f"Fase de contactos terminada ({self._status.get_status().contacts_processed})")

    def _record_failure(self, error: TransientRecordError) -> None:
        logger.error(str(error))
        self._status.add_error(str(error))

    async def _fail(self, message: str) -> None:
        self._status.add_error(message)
        final = self._status.finish(SyncState.FAILED, DateTimeUtils.now_utc())
        await self._record_run(final)

    async def _record_run(self, status: SyncStatus) -> None:
        # El historial no cambia el resultado de la corrida
        try:
            async with self._session_factory() as session:
                await SyncRunRepository(session).record_run(status)
                await session.commit()
        except Exception as e:
            logger.error(f"No se pudo guardar el historial de la corrida: {e}")
