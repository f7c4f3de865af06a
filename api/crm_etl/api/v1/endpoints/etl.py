"""
Endpoints del pipeline ETL HubSpot -> base local.
"""
from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from loguru import logger

from crm_etl.application.dto.sync_dto import (
    SyncCountsDTO,
    SyncHealthDTO,
    SyncRunDTO,
    SyncStatusDTO,
    SyncSummaryDTO,
)
from crm_etl.application.use_cases.crm_sync_use_cases import CrmSyncUseCases
from crm_etl.api.v1.dependencies.use_case_deps import get_crm_sync_use_cases


router = APIRouter(prefix="/etl", tags=["ETL"])


@router.post(
    "/sync-crm",
    response_model=SyncSummaryDTO,
    status_code=status.HTTP_200_OK,
    summary="Sincronizar empresas y contactos desde HubSpot"
)
async def sync_crm(
    use_cases: CrmSyncUseCases = Depends(get_crm_sync_use_cases)
) -> SyncSummaryDTO:
    """
    Ejecuta una corrida completa y responde al terminar.

    - 409 si ya hay una corrida en curso
    - 502 si HubSpot no responde al health check
    - 500 si la corrida se aborta
    """
    logger.info("POST /etl/sync-crm - iniciando sincronizacion CRM")
    summary = await use_cases.start_sync()
    return SyncSummaryDTO(
        contacts_synced=summary.contacts_synced,
        companies_synced=summary.companies_synced,
        synced_at=summary.synced_at,
    )


@router.get(
    "/status",
    response_model=SyncStatusDTO,
    summary="Estado de la corrida actual o de la ultima"
)
async def get_sync_status(
    use_cases: CrmSyncUseCases = Depends(get_crm_sync_use_cases)
) -> SyncStatusDTO:
    snapshot = asdict(use_cases.get_status())
    snapshot["status"] = snapshot.pop("state")
    return SyncStatusDTO(**snapshot)


@router.get(
    "/info",
    response_model=Optional[SyncCountsDTO],
    summary="Totales de empresas y contactos en la base local"
)
async def get_sync_info(
    use_cases: CrmSyncUseCases = Depends(get_crm_sync_use_cases)
) -> Optional[SyncCountsDTO]:
    """Devuelve null si los totales no se pudieron leer."""
    info = await use_cases.get_last_sync_info()
    if info is None:
        return None
    return SyncCountsDTO(contact_count=info.contact_count, company_count=info.company_count)


@router.get(
    "/health",
    response_model=SyncHealthDTO,
    summary="Salud del servicio ETL"
)
async def get_etl_health(
    use_cases: CrmSyncUseCases = Depends(get_crm_sync_use_cases)
) -> SyncHealthDTO:
    health = await use_cases.get_health()
    info = health.last_sync_info
    return SyncHealthDTO(
        is_running=health.is_running,
        last_sync_info=SyncCountsDTO(
            contact_count=info.contact_count,
            company_count=info.company_count,
        ) if info else None,
    )


@router.get(
    "/runs",
    response_model=List[SyncRunDTO],
    summary="Historial de corridas"
)
async def list_sync_runs(
    limit: int = Query(default=20, ge=1, le=200, description="Cantidad maxima de corridas"),
    use_cases: CrmSyncUseCases = Depends(get_crm_sync_use_cases)
) -> List[SyncRunDTO]:
    runs = await use_cases.list_runs(limit)
    return [SyncRunDTO.model_validate(run) for run in runs]
