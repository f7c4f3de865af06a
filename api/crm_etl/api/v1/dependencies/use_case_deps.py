"""
Dependencias para inyeccion de casos de uso.
"""
from typing import Optional

from fastapi import Depends

from crm_etl.application.use_cases.company_use_cases import CompanyUseCases
from crm_etl.application.use_cases.contact_use_cases import ContactUseCases
from crm_etl.application.use_cases.crm_sync_use_cases import CrmSyncUseCases
from crm_etl.core.config import settings
from crm_etl.domain.repositories.crm_repositories import ICompanyRepository, IContactRepository
from crm_etl.api.v1.dependencies.repository_deps import (
    get_company_repository,
    get_contact_repository,
)
from crm_etl.infrastructure.database.session import AsyncSessionLocal
from crm_etl.infrastructure.external.hubspot.hubspot_client import HubSpotClient


# Instancia unica por proceso: guarda el estado de la corrida ETL
_crm_sync_use_cases: Optional[CrmSyncUseCases] = None


def build_crm_sync_use_cases() -> CrmSyncUseCases:
    """Construye el orquestador ETL a partir de la configuracion."""
    return CrmSyncUseCases(
        AsyncSessionLocal,
        HubSpotClient.from_settings(settings),
        page_size=settings.HUBSPOT_PAGE_SIZE,
        max_errors=settings.SYNC_MAX_ERRORS,
    )


def get_crm_sync_use_cases() -> CrmSyncUseCases:
    """
    Dependencia para obtener el orquestador ETL.

    Siempre devuelve la misma instancia; si se crearan varias, cada una
    tendria su propio estado y dos corridas podrian solaparse.

    Returns:
        CrmSyncUseCases: Orquestador compartido
    """
    global _crm_sync_use_cases
    if _crm_sync_use_cases is None:
        _crm_sync_use_cases = build_crm_sync_use_cases()
    return _crm_sync_use_cases


async def get_company_use_cases(
    company_repository: ICompanyRepository = Depends(get_company_repository)
) -> CompanyUseCases:
    """
    Dependencia para obtener los casos de uso de empresas.

    Args:
        company_repository: Repositorio de empresas

    Returns:
        CompanyUseCases: Instancia de casos de uso de empresas
    """
    return CompanyUseCases(company_repository)


async def get_contact_use_cases(
    contact_repository: IContactRepository = Depends(get_contact_repository),
    company_repository: ICompanyRepository = Depends(get_company_repository),
) -> ContactUseCases:
    return ContactUseCases(contact_repository, company_repository)
