"""
Dependencias para inyección de repositorios.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from crm_etl.infrastructure.database.session import get_db
from crm_etl.infrastructure.repositories.company_repository import CompanyRepository
from crm_etl.infrastructure.repositories.contact_repository import ContactRepository


async def get_company_repository(
    session: AsyncSession = Depends(get_db)
) -> CompanyRepository:
    """
    Dependencia para obtener el repositorio de empresas.

    Args:
        session: Sesión de base de datos

    Returns:
        CompanyRepository: Instancia del repositorio de empresas
    """
    return CompanyRepository(session)


async def get_contact_repository(
    session: AsyncSession = Depends(get_db)
) -> ContactRepository:
    return ContactRepository(session)
