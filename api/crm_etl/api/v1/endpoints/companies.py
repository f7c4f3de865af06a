"""
Endpoints para operaciones con empresas.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from crm_etl.application.use_cases.company_use_cases import CompanyUseCases
from crm_etl.application.dto.company_dto import (
    CompanyCreateDTO,
    CompanyUpdateDTO,
    CompanyResponseDTO,
    CompanyStatsDTO,
)
from crm_etl.api.v1.dependencies.use_case_deps import get_company_use_cases


router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get(
    "/stats",
    response_model=CompanyStatsDTO,
    summary="Total de empresas"
)
async def get_company_stats(
    use_cases: CompanyUseCases = Depends(get_company_use_cases)
) -> CompanyStatsDTO:
    return CompanyStatsDTO(total=await use_cases.count_companies())


@router.get(
    "/",
    response_model=List[CompanyResponseDTO],
    summary="Listar todas las empresas"
)
async def list_companies(
    use_cases: CompanyUseCases = Depends(get_company_use_cases)
) -> List[CompanyResponseDTO]:
    """Lista las empresas, las mas recientes primero."""
    return await use_cases.list_companies()


@router.post(
    "/",
    response_model=CompanyResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una empresa"
)
async def create_company(
    dto: CompanyCreateDTO,
    use_cases: CompanyUseCases = Depends(get_company_use_cases)
) -> CompanyResponseDTO:
    """
    Crea una empresa.

    Args:
        dto: Datos de la empresa
        use_cases: Casos de uso de empresas (inyectado)

    Returns:
        CompanyResponseDTO: Empresa creada
    """
    return await use_cases.create_company(dto)


@router.get(
    "/{company_id}",
    response_model=CompanyResponseDTO,
    summary="Obtener una empresa por ID"
)
async def get_company(
    company_id: str,
    use_cases: CompanyUseCases = Depends(get_company_use_cases)
) -> CompanyResponseDTO:
    return await use_cases.get_company(company_id)


@router.patch(
    "/{company_id}",
    response_model=CompanyResponseDTO,
    summary="Actualizar una empresa"
)
async def update_company(
    company_id: str,
    dto: CompanyUpdateDTO,
    use_cases: CompanyUseCases = Depends(get_company_use_cases)
) -> CompanyResponseDTO:
    return await use_cases.update_company(company_id, dto)


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar una empresa"
)
async def delete_company(
    company_id: str,
    use_cases: CompanyUseCases = Depends(get_company_use_cases)
) -> None:
    await use_cases.delete_company(company_id)
