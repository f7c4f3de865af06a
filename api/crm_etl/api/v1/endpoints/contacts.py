"""
Endpoints para operaciones con contactos.
"""
from typing import List
from fastapi import APIRouter, Depends, status

from crm_etl.application.use_cases.contact_use_cases import ContactUseCases
from crm_etl.application.dto.contact_dto import (
    ContactCreateDTO,
    ContactUpdateDTO,
    ContactResponseDTO,
    ContactStatsDTO,
)
from crm_etl.api.v1.dependencies.use_case_deps import get_contact_use_cases


router = APIRouter(prefix="/contacts", tags=["Contacts"])


@router.get(
    "/stats",
    response_model=ContactStatsDTO,
    summary="Total de contactos"
)
async def get_contact_stats(
    use_cases: ContactUseCases = Depends(get_contact_use_cases)
) -> ContactStatsDTO:
    return ContactStatsDTO(total=await use_cases.count_contacts())


@router.get(
    "/company/{company_id}",
    response_model=List[ContactResponseDTO],
    summary="Contactos de una empresa"
)
async def list_contacts_by_company(
    company_id: str,
    use_cases: ContactUseCases = Depends(get_contact_use_cases)
) -> List[ContactResponseDTO]:
    return await use_cases.list_by_company(company_id)


@router.get(
    "/",
    response_model=List[ContactResponseDTO],
    summary="Listar todos los contactos"
)
async def list_contacts(
    use_cases: ContactUseCases = Depends(get_contact_use_cases)
) -> List[ContactResponseDTO]:
    return await use_cases.list_contacts()


@router.post(
    "/",
    response_model=ContactResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Crear un contacto"
)
async def create_contact(
    dto: ContactCreateDTO,
    use_cases: ContactUseCases = Depends(get_contact_use_cases)
) -> ContactResponseDTO:
    """
    Crea un contacto.

    Valida formato de email, unicidad de hubspot_id y email, y que
    company_id exista si se envia.
    """
    return await use_cases.create_contact(dto)


@router.get(
    "/{contact_id}",
    response_model=ContactResponseDTO,
    summary="Obtener un contacto por ID"
)
async def get_contact(
    contact_id: str,
    use_cases: ContactUseCases = Depends(get_contact_use_cases)
) -> ContactResponseDTO:
    return await use_cases.get_contact(contact_id)


@router.patch(
    "/{contact_id}",
    response_model=ContactResponseDTO,
    summary="Actualizar un contacto"
)
async def update_contact(
    contact_id: str,
    dto: ContactUpdateDTO,
    use_cases: ContactUseCases = Depends(get_contact_use_cases)
) -> ContactResponseDTO:
    return await use_cases.update_contact(contact_id, dto)


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar un contacto"
)
async def delete_contact(
    contact_id: str,
    use_cases: ContactUseCases = Depends(get_contact_use_cases)
) -> None:
    await use_cases.delete_contact(contact_id)
