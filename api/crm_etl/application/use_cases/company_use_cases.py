"""
Casos de uso relacionados con empresas.
"""
from typing import List

from loguru import logger

from crm_etl.domain.repositories.crm_repositories import ICompanyRepository
from crm_etl.domain.entities.company import Company, CompanyData
from crm_etl.application.dto.company_dto import (
    CompanyCreateDTO,
    CompanyUpdateDTO,
    CompanyResponseDTO,
)
from crm_etl.shared.exceptions.domain import (
    EntityNotFoundException,
    EntityAlreadyExistsException,
    ValidationException,
)
from crm_etl.shared.utils.text_utils import is_valid_uuid


class CompanyUseCases:
    """
    Casos de uso para operaciones con empresas.
    Orquesta la lógica de aplicación sobre el repositorio.
    """

    def __init__(self, company_repository: ICompanyRepository):
        """
        Inicializa los casos de uso con sus dependencias.

        Args:
            company_repository: Repositorio de empresas
        """
        self.company_repository = company_repository

    async def list_companies(self) -> List[CompanyResponseDTO]:
        companies = await self.company_repository.get_all()
        return [self._to_response_dto(company) for company in companies]

    async def get_company(self, company_id: str) -> CompanyResponseDTO:
        """
        Obtiene una empresa por su ID local.

        Raises:
            ValidationException: Si el ID no es un UUID
            EntityNotFoundException: Si no se encuentra la empresa
        """
        company = await self._get_existing(company_id)
        return self._to_response_dto(company)

    async def create_company(self, dto: CompanyCreateDTO) -> CompanyResponseDTO:
        """
        Crea una nueva empresa.

        Raises:
            EntityAlreadyExistsException: Si ya existe una empresa con ese hubspot_id
        """
        existing = await self.company_repository.find_by_external_id(dto.hubspot_id)
        if existing:
            raise EntityAlreadyExistsException("Company", "hubspot_id", dto.hubspot_id)

        logger.info(f"Creando empresa con hubspot_id: {dto.hubspot_id}")
        company = await self.company_repository.insert(
            CompanyData(external_id=dto.hubspot_id, name=dto.name, domain=dto.domain)
        )
        return self._to_response_dto(company)

    async def update_company(self, company_id: str, dto: CompanyUpdateDTO) -> CompanyResponseDTO:
        """
        Actualiza parcialmente una empresa.

        Raises:
            EntityNotFoundException: Si no se encuentra la empresa
            EntityAlreadyExistsException: Si el nuevo hubspot_id ya es de otra empresa
        """
        await self._get_existing(company_id)

        fields = dto.model_dump(exclude_unset=True, exclude_none=True)
        if "hubspot_id" in fields:
            other = await self.company_repository.find_by_external_id(fields["hubspot_id"])
            if other and other.id != company_id:
                raise EntityAlreadyExistsException("Company", "hubspot_id", fields["hubspot_id"])
            fields["external_id"] = fields.pop("hubspot_id")

        updated = await self.company_repository.update(company_id, fields)
        if updated is None:
            raise EntityNotFoundException("Company", company_id)
        return self._to_response_dto(updated)

    async def delete_company(self, company_id: str) -> None:
        """Elimina una empresa; sus contactos quedan sin empresa."""
        await self._get_existing(company_id)
        await self.company_repository.delete(company_id)

    async def count_companies(self) -> int:
        return await self.company_repository.count()

    async def _get_existing(self, company_id: str) -> Company:
        if not is_valid_uuid(company_id):
            raise ValidationException("Invalid company ID format", field="id")

        company = await self.company_repository.get_by_id(company_id)
        if company is None:
            raise EntityNotFoundException("Company", company_id)
        return company

    @staticmethod
    def _to_response_dto(company: Company) -> CompanyResponseDTO:
        return CompanyResponseDTO(
            id=company.id,
            hubspot_id=company.external_id,
            name=company.name,
            domain=company.domain,
            created_at=company.created_at,
        )
