"""
Casos de uso relacionados con contactos.
"""
from typing import Any, Dict, List, Optional

from loguru import logger

from crm_etl.domain.repositories.crm_repositories import ICompanyRepository, IContactRepository
from crm_etl.domain.entities.contact import Contact, ContactData
from crm_etl.application.dto.contact_dto import (
    ContactCreateDTO,
    ContactUpdateDTO,
    ContactResponseDTO,
)
from crm_etl.shared.exceptions.domain import (
    EntityNotFoundException,
    EntityAlreadyExistsException,
    ValidationException,
)
from crm_etl.shared.utils.text_utils import is_valid_email, is_valid_uuid


class ContactUseCases:
    """
    Casos de uso para operaciones con contactos.

    Valida formato de email/IDs, unicidad de hubspot_id y email, y que
    la empresa referenciada exista.
    """

    def __init__(self, contact_repository: IContactRepository, company_repository: ICompanyRepository):
        self.contact_repository = contact_repository
        self.company_repository = company_repository

    async def list_contacts(self) -> List[ContactResponseDTO]:
        contacts = await self.contact_repository.get_all()
        return [self._to_response_dto(contact) for contact in contacts]

    async def get_contact(self, contact_id: str) -> ContactResponseDTO:
        contact = await self._get_existing(contact_id)
        return self._to_response_dto(contact)

    async def list_by_company(self, company_id: str) -> List[ContactResponseDTO]:
        """
        Lista los contactos de una empresa.

        Raises:
            ValidationException: Si el ID de empresa no es un UUID
            EntityNotFoundException: Si la empresa no existe
        """
        await self._ensure_company_exists(company_id)
        contacts = await self.contact_repository.find_by_company_id(company_id)
        return [self._to_response_dto(contact) for contact in contacts]

    async def create_contact(self, dto: ContactCreateDTO) -> ContactResponseDTO:
        """
        Crea un nuevo contacto.

        Raises:
            ValidationException: Email o company_id con formato invalido
            EntityAlreadyExistsException: hubspot_id o email repetidos
            EntityNotFoundException: company_id no existe
        """
        email = dto.email.strip()
        self._validate_email(email)

        if await self.contact_repository.find_by_external_id(dto.hubspot_id):
            raise EntityAlreadyExistsException("Contact", "hubspot_id", dto.hubspot_id)
        if await self.contact_repository.find_by_email(email):
            raise EntityAlreadyExistsException("Contact", "email", email)
        if dto.company_id:
            await self._ensure_company_exists(dto.company_id)

        logger.info(f"Creando contacto con hubspot_id: {dto.hubspot_id}")
        contact = await self.contact_repository.insert(
            ContactData(
                external_id=dto.hubspot_id,
                email=email,
                firstname=dto.firstname,
                lastname=dto.lastname,
                company_id=dto.company_id,
            )
        )
        return self._to_response_dto(contact)

    async def update_contact(self, contact_id: str, dto: ContactUpdateDTO) -> ContactResponseDTO:
        await self._get_existing(contact_id)

        fields: Dict[str, Any] = dto.model_dump(exclude_unset=True)

        if fields.get("email") is not None:
            fields["email"] = fields["email"].strip()
            self._validate_email(fields["email"])
            other = await self.contact_repository.find_by_email(fields["email"])
            if other and other.id != contact_id:
                raise EntityAlreadyExistsException("Contact", "email", fields["email"])
        else:
            # email es NOT NULL
            fields.pop("email", None)

        if fields.get("hubspot_id") is not None:
            other = await self.contact_repository.find_by_external_id(fields["hubspot_id"])
            if other and other.id != contact_id:
                raise EntityAlreadyExistsException("Contact", "hubspot_id", fields["hubspot_id"])
            fields["external_id"] = fields.pop("hubspot_id")
        else:
            fields.pop("hubspot_id", None)

        company_id: Optional[str] = fields.get("company_id")
        if company_id:
            await self._ensure_company_exists(company_id)

        updated = await self.contact_repository.update(contact_id, fields)
        if updated is None:
            raise EntityNotFoundException("Contact", contact_id)
        return self._to_response_dto(updated)

    async def delete_contact(self, contact_id: str) -> None:
        await self._get_existing(contact_id)
        await self.contact_repository.delete(contact_id)

    async def count_contacts(self) -> int:
        return await self.contact_repository.count()

    async def _get_existing(self, contact_id: str) -> Contact:
        if not is_valid_uuid(contact_id):
            raise ValidationException("Invalid contact ID format", field="id")

        contact = await self.contact_repository.get_by_id(contact_id)
        if contact is None:
            raise EntityNotFoundException("Contact", contact_id)
        return contact

    async def _ensure_company_exists(self, company_id: str) -> None:
        if not is_valid_uuid(company_id):
            raise ValidationException("Invalid company ID format", field="company_id")
        if await self.company_repository.get_by_id(company_id) is None:
            raise EntityNotFoundException("Company", company_id)

    @staticmethod
    def _validate_email(email: str) -> None:
        if not is_valid_email(email):
            raise ValidationException("Invalid email format", field="email")

    @staticmethod
    def _to_response_dto(contact: Contact) -> ContactResponseDTO:
        return ContactResponseDTO(
            id=contact.id,
            hubspot_id=contact.external_id,
            email=contact.email,
            firstname=contact.firstname,
            lastname=contact.lastname,
            company_id=contact.company_id,
            created_at=contact.created_at,
        )
