"""
Implementación del repositorio de contactos usando SQLAlchemy.
"""
import uuid
from typing import Any, Dict, List, Optional

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crm_etl.domain.entities.contact import Contact, ContactData
from crm_etl.domain.repositories.crm_repositories import IContactRepository
from crm_etl.infrastructure.database.models import ContactModel
from crm_etl.shared.exceptions.domain import PersistenceError
from crm_etl.shared.utils.datetime_utils import DateTimeUtils


_UPDATABLE_COLUMNS = {
    "external_id": "hubspot_id",
    "email": "email",
    "firstname": "firstname",
    "lastname": "lastname",
    "company_id": "company_id",
}


class ContactRepository(IContactRepository):
    """Repositorio para gestionar contactos en la base de datos."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[Contact]:
        result = await self.session.execute(
            select(ContactModel).order_by(ContactModel.created_at.desc())
        )
        return [self._to_entity(db_contact) for db_contact in result.scalars().all()]

    async def get_by_id(self, contact_id: str) -> Optional[Contact]:
        db_contact = await self.session.get(ContactModel, contact_id)
        return self._to_entity(db_contact) if db_contact else None

    async def find_by_external_id(self, external_id: str) -> Optional[Contact]:
        result = await self.session.execute(
            select(ContactModel).where(ContactModel.hubspot_id == external_id)
        )
        db_contact = result.scalar_one_or_none()
        return self._to_entity(db_contact) if db_contact else None

    async def find_by_email(self, email: str) -> Optional[Contact]:
        result = await self.session.execute(
            select(ContactModel).where(ContactModel.email == email)
        )
        db_contact = result.scalar_one_or_none()
        return self._to_entity(db_contact) if db_contact else None

    async def find_by_company_id(self, company_id: str) -> List[Contact]:
        result = await self.session.execute(
            select(ContactModel)
            .where(ContactModel.company_id == company_id)
            .order_by(ContactModel.created_at.desc())
        )
        return [self._to_entity(db_contact) for db_contact in result.scalars().all()]

    async def insert(self, data: ContactData) -> Contact:
        db_contact = ContactModel(
            id=str(uuid.uuid4()),
            hubspot_id=data.external_id,
            firstname=data.firstname,
            lastname=data.lastname,
            email=data.email,
            company_id=data.company_id,
            created_at=DateTimeUtils.now_utc(),
        )
        self.session.add(db_contact)
        await self._flush()

        logger.info(f"Contacto creado con id: {db_contact.id} (hubspot_id={data.external_id})")
        return self._to_entity(db_contact)

    async def update(self, contact_id: str, fields: Dict[str, Any]) -> Optional[Contact]:
        db_contact = await self.session.get(ContactModel, contact_id)
        if db_contact is None:
            return None

        for key, value in fields.items():
            column = _UPDATABLE_COLUMNS.get(key)
            if column is None:
                raise ValueError(f"Campo no actualizable en Contact: {key}")
            setattr(db_contact, column, value)

        await self._flush()
        logger.info(f"Contacto actualizado con id: {contact_id}")
        return self._to_entity(db_contact)

    async def delete(self, contact_id: str) -> bool:
        db_contact = await self.session.get(ContactModel, contact_id)
        if db_contact is None:
            return False

        await self.session.delete(db_contact)
        await self._flush()
        logger.info(f"Contacto eliminado con id: {contact_id}")
        return True

    async def upsert_by_external_id(self, data: ContactData) -> Contact:
        result = await self.session.execute(
            select(ContactModel).where(ContactModel.hubspot_id == data.external_id)
        )
        db_contact = result.scalar_one_or_none()
        if db_contact is None:
            return await self.insert(data)

        db_contact.email = data.email
        db_contact.firstname = data.firstname
        db_contact.lastname = data.lastname
        db_contact.company_id = data.company_id
        await self._flush()

        logger.debug(f"Contacto {db_contact.id} actualizado desde hubspot_id={data.external_id}")
        return self._to_entity(db_contact)

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(ContactModel)
        )
        return int(result.scalar_one())

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise PersistenceError("Contact", str(e.orig)) from e

    @staticmethod
    def _to_entity(db_contact: ContactModel) -> Contact:
        return Contact(
            id=db_contact.id,
            external_id=db_contact.hubspot_id,
            email=db_contact.email,
            firstname=db_contact.firstname,
            lastname=db_contact.lastname,
            company_id=db_contact.company_id,
            created_at=DateTimeUtils.ensure_utc(db_contact.created_at) if db_contact.created_at else None,
        )
