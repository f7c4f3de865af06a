"""
Implementación del repositorio de empresas usando SQLAlchemy.
"""
import uuid
from typing import Any, Dict, List, Optional

from loguru import logger
from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crm_etl.domain.entities.company import Company, CompanyData
from crm_etl.domain.repositories.crm_repositories import ICompanyRepository
from crm_etl.infrastructure.database.models import CompanyModel, ContactModel
from crm_etl.shared.exceptions.domain import PersistenceError
from crm_etl.shared.utils.datetime_utils import DateTimeUtils


# Campo de la entidad -> columna del modelo
_UPDATABLE_COLUMNS = {
    "external_id": "hubspot_id",
    "name": "name",
    "domain": "domain",
}


class CompanyRepository(ICompanyRepository):
    """Implementación del repositorio de empresas con SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """
        Inicializa el repositorio con una sesión de base de datos.

        Args:
            session: Sesión de SQLAlchemy
        """
        self.session = session

    async def get_all(self) -> List[Company]:
        result = await self.session.execute(
            select(CompanyModel).order_by(CompanyModel.created_at.desc())
        )
        return [self._to_entity(db_company) for db_company in result.scalars().all()]

    async def get_by_id(self, company_id: str) -> Optional[Company]:
        db_company = await self.session.get(CompanyModel, company_id)
        return self._to_entity(db_company) if db_company else None

    async def find_by_external_id(self, external_id: str) -> Optional[Company]:
        db_company = await self._get_model_by_external_id(external_id)
        return self._to_entity(db_company) if db_company else None

    async def insert(self, data: CompanyData) -> Company:
        db_company = CompanyModel(
            id=str(uuid.uuid4()),
            hubspot_id=data.external_id,
            name=data.name,
            domain=data.domain,
            created_at=DateTimeUtils.now_utc(),
        )
        self.session.add(db_company)
        await self._flush()

        logger.info(f"Empresa creada con id: {db_company.id} (hubspot_id={data.external_id})")
        return self._to_entity(db_company)

    async def update(self, company_id: str, fields: Dict[str, Any]) -> Optional[Company]:
        db_company = await self.session.get(CompanyModel, company_id)
        if db_company is None:
            return None

        for key, value in fields.items():
            column = _UPDATABLE_COLUMNS.get(key)
            if column is None:
                raise ValueError(f"Campo no actualizable en Company: {key}")
            setattr(db_company, column, value)

        await self._flush()
        logger.info(f"Empresa actualizada con id: {company_id}")
        return self._to_entity(db_company)

    async def delete(self, company_id: str) -> bool:
        db_company = await self.session.get(CompanyModel, company_id)
        if db_company is None:
            return False

        # Los contactos quedan sin empresa en vez de apuntar a un id inexistente
        await self.session.execute(
            update(ContactModel)
            .where(ContactModel.company_id == company_id)
            .values(company_id=None)
        )
        await self.session.delete(db_company)
        await self._flush()

        logger.info(f"Empresa eliminada con id: {company_id}")
        return True

    async def upsert_by_external_id(self, data: CompanyData) -> Company:
        db_company = await self._get_model_by_external_id(data.external_id)
        if db_company is None:
            return await self.insert(data)

        db_company.name = data.name
        db_company.domain = data.domain
        await self._flush()

        logger.debug(f"Empresa {db_company.id} actualizada desde hubspot_id={data.external_id}")
        return self._to_entity(db_company)

    async def count(self) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(CompanyModel)
        )
        return int(result.scalar_one())

    async def _get_model_by_external_id(self, external_id: str) -> Optional[CompanyModel]:
        result = await self.session.execute(
            select(CompanyModel).where(CompanyModel.hubspot_id == external_id)
        )
        return result.scalar_one_or_none()

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise PersistenceError("Company", str(e.orig)) from e

    @staticmethod
    def _to_entity(db_company: CompanyModel) -> Company:
        """Convierte un modelo de base de datos a entidad de dominio."""
        return Company(
            id=db_company.id,
            external_id=db_company.hubspot_id,
            name=db_company.name,
            domain=db_company.domain,
            created_at=DateTimeUtils.ensure_utc(db_company.created_at) if db_company.created_at else None,
        )
