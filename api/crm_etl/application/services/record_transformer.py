"""
Normalizacion de registros crudos de HubSpot al esquema canonico.

Asimetria intencional:
- Una empresa incompleta se completa con valores por defecto.
- Un contacto sin email se descarta (devuelve None).
"""
from typing import Awaitable, Callable, Optional

from loguru import logger

from crm_etl.domain.entities.company import Company, CompanyData
from crm_etl.domain.entities.contact import ContactData
from crm_etl.infrastructure.external.hubspot.types import HubSpotRecord
from crm_etl.shared.constants.sync_constants import (
    DEFAULT_COMPANY_DOMAIN,
    DEFAULT_COMPANY_NAME,
)
from crm_etl.shared.utils.text_utils import clean_optional, clean_string


CompanyLookup = Callable[[str], Awaitable[Optional[Company]]]


class RecordTransformer:
    """Transforma HubSpotRecord en CompanyData / ContactData."""

    def transform_company(self, record: HubSpotRecord) -> CompanyData:
        return CompanyData(
            external_id=record.external_id,
            name=clean_string(record.get("name")) or DEFAULT_COMPANY_NAME,
            domain=clean_string(record.get("domain")) or DEFAULT_COMPANY_DOMAIN,
        )

    async def transform_contact(
        self,
        record: HubSpotRecord,
        company_lookup: Optional[CompanyLookup] = None,
    ) -> Optional[ContactData]:
        """
        Normaliza un contacto.

        Args:
            record: Registro crudo de HubSpot
            company_lookup: Busca la empresa local por su ID de HubSpot

        Returns:
            Optional[ContactData]: None si el contacto no tiene email
        """
        email = clean_string(record.get("email"))
        if not email:
            return None

        company_external_id = clean_optional(record.get("associatedcompanyid"))
        company_id: Optional[str] = None
        if company_external_id and company_lookup is not None:
            company_id = await self._resolve_company(record.external_id, company_external_id, company_lookup)

        return ContactData(
            external_id=record.external_id,
            email=email,
            firstname=clean_optional(record.get("firstname")),
            lastname=clean_optional(record.get("lastname")),
            company_id=company_id,
            company_external_id=company_external_id,
        )

    @staticmethod
    async def _resolve_company(
        contact_external_id: str,
        company_external_id: str,
        company_lookup: CompanyLookup,
    ) -> Optional[str]:
        # Una referencia que no resuelve no es un error del registro
        try:
            company = await company_lookup(company_external_id)
        except Exception as e:
            logger.debug(
                f"No se pudo resolver la empresa {company_external_id} "
                f"del contacto {contact_external_id}: {e}"
            )
            return None

        if company is None:
            logger.debug(
                f"Empresa {company_external_id} no encontrada para el contacto {contact_external_id}"
            )
            return None
        return company.id
