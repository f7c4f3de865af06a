"""
Interfaces de los repositorios de empresas y contactos.
Define el contrato que debe cumplir cualquier implementación.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from crm_etl.domain.entities.company import Company, CompanyData
from crm_etl.domain.entities.contact import Contact, ContactData


class ICompanyRepository(ABC):
    """Operaciones de persistencia para empresas."""

    @abstractmethod
    async def get_all(self) -> List[Company]:
        """Todas las empresas, las más recientes primero."""
        pass

    @abstractmethod
    async def get_by_id(self, company_id: str) -> Optional[Company]:
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: str) -> Optional[Company]:
        """
        Busca una empresa por su ID de HubSpot.

        Args:
            external_id: ID de HubSpot

        Returns:
            Optional[Company]: Empresa encontrada o None
        """
        pass

    @abstractmethod
    async def insert(self, data: CompanyData) -> Company:
        """
        Crea una empresa con un ID local nuevo y created_at actual.

        Raises:
            PersistenceError: Si se viola una restricción (hubspot_id duplicado)
        """
        pass

    @abstractmethod
    async def update(self, company_id: str, fields: Dict[str, Any]) -> Optional[Company]:
        """
        Actualiza parcialmente una empresa.

        Returns:
            Optional[Company]: Empresa actualizada o None si no existe
        """
        pass

    @abstractmethod
    async def delete(self, company_id: str) -> bool:
        pass

    @abstractmethod
    async def upsert_by_external_id(self, data: CompanyData) -> Company:
        """
        Inserta o actualiza según el ID de HubSpot.

        Si existe, sobrescribe los campos mutables y conserva id y created_at.
        Aplicar dos veces la misma entrada es idempotente.
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class IContactRepository(ABC):
    """Operaciones de persistencia para contactos."""

    @abstractmethod
    async def get_all(self) -> List[Contact]:
        pass

    @abstractmethod
    async def get_by_id(self, contact_id: str) -> Optional[Contact]:
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: str) -> Optional[Contact]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Contact]:
        pass

    @abstractmethod
    async def find_by_company_id(self, company_id: str) -> List[Contact]:
        pass

    @abstractmethod
    async def insert(self, data: ContactData) -> Contact:
        pass

    @abstractmethod
    async def update(self, contact_id: str, fields: Dict[str, Any]) -> Optional[Contact]:
        pass

    @abstractmethod
    async def delete(self, contact_id: str) -> bool:
        pass

    @abstractmethod
    async def upsert_by_external_id(self, data: ContactData) -> Contact:
        """Inserta o actualiza según el ID de HubSpot (ver ICompanyRepository)."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
