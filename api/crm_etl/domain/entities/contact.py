"""
Entidad de dominio: Contact (Contacto).
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ContactData:
    """
    Campos canonicos de un contacto, sin identidad local.

    company_external_id conserva la referencia cruda de HubSpot
    (associatedcompanyid); no se persiste, solo sirve para saber si
    la resolucion a company_id fallo.
    """

    external_id: str
    email: str
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    company_id: Optional[str] = None
    company_external_id: Optional[str] = None

    @property
    def has_unresolved_company(self) -> bool:
        return bool(self.company_external_id) and self.company_id is None


@dataclass
class Contact:
    """Contacto almacenado localmente."""

    id: str
    external_id: str
    email: str
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    company_id: Optional[str] = None
    created_at: Optional[datetime] = None
