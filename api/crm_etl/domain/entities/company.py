"""
Entidad de dominio: Company (Empresa).
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CompanyData:
    """
    Campos canonicos de una empresa, sin identidad local.

    Es lo que produce el transformador a partir de un registro HubSpot
    y lo que reciben los casos de uso de creacion.
    """

    external_id: str
    name: str
    domain: str


@dataclass
class Company:
    """
    Empresa almacenada localmente.

    - id: UUID local, asignado una sola vez en el primer insert.
    - external_id: id de HubSpot, unico e inmutable.
    - created_at: se fija en el insert y nunca se sobrescribe.
    """

    id: str
    external_id: str
    name: str
    domain: str
    created_at: Optional[datetime] = None
