"""
Tipos de la integracion HubSpot.

Se mantienen libres de I/O para poder testearlos facilmente.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from crm_etl.shared.utils.datetime_utils import DateTimeUtils


@dataclass(frozen=True)
class HubSpotRecord:
    """
    Registro crudo de HubSpot.

    properties trae solo las propiedades pedidas; HubSpot devuelve
    null para las que el objeto no tiene.
    """

    external_id: str
    properties: dict[str, Optional[str]] = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    archived: bool = False

    def get(self, name: str) -> Optional[str]:
        return self.properties.get(name)

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> "HubSpotRecord":
        """Construye el registro desde un item de `results`."""
        raw_props = raw.get("properties") or {}
        props = {
            key: (None if value is None else str(value))
            for key, value in raw_props.items()
        }
        return cls(
            external_id=str(raw["id"]),
            properties=props,
            created_at=DateTimeUtils.from_iso_string(raw.get("createdAt")),
            updated_at=DateTimeUtils.from_iso_string(raw.get("updatedAt")),
            archived=bool(raw.get("archived", False)),
        )
