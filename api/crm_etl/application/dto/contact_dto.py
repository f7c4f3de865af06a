"""
DTOs relacionados con contactos.
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class ContactCreateDTO(BaseModel):
    """DTO para crear un contacto."""

    hubspot_id: str = Field(..., min_length=1, max_length=255, description="ID del contacto en HubSpot")
    email: str = Field(..., min_length=3, max_length=255, description="Email (unico)")
    firstname: Optional[str] = Field(None, max_length=255)
    lastname: Optional[str] = Field(None, max_length=255)
    company_id: Optional[str] = Field(None, description="ID local de la empresa")


class ContactUpdateDTO(BaseModel):
    """
    DTO para actualizar parcialmente un contacto.

    Solo se aplican los campos enviados; company_id=null desvincula la empresa.
    """

    hubspot_id: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = Field(None, min_length=3, max_length=255)
    firstname: Optional[str] = Field(None, max_length=255)
    lastname: Optional[str] = Field(None, max_length=255)
    company_id: Optional[str] = None


class ContactResponseDTO(BaseModel):
    """DTO de respuesta para un contacto."""

    id: str
    hubspot_id: str
    email: str
    firstname: Optional[str]
    lastname: Optional[str]
    company_id: Optional[str]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class ContactStatsDTO(BaseModel):
    total: int
