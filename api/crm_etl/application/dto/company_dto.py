"""
DTOs relacionados con empresas.
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class CompanyCreateDTO(BaseModel):
    """DTO para crear una empresa."""

    hubspot_id: str = Field(..., min_length=1, max_length=255, description="ID de la empresa en HubSpot")
    name: str = Field(..., min_length=1, max_length=255, description="Nombre de la empresa")
    domain: str = Field(..., min_length=1, max_length=255, description="Dominio web")


class CompanyUpdateDTO(BaseModel):
    """DTO para actualizar parcialmente una empresa."""

    hubspot_id: Optional[str] = Field(None, min_length=1, max_length=255)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    domain: Optional[str] = Field(None, min_length=1, max_length=255)


class CompanyResponseDTO(BaseModel):
    """DTO de respuesta para una empresa."""

    id: str
    hubspot_id: str
    name: str
    domain: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class CompanyStatsDTO(BaseModel):
    total: int
