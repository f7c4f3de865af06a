"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .company_dto import CompanyCreateDTO, CompanyUpdateDTO, CompanyResponseDTO, CompanyStatsDTO
from .contact_dto import ContactCreateDTO, ContactUpdateDTO, ContactResponseDTO, ContactStatsDTO
from .sync_dto import (
    SyncSummaryDTO,
    SyncStatusDTO,
    SyncCountsDTO,
    SyncHealthDTO,
    SyncRunDTO,
)

__all__ = [
    "CompanyCreateDTO",
    "CompanyUpdateDTO",
    "CompanyResponseDTO",
    "CompanyStatsDTO",
    "ContactCreateDTO",
    "ContactUpdateDTO",
    "ContactResponseDTO",
    "ContactStatsDTO",
    "SyncSummaryDTO",
    "SyncStatusDTO",
    "SyncCountsDTO",
    "SyncHealthDTO",
    "SyncRunDTO",
]
