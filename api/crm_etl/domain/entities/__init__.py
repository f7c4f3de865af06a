"""
Entidades del dominio.
"""
from crm_etl.domain.entities.company import Company, CompanyData
from crm_etl.domain.entities.contact import Contact, ContactData
from crm_etl.domain.entities.sync_status import (
    SyncStatus,
    SyncCounts,
    SyncSummary,
    SyncHealth,
    SyncRun,
)

__all__ = [
    "Company",
    "CompanyData",
    "Contact",
    "ContactData",
    "SyncStatus",
    "SyncCounts",
    "SyncSummary",
    "SyncHealth",
    "SyncRun",
]
