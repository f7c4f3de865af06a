"""
Casos de uso de la aplicacion.
"""
from .company_use_cases import CompanyUseCases
from .contact_use_cases import ContactUseCases
from .crm_sync_use_cases import CrmSyncUseCases

__all__ = ["CompanyUseCases", "ContactUseCases", "CrmSyncUseCases"]
