"""
Router principal de la API v1.
Agrupa todos los endpoints de la version 1.
"""
from fastapi import APIRouter

from crm_etl.api.v1.endpoints import etl, companies, contacts


# Router principal de la API v1
api_router = APIRouter(prefix="/v1")

# Incluir routers de endpoints especificos
api_router.include_router(etl.router)
api_router.include_router(companies.router)
api_router.include_router(contacts.router)
