"""
Integracion con la API de objetos CRM v3 de HubSpot (solo lectura).

El cliente solo pagina y entrega registros crudos; la normalizacion
y la persistencia ocurren en las capas de aplicacion e infraestructura.
"""
from .hubspot_client import HubSpotClient, HubSpotCredentials, UpstreamError
from .types import HubSpotRecord

__all__ = [
    "HubSpotClient",
    "HubSpotCredentials",
    "HubSpotRecord",
    "UpstreamError",
]
