"""
Cliente minimo de la API CRM v3 de HubSpot.

Cubre:
- requests (en un thread via asyncio.to_thread)
- paginacion por cursor 'after'
- pausa fija entre paginas para no pisar el rate limit
- sin reintentos: cualquier fallo aborta el recorrido
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, AsyncIterator, Optional, Sequence

import requests
from loguru import logger

from .types import HubSpotRecord


@dataclass(frozen=True)
class HubSpotCredentials:
    access_token: str


class UpstreamError(RuntimeError):
    """Error de integracion con HubSpot (transporte, HTTP no 2xx o payload invalido)."""


class HubSpotClient:
    """
    Cliente HTTP de HubSpot. Expone un async generator de paginas.

    Importante:
    - No transforma propiedades: eso lo hace RecordTransformer.
    - Cada llamada a iter_pages arranca desde la primera pagina.
    """

    def __init__(
        self,
        credentials: HubSpotCredentials,
        *,
        session: Optional[requests.Session] = None,
        base_url: str = "https://api.hubapi.com",
        timeout_s: float = 30.0,
        page_delay_ms: int = 100,
    ) -> None:
        self._creds = credentials
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._page_delay_s = max(page_delay_ms, 0) / 1000.0
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, config: Any, *, session: Optional[requests.Session] = None) -> "HubSpotClient":
        return cls(
            HubSpotCredentials(access_token=config.HUBSPOT_ACCESS_TOKEN or ""),
            session=session,
            base_url=config.HUBSPOT_API_BASE_URL,
            timeout_s=config.HUBSPOT_TIMEOUT_S,
            page_delay_ms=config.HUBSPOT_PAGE_DELAY_MS,
        )

    async def iter_pages(
        self,
        resource: str,
        *,
        page_size: int = 100,
        properties: Optional[Sequence[str]] = None,
    ) -> AsyncIterator[list[HubSpotRecord]]:
        """
        Itera las paginas de /crm/v3/objects/{resource}.

        - La pausa entre paginas se aplica solo entre dos requests.
        - Termina cuando la respuesta no trae paging.next.after.
        """
        url = f"{self._base_url}/crm/v3/objects/{resource}"
        after: Optional[str] = None
        page_number = 0

        while True:
            if page_number > 0 and self._page_delay_s:
                await asyncio.sleep(self._page_delay_s)

            params: dict[str, Any] = {"limit": page_size}
            if properties:
                params["properties"] = ",".join(properties)
            if after:
                params["after"] = after

            payload = await asyncio.to_thread(self._request_json, "GET", url, params)
            page_number += 1

            results = payload.get("results")
            if not isinstance(results, list):
                raise UpstreamError(f"HubSpot devolvio una pagina de {resource} sin 'results'")

            records = [self._parse_record(resource, raw) for raw in results]
            after = self._next_cursor(payload)

            logger.debug(
                f"HubSpot {resource}: pagina {page_number} con {len(records)} registros"
                f"{' (ultima)' if not after else ''}"
            )
            yield records

            if not after:
                break

    async def health_check(self) -> bool:
        """
        Verifica que la API responda con el token configurado.

        Nunca levanta por errores HTTP: devuelve False.
        """
        url = f"{self._base_url}/crm/v3/objects/contacts"
        try:
            await asyncio.to_thread(
                self._request_json, "GET", url, {"limit": 1, "properties": "email"}
            )
        except UpstreamError as e:
            logger.warning(f"Health check de HubSpot fallido: {e}")
            return False
        return True

    @staticmethod
    def _parse_record(resource: str, raw: Any) -> HubSpotRecord:
        if not isinstance(raw, dict) or not raw.get("id"):
            # Preferimos fallar temprano y visible.
            raise UpstreamError(f"HubSpot devolvio un registro de {resource} sin 'id'")
        return HubSpotRecord.from_payload(raw)

    @staticmethod
    def _next_cursor(payload: dict[str, Any]) -> Optional[str]:
        paging = payload.get("paging") or {}
        next_page = paging.get("next") or {}
        after = next_page.get("after")
        return str(after) if after else None

    def _request_json(self, method: str, url: str, params: dict[str, Any]) -> dict[str, Any]:
        """Request HTTP sincrono. Cualquier fallo se traduce a UpstreamError."""
        headers = {
            "Authorization": f"Bearer {self._creds.access_token}",
            "Content-Type": "application/json",
        }

        try:
            resp = self._session.request(
                method=method,
                url=url,
                params=params,
                headers=headers,
                timeout=self._timeout_s,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"HubSpot request fallo: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise UpstreamError(f"HubSpot request fallo {resp.status_code}: {resp.text}")

        try:
            payload = resp.json()
        except ValueError as e:
            raise UpstreamError("HubSpot devolvio una respuesta que no es JSON") from e

        if not isinstance(payload, dict):
            raise UpstreamError("HubSpot devolvio un payload inesperado")
        return payload
