"""
CLI: HubSpot -> base local (una corrida completa).

Uso recomendado:
  - Ejecutar como job (cron/systemd timer) en vez de POST /api/v1/etl/sync-crm
    cuando la corrida puede tardar mas que el timeout del proxy.

Variables de entorno:
  - HUBSPOT_ACCESS_TOKEN (obligatoria)
  - DATABASE_URL o DATABASE_HOST/PORT/USER/PASSWORD/NAME

Ejecucion:
  python scripts/hubspot_sync.py
  python scripts/hubspot_sync.py --check-only
  python scripts/hubspot_sync.py --init-db
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

# Permite ejecutar este script desde cualquier cwd sin configurar PYTHONPATH.
_API_ROOT = Path(__file__).resolve().parents[1]
if str(_API_ROOT) not in sys.path:
    sys.path.insert(0, str(_API_ROOT))

# Cargar .env antes de importar settings
load_dotenv(_API_ROOT / ".env", override=False)
load_dotenv(_API_ROOT.parent / ".env", override=False)

from crm_etl.api.v1.dependencies.use_case_deps import build_crm_sync_use_cases
from crm_etl.core.config import settings
from crm_etl.infrastructure.database.session import close_db, init_db
from crm_etl.infrastructure.external.hubspot.hubspot_client import HubSpotClient
from crm_etl.shared.exceptions.base import AppException


async def _run(args: argparse.Namespace) -> int:
    if args.check_only:
        ok = await HubSpotClient.from_settings(settings).health_check()
        if ok:
            logger.success("HubSpot API accesible")
            return 0
        logger.error("HubSpot API no accesible")
        return 1

    if args.init_db:
        await init_db()

    use_cases = build_crm_sync_use_cases()
    try:
        summary = await use_cases.start_sync()
    except AppException as e:
        logger.error(f"Sincronizacion fallida [{e.error_code}]: {e.message}")
        return 1
    finally:
        status = use_cases.get_status()
        for error in status.errors:
            logger.warning(f"  - {error}")
        if status.errors_truncated:
            logger.warning(f"  ... y {status.errors_truncated} errores mas")

    logger.info(
        f"Sync OK: companies={summary.companies_synced}, contacts={summary.contacts_synced}, "
        f"synced_at={summary.synced_at.isoformat()}"
    )
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Sincroniza empresas y contactos desde HubSpot.")
    parser.add_argument(
        "--check-only",
        action="store_true",
        help="Solo verifica que la API de HubSpot responda con el token configurado.",
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Crea las tablas si no existen antes de sincronizar.",
    )
    args = parser.parse_args()

    if not settings.HUBSPOT_ACCESS_TOKEN:
        raise SystemExit("Falta variable de entorno obligatoria: HUBSPOT_ACCESS_TOKEN")

    async def _main() -> int:
        try:
            return await _run(args)
        finally:
            await close_db()

    return asyncio.run(_main())


if __name__ == "__main__":
    raise SystemExit(main())
