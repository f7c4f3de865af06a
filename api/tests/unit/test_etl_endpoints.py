"""
Tests del contrato HTTP de /api/v1/etl con el orquestador mockeado.
"""
from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from crm_etl.api.v1.dependencies.use_case_deps import get_crm_sync_use_cases
from crm_etl.domain.entities.sync_status import (
    SyncCounts,
    SyncHealth,
    SyncRun,
    SyncStatus,
    SyncSummary,
)
from crm_etl.shared.constants.sync_constants import SyncState
from crm_etl.shared.exceptions.sync import (
    FatalPipelineError,
    SyncConflictError,
    UpstreamUnavailableError,
)


NOW = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def mock_use_cases() -> MagicMock:
    uc = MagicMock()
    uc.start_sync = AsyncMock(
        return_value=SyncSummary(contacts_synced=7, companies_synced=3, synced_at=NOW)
    )
    uc.get_status = MagicMock(return_value=SyncStatus(
        state=SyncState.COMPLETED,
        started_at=NOW,
        completed_at=NOW,
        companies_processed=3,
        contacts_processed=7,
        contacts_skipped=1,
        errors=["Failed to sync contact 9: boom"],
        warnings=["Skipped contact 4: missing email"],
    ))
    uc.get_last_sync_info = AsyncMock(return_value=SyncCounts(contact_count=7, company_count=3))
    uc.get_health = AsyncMock(return_value=SyncHealth(
        is_running=False, last_sync_info=SyncCounts(contact_count=7, company_count=3)
    ))
    uc.list_runs = AsyncMock(return_value=[
        SyncRun(
            id=2,
            status=SyncState.FAILED,
            started_at=NOW,
            completed_at=NOW,
            companies_processed=0,
            contacts_processed=0,
            contacts_skipped=0,
            error_count=1,
            last_error="HubSpot API is not accessible",
        )
    ])
    return uc


@pytest.fixture
def app_with_mock(mock_use_cases: MagicMock):
    """Crea la app FastAPI con el orquestador mockeado via dependency_overrides."""
    from main import create_application
    app = create_application()
    app.dependency_overrides[get_crm_sync_use_cases] = lambda: mock_use_cases
    yield app
    app.dependency_overrides.clear()


async def _request(app, method: str, url: str):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.request(method, url)


@pytest.mark.asyncio
async def test_sync_crm_returns_summary(app_with_mock, mock_use_cases: MagicMock) -> None:
    response = await _request(app_with_mock, "POST", "/api/v1/etl/sync-crm")

    assert response.status_code == 200
    data = response.json()
    assert data["contacts_synced"] == 7
    assert data["companies_synced"] == 3
    assert data["message"] == "CRM data synced successfully"
    mock_use_cases.start_sync.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, status_code, error_code",
    [
        (SyncConflictError(), 409, "SYNC_ALREADY_RUNNING"),
        (UpstreamUnavailableError(), 502, "UPSTREAM_UNAVAILABLE"),
        (FatalPipelineError(RuntimeError("db caida")), 500, "SYNC_FAILED"),
    ],
)
async def test_sync_crm_maps_run_errors(
    app_with_mock, mock_use_cases: MagicMock, error, status_code: int, error_code: str
) -> None:
    mock_use_cases.start_sync.side_effect = error

    response = await _request(app_with_mock, "POST", "/api/v1/etl/sync-crm")

    assert response.status_code == status_code
    assert response.json()["error"] == error_code


@pytest.mark.asyncio
async def test_status_exposes_snapshot(app_with_mock) -> None:
    response = await _request(app_with_mock, "GET", "/api/v1/etl/status")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "completed"
    assert data["contacts_processed"] == 7
    assert data["contacts_skipped"] == 1
    assert data["errors"] == ["Failed to sync contact 9: boom"]
    assert data["warnings"] == ["Skipped contact 4: missing email"]


@pytest.mark.asyncio
async def test_info_returns_counts_or_null(app_with_mock, mock_use_cases: MagicMock) -> None:
    response = await _request(app_with_mock, "GET", "/api/v1/etl/info")
    assert response.json() == {"contact_count": 7, "company_count": 3}

    mock_use_cases.get_last_sync_info.return_value = None
    response = await _request(app_with_mock, "GET", "/api/v1/etl/info")
    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_health(app_with_mock) -> None:
    response = await _request(app_with_mock, "GET", "/api/v1/etl/health")

    assert response.status_code == 200
    assert response.json() == {
        "is_running": False,
        "last_sync_info": {"contact_count": 7, "company_count": 3},
    }


@pytest.mark.asyncio
async def test_runs_history(app_with_mock, mock_use_cases: MagicMock) -> None:
    response = await _request(app_with_mock, "GET", "/api/v1/etl/runs?limit=5")

    assert response.status_code == 200
    runs = response.json()
    assert runs[0]["status"] == "failed"
    assert runs[0]["last_error"] == "HubSpot API is not accessible"
    mock_use_cases.list_runs.assert_awaited_once_with(5)


@pytest.mark.asyncio
async def test_runs_history_rejects_invalid_limit(app_with_mock) -> None:
    response = await _request(app_with_mock, "GET", "/api/v1/etl/runs?limit=0")

    assert response.status_code == 422
