from datetime import datetime, timezone

from crm_etl.application.services.sync_status_store import SyncStatusStore
from crm_etl.shared.constants.sync_constants import SyncState


NOW = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_initial_status_is_idle() -> None:
    status = SyncStatusStore().get_status()

    assert status.state == SyncState.IDLE
    assert status.started_at is None
    assert status.errors == []


def test_snapshot_is_a_copy() -> None:
    store = SyncStatusStore()
    store.try_begin(NOW)
    store.add_error("uno")

    snapshot = store.get_status()
    snapshot.errors.append("externo")
    snapshot.companies_processed = 99

    current = store.get_status()
    assert current.errors == ["uno"]
    assert current.companies_processed == 0


def test_try_begin_is_exclusive() -> None:
    store = SyncStatusStore()

    assert store.try_begin(NOW) is True
    store.increment("companies_processed")

    assert store.try_begin(NOW) is False
    # La segunda llamada no toca la corrida en curso
    assert store.get_status().companies_processed == 1


def test_begin_resets_previous_run() -> None:
    store = SyncStatusStore()
    store.try_begin(NOW)
    store.increment("contacts_processed", 5)
    store.add_error("fallo")
    store.add_warning("aviso")
    store.finish(SyncState.COMPLETED, NOW)

    assert store.try_begin(NOW) is True

    status = store.get_status()
    assert status.state == SyncState.RUNNING
    assert status.contacts_processed == 0
    assert status.errors == []
    assert status.warnings == []
    assert status.completed_at is None


def test_increment_returns_new_value() -> None:
    store = SyncStatusStore()
    store.try_begin(NOW)

    assert store.increment("contacts_skipped") == 1
    assert store.increment("contacts_skipped", 2) == 3


def test_error_list_is_capped() -> None:
    store = SyncStatusStore(max_errors=2)
    store.try_begin(NOW)

    for i in range(5):
        store.add_error(f"error {i}")

    status = store.get_status()
    assert status.errors == ["error 0", "error 1"]
    assert status.errors_truncated == 3
    assert status.last_error == "error 4"


def test_finish_sets_state_and_returns_snapshot() -> None:
    store = SyncStatusStore()
    store.try_begin(NOW)

    final = store.finish(SyncState.FAILED, NOW)

    assert final.state == SyncState.FAILED
    assert final.completed_at == NOW
    assert store.get_status().is_running is False
