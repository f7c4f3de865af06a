"""
Estado en memoria de la corrida de sincronizacion.

Es el unico lugar donde se muta SyncStatus. Todo acceso pasa por un
threading.Lock: el endpoint puede consultar el estado mientras la
corrida avanza y el CLI puede correr en otro thread.
"""
import copy
import threading
from datetime import datetime

from crm_etl.domain.entities.sync_status import SyncStatus
from crm_etl.shared.constants.sync_constants import SyncState


class SyncStatusStore:
    """Dueño del SyncStatus; hacia afuera solo salen copias."""

    def __init__(self, max_errors: int = 1000):
        self._max_errors = max_errors
        self._status = SyncStatus()
        self._lock = threading.Lock()

    def get_status(self) -> SyncStatus:
        with self._lock:
            return copy.deepcopy(self._status)

    def try_begin(self, started_at: datetime) -> bool:
        """
        Pasa a RUNNING con contadores y listas nuevas.

        Returns:
            bool: False si ya habia una corrida en curso (no cambia nada)
        """
        with self._lock:
            if self._status.state == SyncState.RUNNING:
                return False
            self._status = SyncStatus(state=SyncState.RUNNING, started_at=started_at)
            return True

    def increment(self, counter: str, amount: int = 1) -> int:
        """Suma al contador y devuelve el valor nuevo."""
        with self._lock:
            value = getattr(self._status, counter) + amount
            setattr(self._status, counter, value)
            return value

    def add_error(self, message: str) -> None:
        with self._lock:
            self._status.last_error = message
            if len(self._status.errors) < self._max_errors:
                self._status.errors.append(message)
            else:
                self._status.errors_truncated += 1

    def add_warning(self, message: str) -> None:
        with self._lock:
            self._status.warnings.append(message)

    def finish(self, state: SyncState, completed_at: datetime) -> SyncStatus:
        """Cierra la corrida y devuelve una copia del estado final."""
        with self._lock:
            self._status.state = state
            self._status.completed_at = completed_at
            return copy.deepcopy(self._status)
