from __future__ import annotations

from typing import Optional, Sequence

from ..database.memory_store import MemoryStore
from .mapper import worker_from_row, worker_to_row
from .model import Worker
from .repository import WorkerRepository


class InMemoryWorkerRepository(WorkerRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        row = self._store.workers.get(str(worker_id))
        return worker_from_row(row) if row else None

    def list_workers(self, *, active_only: bool = False) -> Sequence[Worker]:
        workers = [worker_from_row(r) for r in self._store.workers.values()]
        if active_only:
            workers = [w for w in workers if w.is_active]
        workers.sort(key=lambda w: w.name.lower())
        return workers

    def save(self, worker: Worker) -> None:
        self._store.workers[worker.worker_id] = worker_to_row(worker)
        self._store.flush()

    def delete_by_id(self, worker_id: str) -> bool:
        worker_id = str(worker_id)
        if worker_id not in self._store.workers:
            return False
        del self._store.workers[worker_id]
        # mirror ON DELETE CASCADE of the SQL schema
        for key in [k for k in self._store.attendance if k[0] == worker_id]:
            del self._store.attendance[key]
        self._store.flush()
        return True
