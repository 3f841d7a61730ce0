from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Worker


class WorkerRepository(Protocol):
    """Repository interface for workers.

    Note (DIP): services depend on this interface, never on a concrete store.
    """

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        raise NotImplementedError

    def list_workers(self, *, active_only: bool = False) -> Sequence[Worker]:
        raise NotImplementedError

    def save(self, worker: Worker) -> None:
        """Insert or replace by `worker_id`."""

        raise NotImplementedError

    def delete_by_id(self, worker_id: str) -> bool:
        raise NotImplementedError
