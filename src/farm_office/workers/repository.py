from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Worker, WorkerProfile


class WorkerDirectory(Protocol):
    """Read-only view of the workers used by payroll.

    Returns a full snapshot with no filtering.
    """

    def list_all(self) -> Sequence[WorkerProfile]:
        raise NotImplementedError


class WorkerRepository(WorkerDirectory, Protocol):
    def list_workers(self) -> Sequence[Worker]:
        raise NotImplementedError

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        raise NotImplementedError

    def create(self, worker: Worker) -> int:
        raise NotImplementedError

    def update(self, worker: Worker) -> None:
        raise NotImplementedError

    def delete_by_id(self, worker_id: int) -> bool:
        raise NotImplementedError
