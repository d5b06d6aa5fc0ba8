from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class WorkerProfile:
    """What payroll needs to know about a worker, keyed by name."""

    name: str
    is_registered: bool
    number_of_dependents: int = 0


@dataclass(frozen=True)
class Worker:
    """Domain entity: a field worker.

    ``is_registered`` is the formal labor-registration status.
    """

    worker_id: Optional[int]
    name: str
    is_active: bool = True
    is_registered: bool = False
    registration_date: Optional[date] = None
    number_of_dependents: int = 0

    def profile(self) -> WorkerProfile:
        return WorkerProfile(
            name=self.name,
            is_registered=self.is_registered,
            number_of_dependents=self.number_of_dependents,
        )
