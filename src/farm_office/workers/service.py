from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_bool, require_non_empty, require_non_negative_int
from ..core.exceptions import NotFoundError, ValidationError
from .model import Worker
from .repository import WorkerRepository


class WorkerService:
    """Use case: manage the worker roster (admin)."""

    def __init__(self, workers: WorkerRepository):
        self._workers = workers

    @staticmethod
    def _registration_date(value) -> Optional[date]:
        if value is None or isinstance(value, date):
            return value
        v = str(value).strip()
        if not v:
            return None
        try:
            # Accept full ISO timestamps as sent by browsers ("2025-08-01T00:00:00.000Z").
            return parse_iso_date(v[:10])
        except ValueError:
            raise ValidationError("Data de registro inválida (use AAAA-MM-DD)")

    @staticmethod
    def _dependents(value) -> int:
        if value is None or value == "":
            return 0
        return require_non_negative_int(value, "Número de filhos")

    def list_all(self) -> Sequence[Worker]:
        return self._workers.list_workers()

    def get(self, worker_id: int) -> Worker:
        worker = self._workers.get_by_id(int(worker_id))
        if not worker:
            raise NotFoundError("Trabalhador não encontrado")
        return worker

    def create(
        self,
        *,
        name: str,
        is_active: bool = True,
        is_registered: bool = False,
        registration_date=None,
        number_of_dependents=0,
    ) -> Worker:
        worker = Worker(
            worker_id=None,
            name=require_non_empty(name, "Nome do trabalhador"),
            is_active=require_bool(is_active, "Ativo", default=True),
            is_registered=require_bool(is_registered, "Registrado", default=False),
            registration_date=self._registration_date(registration_date),
            number_of_dependents=self._dependents(number_of_dependents),
        )
        return replace(worker, worker_id=self._workers.create(worker))

    def update(self, worker_id: int, **changes) -> Worker:
        worker = self.get(worker_id)
        if "name" in changes:
            changes["name"] = require_non_empty(changes["name"], "Nome do trabalhador")
        if "is_active" in changes:
            changes["is_active"] = require_bool(changes["is_active"], "Ativo", default=worker.is_active)
        if "is_registered" in changes:
            changes["is_registered"] = require_bool(changes["is_registered"], "Registrado", default=worker.is_registered)
        if "registration_date" in changes:
            changes["registration_date"] = self._registration_date(changes["registration_date"])
        if "number_of_dependents" in changes:
            changes["number_of_dependents"] = self._dependents(changes["number_of_dependents"])

        updated = replace(worker, **changes)
        self._workers.update(updated)
        return updated

    def delete(self, worker_id: int) -> Worker:
        worker = self.get(worker_id)
        self._workers.delete_by_id(int(worker_id))
        return worker
