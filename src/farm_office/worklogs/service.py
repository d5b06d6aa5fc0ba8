from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ..common.datetime_utils import require_iso_date
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from .model import WorkLogEntry
from .repository import WorkLogRepository

logger = logging.getLogger(__name__)


class WorkLogService:
    """Use case: record daily work logs and list them by period."""

    def __init__(self, work_logs: WorkLogRepository):
        self._work_logs = work_logs

    def record_many(self, entries: Sequence[WorkLogEntry]) -> Sequence[WorkLogEntry]:
        """Save a whole day sheet at once.

        Every entry is validated before anything is written, so a bad row
        rejects the batch.
        """
        if not entries:
            raise ValidationError("Nenhum registro enviado")

        cleaned: list[WorkLogEntry] = []
        for i, e in enumerate(entries, start=1):
            try:
                cleaned.append(
                    replace(
                        e,
                        date=require_iso_date(e.date, "Data"),
                        worker_name=require_non_empty(e.worker_name, "Nome"),
                    )
                )
            except ValidationError as exc:
                raise ValidationError(f"Registro {i}: {exc}")

        saved = self._work_logs.add_many(cleaned)
        logger.info("Recorded %d work log entries", len(saved))
        return saved

    def list_by_month(self, *, year, month) -> Sequence[WorkLogEntry]:
        if not year or not month:
            raise ValidationError("Ano e mês são obrigatórios.")
        try:
            y, m = int(year), int(month)
        except (TypeError, ValueError):
            raise ValidationError("Ano e mês devem ser numéricos.")
        if not 1 <= m <= 12:
            raise ValidationError("Mês inválido.")

        return sorted(self._work_logs.find_by_month(y, m), key=lambda e: e.date)

    def list_in_range(self, *, start, end) -> Sequence[WorkLogEntry]:
        if not start or not end:
            raise ValidationError("Data inicial e data final são obrigatórias.")
        start_s = require_iso_date(start, "Data inicial")
        end_s = require_iso_date(end, "Data final")
        if start_s > end_s:
            raise ValidationError("Data inicial deve ser anterior à data final.")

        return sorted(self._work_logs.find_in_range(start_s, end_s), key=lambda e: e.date)
