from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import require_iso_date
from ..core.enums import WorkerCategory
from ..core.exceptions import ValidationError
from ..workers.repository import WorkerDirectory
from ..worklogs.repository import WorkLogReader
from .aggregator import PayrollEntry, compute_payroll

logger = logging.getLogger(__name__)


class PayrollReportService:
    """Builds the payroll report for a period from the stored work logs."""

    def __init__(self, work_logs: WorkLogReader, workers: WorkerDirectory):
        self._work_logs = work_logs
        self._workers = workers

    def build_payroll(
        self,
        *,
        start: Optional[str],
        end: Optional[str],
        category_filter: Optional[str],
    ) -> dict[str, PayrollEntry]:
        if not start or not end or not category_filter:
            raise ValidationError("Data inicial, data final e filtro são obrigatórios.")

        start_s = require_iso_date(start, "Data inicial")
        end_s = require_iso_date(end, "Data final")
        if start_s > end_s:
            raise ValidationError("Data inicial deve ser anterior à data final.")

        category = WorkerCategory.from_filter(category_filter)
        logs = self._work_logs.find_in_range(start_s, end_s)
        profiles = self._workers.list_all()

        payroll = compute_payroll(start_s, end_s, category, logs, profiles)
        logger.info(
            "Payroll report %s..%s filter=%s: %d entries -> %d workers",
            start_s, end_s, category.value, len(logs), len(payroll),
        )
        return payroll

    @staticmethod
    def to_json(payroll: dict[str, PayrollEntry]) -> dict:
        return {name: entry.to_dict() for name, entry in payroll.items()}
