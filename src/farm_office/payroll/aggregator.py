"""Payroll aggregation over daily work logs.

``compute_payroll`` turns the work logs of a period into one entry per worker
holding the amount earned on each day, or the absence marker for days the
worker missed. It is a pure function: it only reads its inputs and returns a
fresh mapping, so it never raises for well-typed input and can be called
concurrently.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from numbers import Number
from typing import Iterable, Union

from ..core.constants import ABSENCE_MARKER, ABSENCE_STATUS
from ..core.enums import WorkerCategory
from ..workers.model import WorkerProfile
from ..worklogs.model import WorkLogEntry

logger = logging.getLogger(__name__)

DayValue = Union[int, float, str]


@dataclass
class PayrollEntry:
    is_registered: bool
    number_of_dependents: int
    days: dict[str, DayValue] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "is_registered": self.is_registered,
            "number_of_dependents": self.number_of_dependents,
            "days": dict(self.days),
        }


def _is_amount(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def daily_value(entry: WorkLogEntry):
    """Production times unit price; 0 when either is missing or zero."""
    if entry.production_quantity and entry.unit_price:
        return entry.production_quantity * entry.unit_price
    return 0


def compute_payroll(
    start_date: str,
    end_date: str,
    category,
    work_logs: Iterable[WorkLogEntry],
    worker_profiles: Iterable[WorkerProfile],
) -> dict[str, PayrollEntry]:
    """Aggregate work logs into per-worker daily earnings.

    ``work_logs`` must already be restricted to ``[start_date, end_date]``;
    entries are processed in the order given. Entries for workers missing from
    ``worker_profiles`` are dropped, as are workers excluded by ``category``
    (a ``WorkerCategory`` or any raw filter value, unknown values meaning no
    filter).

    An absence ("Falta") replaces whatever was accumulated for that day with
    the absence marker. Any other entry adds its value to the day, counting a
    marker as 0, so a normal entry coming after an absence on the same date
    replaces the marker with its own value.
    """
    category = WorkerCategory.from_filter(category)
    profiles = {p.name: p for p in worker_profiles}

    payroll: dict[str, PayrollEntry] = {}
    for entry in work_logs:
        profile = profiles.get(entry.worker_name)
        if profile is None:
            continue
        if not category.admits(profile.is_registered):
            continue

        worker = payroll.get(entry.worker_name)
        if worker is None:
            worker = PayrollEntry(
                is_registered=profile.is_registered,
                number_of_dependents=profile.number_of_dependents,
            )
            payroll[entry.worker_name] = worker

        value = daily_value(entry)
        if entry.status == ABSENCE_STATUS:
            worker.days[entry.date] = ABSENCE_MARKER
        else:
            current = worker.days.get(entry.date)
            worker.days[entry.date] = (current if _is_amount(current) else 0) + value

    logger.debug(
        "Payroll %s..%s (%s): %d workers", start_date, end_date, category.value, len(payroll)
    )
    return payroll
