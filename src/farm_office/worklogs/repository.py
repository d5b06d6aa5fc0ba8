from __future__ import annotations

from typing import Protocol, Sequence

from .model import WorkLogEntry


class WorkLogReader(Protocol):
    """Read side used by payroll."""

    def find_in_range(self, start_date: str, end_date: str) -> Sequence[WorkLogEntry]:
        """All entries whose date is within [start_date, end_date], date-ascending."""

        raise NotImplementedError


class WorkLogRepository(WorkLogReader, Protocol):
    def add_many(self, entries: Sequence[WorkLogEntry]) -> Sequence[WorkLogEntry]:
        """Insert all entries in one transaction and return them with ids."""

        raise NotImplementedError

    def find_by_month(self, year: int, month: int) -> Sequence[WorkLogEntry]:
        raise NotImplementedError
