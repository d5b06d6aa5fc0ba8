from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_optional_float, db_cursor, fetchall
from .model import WorkLogEntry
from .repository import WorkLogRepository

_SELECT = """
    SELECT entry_id, work_date, worker_name, status, details, farm, production, unit_price, created_at
    FROM work_logs
"""


def _row_to_entry(r: dict) -> WorkLogEntry:
    work_date = r["work_date"]
    return WorkLogEntry(
        entry_id=int(r["entry_id"]),
        date=work_date.isoformat() if isinstance(work_date, date) else str(work_date),
        worker_name=r["worker_name"],
        status=r.get("status"),
        details=r.get("details"),
        farm=r.get("farm"),
        production_quantity=as_optional_float(r.get("production")),
        unit_price=as_optional_float(r.get("unit_price")),
        created_at=r.get("created_at"),
    )


class MySQLWorkLogRepository(WorkLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add_many(self, entries: Sequence[WorkLogEntry]) -> Sequence[WorkLogEntry]:
        saved: list[WorkLogEntry] = []
        with db_cursor(self._conn_factory) as (_, cur):
            for e in entries:
                cur.execute(
                    """
                    INSERT INTO work_logs(work_date, worker_name, status, details, farm, production, unit_price)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (e.date, e.worker_name, e.status, e.details, e.farm, e.production_quantity, e.unit_price),
                )
                saved.append(replace(e, entry_id=int(cur.lastrowid)))
        return saved

    def find_in_range(self, start_date: str, end_date: str) -> Sequence[WorkLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE work_date BETWEEN %s AND %s ORDER BY work_date, entry_id",
                (start_date, end_date),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]

    def find_by_month(self, year: int, month: int) -> Sequence[WorkLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE YEAR(work_date)=%s AND MONTH(work_date)=%s ORDER BY work_date, entry_id",
                (int(year), int(month)),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]
