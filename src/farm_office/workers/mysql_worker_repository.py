from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Worker, WorkerProfile
from .repository import WorkerRepository

_COLUMNS = "worker_id, name, is_active, is_registered, registration_date, number_of_dependents"


def _row_to_worker(r: dict) -> Worker:
    return Worker(
        worker_id=int(r["worker_id"]),
        name=r["name"],
        is_active=bool(r.get("is_active", True)),
        is_registered=bool(r.get("is_registered", False)),
        registration_date=r.get("registration_date"),
        number_of_dependents=int(r.get("number_of_dependents") or 0),
    )


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[WorkerProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT name, is_registered, number_of_dependents FROM workers")
            return [
                WorkerProfile(
                    name=r["name"],
                    is_registered=bool(r["is_registered"]),
                    number_of_dependents=int(r.get("number_of_dependents") or 0),
                )
                for r in fetchall(cur)
            ]

    def list_workers(self) -> Sequence[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers ORDER BY name")
            return [_row_to_worker(r) for r in fetchall(cur)]

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE worker_id=%s", (worker_id,))
            row = fetchone(cur)
            return _row_to_worker(row) if row else None

    def create(self, worker: Worker) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO workers(name, is_active, is_registered, registration_date, number_of_dependents)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (
                    worker.name,
                    int(worker.is_active),
                    int(worker.is_registered),
                    worker.registration_date,
                    worker.number_of_dependents,
                ),
            )
            return int(cur.lastrowid)

    def update(self, worker: Worker) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE workers
                SET name=%s, is_active=%s, is_registered=%s, registration_date=%s, number_of_dependents=%s
                WHERE worker_id=%s
                """,
                (
                    worker.name,
                    int(worker.is_active),
                    int(worker.is_registered),
                    worker.registration_date,
                    worker.number_of_dependents,
                    worker.worker_id,
                ),
            )

    def delete_by_id(self, worker_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM workers WHERE worker_id=%s", (worker_id,))
            return cur.rowcount > 0
