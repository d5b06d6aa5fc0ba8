from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ServiceType
from .repository import ServiceTypeRepository


def _row_to_service(r: dict) -> ServiceType:
    return ServiceType(
        service_id=int(r["service_id"]),
        name=r["name"],
        price=float(r["price"]),
        is_active=bool(r.get("is_active", True)),
    )


class MySQLServiceTypeRepository(ServiceTypeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ServiceType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT service_id, name, price, is_active FROM service_types ORDER BY name")
            return [_row_to_service(r) for r in fetchall(cur)]

    def get_by_id(self, service_id: int) -> Optional[ServiceType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT service_id, name, price, is_active FROM service_types WHERE service_id=%s",
                (service_id,),
            )
            row = fetchone(cur)
            return _row_to_service(row) if row else None

    def create(self, service: ServiceType) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO service_types(name, price, is_active) VALUES(%s,%s,%s)",
                (service.name, service.price, int(service.is_active)),
            )
            return int(cur.lastrowid)

    def update(self, service: ServiceType) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE service_types SET name=%s, price=%s, is_active=%s WHERE service_id=%s",
                (service.name, service.price, int(service.is_active), service.service_id),
            )

    def delete_by_id(self, service_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM service_types WHERE service_id=%s", (service_id,))
            return cur.rowcount > 0
