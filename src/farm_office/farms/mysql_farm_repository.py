from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Farm
from .repository import FarmRepository


def _row_to_farm(r: dict) -> Farm:
    return Farm(
        farm_id=int(r["farm_id"]),
        name=r["name"],
        owner=r.get("owner"),
        city=r.get("city"),
        is_active=bool(r.get("is_active", True)),
    )


class MySQLFarmRepository(FarmRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Farm]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT farm_id, name, owner, city, is_active FROM farms ORDER BY name")
            return [_row_to_farm(r) for r in fetchall(cur)]

    def get_by_id(self, farm_id: int) -> Optional[Farm]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT farm_id, name, owner, city, is_active FROM farms WHERE farm_id=%s", (farm_id,))
            row = fetchone(cur)
            return _row_to_farm(row) if row else None

    def create(self, farm: Farm) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO farms(name, owner, city, is_active) VALUES(%s,%s,%s,%s)",
                (farm.name, farm.owner, farm.city, int(farm.is_active)),
            )
            return int(cur.lastrowid)

    def update(self, farm: Farm) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE farms SET name=%s, owner=%s, city=%s, is_active=%s WHERE farm_id=%s",
                (farm.name, farm.owner, farm.city, int(farm.is_active), farm.farm_id),
            )

    def delete_by_id(self, farm_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM farms WHERE farm_id=%s", (farm_id,))
            return cur.rowcount > 0
