from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import optional_text, require_bool, require_non_empty
from ..core.exceptions import NotFoundError
from .model import Farm
from .repository import FarmRepository


class FarmService:
    """Use case: manage farms (admin)."""

    def __init__(self, farms: FarmRepository):
        self._farms = farms

    def list_all(self) -> Sequence[Farm]:
        return self._farms.list_all()

    def get(self, farm_id: int) -> Farm:
        farm = self._farms.get_by_id(int(farm_id))
        if not farm:
            raise NotFoundError("Fazenda não encontrada")
        return farm

    def create(self, *, name: str, owner: Optional[str] = None, city: Optional[str] = None, is_active: bool = True) -> Farm:
        farm = Farm(
            farm_id=None,
            name=require_non_empty(name, "Nome da fazenda"),
            owner=optional_text(owner),
            city=optional_text(city),
            is_active=require_bool(is_active, "Ativa", default=True),
        )
        farm_id = self._farms.create(farm)
        return replace(farm, farm_id=farm_id)

    def update(self, farm_id: int, **changes) -> Farm:
        farm = self.get(farm_id)
        if "name" in changes:
            changes["name"] = require_non_empty(changes["name"], "Nome da fazenda")
        for key in ("owner", "city"):
            if key in changes:
                changes[key] = optional_text(changes[key])
        if "is_active" in changes:
            changes["is_active"] = require_bool(changes["is_active"], "Ativa", default=farm.is_active)

        updated = replace(farm, **changes)
        self._farms.update(updated)
        return updated

    def delete(self, farm_id: int) -> Farm:
        farm = self.get(farm_id)
        self._farms.delete_by_id(int(farm_id))
        return farm
